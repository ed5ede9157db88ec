"""Catalog backend starter.

Builds the Flask app via the factory (which creates the schema and seeds the
admin account), optionally applies Alembic migrations, and serves on
HOST/PORT.
"""
import os
import logging

from catalog import create_app


def _bool_env(name: str, default: bool = False) -> bool:
    val = os.environ.get(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


def configure_logging():
    level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def maybe_apply_migrations(app):
    if not _bool_env("APPLY_MIGRATIONS", False):
        return
    from flask_migrate import upgrade  # type: ignore
    with app.app_context():
        upgrade()
    logging.getLogger(__name__).info("Applied database migrations (upgrade)")


def main():
    configure_logging()
    app = create_app()
    maybe_apply_migrations(app)

    host = os.environ.get("HOST") or os.environ.get("FLASK_RUN_HOST") or "127.0.0.1"
    port = int(os.environ.get("PORT") or os.environ.get("FLASK_RUN_PORT") or 3000)
    debug = _bool_env("DEBUG", _bool_env("FLASK_DEBUG", False))

    log = logging.getLogger(__name__)
    log.info("Starting catalog backend on http://%s:%s (debug=%s)", host, port, debug)
    log.info("Uploads stored in %s", app.config["UPLOAD_FOLDER"])
    app.run(host=host, port=port, debug=debug, threaded=True, use_reloader=debug)


if __name__ == "__main__":
    main()
