import os
from flask import Flask, jsonify
from flask_cors import CORS  # type: ignore
from dotenv import load_dotenv  # type: ignore
from werkzeug.exceptions import RequestEntityTooLarge  # type: ignore

# .env must be loaded before config.py reads the environment
load_dotenv()
import config as _config  # noqa: E402  project-level config module


def create_app(config_object=None, storage=None):
    """Application factory for the catalog backend.

    ``storage`` replaces the database-backed Storage used by the API
    handlers (handy for tests). The schema is created and the admin account
    seeded before the app is returned.
    """
    app = Flask(__name__, instance_relative_config=False)

    # Base config first, then the selected environment or the caller's object on top
    app.config.from_object(_config.Config)
    if config_object:
        app.config.from_object(config_object)
    else:
        cfg_name = os.environ.get('FLASK_CONFIG', '').lower()
        if cfg_name == 'production':
            app.config.from_object(_config.ProductionConfig)
        elif cfg_name == 'development':
            app.config.from_object(_config.DevelopmentConfig)

    CORS(app, resources={r"/api/*": {"origins": app.config.get('CORS_ORIGINS', '*')}})

    @app.after_request
    def _secure_headers(resp):
        resp.headers.setdefault('X-Content-Type-Options', 'nosniff')
        resp.headers.setdefault('X-Frame-Options', 'DENY')
        resp.headers.setdefault('Referrer-Policy', 'strict-origin-when-cross-origin')
        return resp

    @app.errorhandler(RequestEntityTooLarge)
    def _too_large(e):
        return jsonify({'error': e.description}), 413

    @app.route('/health')
    def health():
        return {'status': 'ok'}, 200

    from .extensions import db, migrate
    db.init_app(app)
    migrate.init_app(app, db)
    if storage is not None:
        app.extensions['catalog.storage'] = storage

    from .api import api_bp
    app.register_blueprint(api_bp, url_prefix='/api')

    from .uploads import uploads_bp
    app.register_blueprint(uploads_bp)

    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

    from .schema import ensure_schema
    with app.app_context():
        ensure_schema(db, app.config['ADMIN_USERNAME'], app.config['ADMIN_PASSWORD'])

    return app


from .extensions import db  # noqa: E402
from .models import User, Product  # noqa: E402

__all__ = ["create_app", "db", "User", "Product"]
