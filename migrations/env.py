import logging
from logging.config import fileConfig

from alembic import context  # type: ignore
from flask import current_app

config = context.config

if config.config_file_name:
    try:
        fileConfig(config.config_file_name)
    except (KeyError, ValueError):
        pass

logger = logging.getLogger('alembic.env')

db = current_app.extensions['migrate'].db
config.set_main_option(
    'sqlalchemy.url',
    db.engine.url.render_as_string(hide_password=False).replace('%', '%%'),
)
target_metadata = db.metadata


def run_migrations_offline() -> None:
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = db.engine
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
