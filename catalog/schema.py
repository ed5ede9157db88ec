import logging

from sqlalchemy import inspect, select, text  # type: ignore
from sqlalchemy.exc import OperationalError  # type: ignore

from .errors import ConflictError
from .models import Product, User
from .storage import Storage

logger = logging.getLogger(__name__)


def _column_names(engine, table: str) -> set[str]:
    return {col['name'] for col in inspect(engine).get_columns(table)}


def ensure_image_column(engine) -> bool:
    """Add products.image to a table created before the column existed.

    Safe to call on every startup. Returns True only if the column was added.
    """
    if 'image' in _column_names(engine, Product.__tablename__):
        return False
    try:
        with engine.begin() as conn:
            conn.execute(text("ALTER TABLE products ADD COLUMN image TEXT"))
    except OperationalError:
        # Another process may have added it between the check and the ALTER
        if 'image' in _column_names(engine, Product.__tablename__):
            return False
        raise
    logger.info("Added missing image column to products table")
    return True


def seed_admin(storage: Storage, username: str = 'admin', password: str = '123') -> bool:
    """Insert the admin account unless a user with that name already exists."""
    if storage.first(select(User).where(User.username == username)) is not None:
        return False
    try:
        storage.add(User(username=username, password=password, role='admin'))
    except ConflictError:
        return False
    logger.info("Seeded admin account %r", username)
    return True


def ensure_schema(db, admin_username: str = 'admin', admin_password: str = '123'):
    """Create tables, migrate old product tables and seed the admin account."""
    db.create_all()
    ensure_image_column(db.engine)
    seed_admin(Storage(db.session), admin_username, admin_password)
    logger.info("Database ready at %s", db.engine.url.render_as_string(hide_password=True))
