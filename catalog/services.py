import logging

from sqlalchemy import delete, select, update  # type: ignore

from .errors import AuthenticationError, ValidationError
from .models import PRODUCT_FIELDS, Product, User
from .storage import Storage

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, storage: Storage):
        self.storage = storage

    def list(self) -> list[dict]:
        products = self.storage.scalars(select(Product).order_by(Product.id.desc()))
        return [p.to_dict() for p in products]

    def create(self, fields: dict, image: str | None = None) -> int:
        """Insert a product. Missing fields are stored as NULL, a missing image as ''."""
        values = {name: fields.get(name) for name in PRODUCT_FIELDS}
        product_id = self.storage.add(Product(image=image or '', **values))
        logger.info("Created product %s", product_id)
        return product_id

    def update(self, product_id, fields: dict, image: str | None = None):
        """Overwrite every scalar field. The image is only replaced when a new one is given.

        Updating an id that matches no row (including non-numeric ids) is not an error.
        """
        values = {name: fields.get(name) for name in PRODUCT_FIELDS}
        if image:
            values['image'] = image
        stmt = update(Product).where(Product.id == product_id).values(**values)
        self.storage.execute(stmt.execution_options(synchronize_session=False))
        logger.info("Updated product %s", product_id)

    def delete(self, product_id):
        stmt = delete(Product).where(Product.id == product_id)
        self.storage.execute(stmt.execution_options(synchronize_session=False))
        logger.info("Deleted product %s", product_id)


class AccountService:
    def __init__(self, storage: Storage):
        self.storage = storage

    def list(self) -> list[dict]:
        stmt = select(User.id, User.username, User.role).order_by(User.id.desc())
        return self.storage.rows(stmt)

    def _find(self, username, password):
        # NULL never equals anything in SQL, so neither does a missing credential
        if username is None or password is None:
            return None
        stmt = select(User).where(User.username == username, User.password == password)
        return self.storage.first(stmt)

    def register(self, username, password) -> dict:
        """Create a regular account. Raises ConflictError if the name is taken."""
        if not username or not password:
            raise ValidationError('用户名和密码不能为空')
        role = 'user'
        self.storage.add(User(username=username, password=password, role=role))
        logger.info("Registered user %r", username)
        return {'username': username, 'role': role}

    def login(self, username, password) -> dict:
        user = self._find(username, password)
        if user is None:
            logger.info("Failed login for %r", username)
            raise AuthenticationError('账号或密码错误')
        return {'username': user.username, 'role': user.role}

    def change_password(self, username, old_password, new_password):
        user = self._find(username, old_password)
        if user is None:
            raise AuthenticationError('旧密码不正确')
        self.storage.execute(update(User).where(User.id == user.id).values(password=new_password))
        logger.info("Changed password for %r", username)
