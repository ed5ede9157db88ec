import logging
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError  # type: ignore

from .errors import ConflictError, StorageError

logger = logging.getLogger(__name__)


def _message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, 'orig', None)
    return str(orig) if orig is not None else str(exc)


class Storage:
    """Runs SQLAlchemy statements against one session.

    Every call is a single statement committed on its own. Database errors
    come out as ConflictError (integrity violations) or StorageError.
    """

    def __init__(self, session):
        self.session = session

    @contextmanager
    def _translate(self):
        try:
            yield
        except IntegrityError as e:
            self.session.rollback()
            raise ConflictError(_message(e)) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.warning("Storage failure: %s", _message(e))
            raise StorageError(_message(e)) from e

    def scalars(self, stmt) -> list:
        with self._translate():
            return list(self.session.execute(stmt).scalars().all())

    def first(self, stmt):
        with self._translate():
            return self.session.execute(stmt).scalars().first()

    def rows(self, stmt) -> list[dict]:
        with self._translate():
            return [dict(row) for row in self.session.execute(stmt).mappings().all()]

    def execute(self, stmt) -> int:
        """Run a write statement and commit. Returns the affected row count."""
        with self._translate():
            result = self.session.execute(stmt)
            self.session.commit()
            return result.rowcount

    def add(self, obj) -> int:
        """Insert a model instance and commit. Returns its generated id."""
        with self._translate():
            self.session.add(obj)
            self.session.flush()
            new_id = obj.id
            self.session.commit()
            return new_id
