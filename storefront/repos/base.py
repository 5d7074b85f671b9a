# storefront/repos/base.py
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.utils.errors import DuplicateKeyError, StoreError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

# postgres unique_violation
_UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    orig = error.orig
    if getattr(orig, "pgcode", None) == _UNIQUE_VIOLATION:
        return True
    message = str(orig)
    return "duplicate key" in message or "UNIQUE constraint failed" in message


class BaseRepo:
    def __init__(self, db: Session):
        self.db = db

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()

    @contextmanager
    def guard(self, action: str):
        """Roll back and re-raise database failures as StoreError."""
        try:
            yield
        except IntegrityError as e:
            self.rollback()
            if is_unique_violation(e):
                raise DuplicateKeyError(f"{action}: duplicate key") from e
            logger.error(f"Error {action}: {e}")
            raise StoreError(f"{action} failed") from e
        except SQLAlchemyError as e:
            self.rollback()
            logger.error(f"Error {action}: {e}")
            raise StoreError(f"{action} failed") from e
