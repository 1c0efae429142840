# services/common.py
import logging
from contextlib import contextmanager
from typing import Iterator
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import (
    DatabaseError,
    DatabaseIntegrityError,
    NotFoundError,
    ServiceError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)


@contextmanager
def database_errors(db: Session, action: str) -> Iterator[None]:
    """
    Roll back and re-raise store failures as ServiceError.

    A write that references a missing user (the token outlived its account)
    becomes UnauthorizedError instead.
    """
    try:
        yield
    except DatabaseIntegrityError as e:
        db.rollback()
        logger.warning(f"Failed to {action}: {e}")
        raise UnauthorizedError("User not found") from e
    except (SQLAlchemyError, DatabaseError) as e:
        db.rollback()
        logger.error(f"Failed to {action}: {e}")
        raise ServiceError(f"Failed to {action}") from e


def parse_resource_id(raw_id: str, not_found_detail: str) -> UUID:
    """
    Parse a path id. A malformed id is reported like any other missing row.

    Raises:
        NotFoundError: If raw_id is not a UUID
    """
    try:
        return UUID(str(raw_id))
    except ValueError:
        raise NotFoundError(not_found_detail)
