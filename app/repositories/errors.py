"""Translate SQLAlchemy failures into the domain taxonomy."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.exceptions import StorageError

logger = structlog.get_logger(__name__)


def _describe_integrity_error(exc: IntegrityError) -> str:
    # Driver messages differ (asyncpg vs sqlite) but share these keywords.
    text = str(exc.orig).lower()
    if "foreign key" in text:
        return "referenced record does not exist"
    if "unique" in text or "duplicate key" in text:
        return "duplicate value violates a unique constraint"
    if "not null" in text or "not-null" in text:
        return "missing required value"
    return "constraint violation"


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise any SQLAlchemy error from the block as ``StorageError``."""
    try:
        yield
    except IntegrityError as exc:
        message = _describe_integrity_error(exc)
        logger.warning("storage_constraint_violation", operation=operation, reason=message)
        raise StorageError(message) from exc
    except SQLAlchemyError as exc:
        logger.error("storage_failure", operation=operation, exc_info=True)
        raise StorageError("storage failure") from exc


__all__ = ["storage_errors"]
