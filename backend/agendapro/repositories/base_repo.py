"""Shared plumbing for the owner-scoped SQLAlchemy repositories.

Every query is filtered by ``owner_id``; a row of another owner is reported
as ``NotFound``. Database errors roll the session back and surface as
``StoreFailure`` carrying the driver message verbatim.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from agendapro.core.exceptions import NotFound, StoreFailure

logger = logging.getLogger(__name__)


def _store_message(error: SQLAlchemyError) -> str:
    orig = getattr(error, "orig", None)
    return str(orig) if orig is not None else str(error)


@contextmanager
def store_errors(db: Session, operation: str) -> Iterator[None]:
    """Translate SQLAlchemy errors raised inside the block into StoreFailure."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(
            f"Store operation failed: {operation}",
            extra={"context": {"operation": operation, "error": str(e)}},
            exc_info=True,
        )
        raise StoreFailure(_store_message(e)) from e


class OwnedRepository:
    """Base class for repositories of rows carrying an ``owner_id`` column."""

    model: Any = None
    resource = "Record"

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def _owned(self, owner_id: str):
        return self.db.query(self.model).filter(self.model.owner_id == owner_id)

    def _get_row(self, owner_id: str, row_id: str):
        row = self._owned(owner_id).filter(self.model.id == row_id).first()
        if row is None:
            raise NotFound(self.resource, row_id)
        return row

    def _insert(self, row):
        with store_errors(self.db, f"insert {self.model.__tablename__}"):
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        return row

    def _update_row(self, owner_id: str, row_id: str, fields: Dict[str, Any]):
        with store_errors(self.db, f"update {self.model.__tablename__}"):
            row = self._get_row(owner_id, row_id)
            for name, value in fields.items():
                setattr(row, name, value)
            self.db.commit()
            self.db.refresh(row)
        return row

    def _delete_row(self, owner_id: str, row_id: str) -> None:
        with store_errors(self.db, f"delete {self.model.__tablename__}"):
            row = self._get_row(owner_id, row_id)
            self.db.delete(row)
            self.db.commit()

    def _all(self, query) -> Iterable:
        with store_errors(self.db, f"list {self.model.__tablename__}"):
            return query.all()
