# crud/base.py
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar
from uuid import UUID
from datetime import date, datetime, timezone

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import Base
from app.core.exceptions import DatabaseError, DatabaseIntegrityError

ModelType = TypeVar("ModelType", bound=Base)

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class CRUDOwnedBase(Generic[ModelType]):
    """
    CRUD operations shared by every per-user resource table.

    Every method takes the owning user's id and filters on it, so a row
    belonging to another user behaves exactly like a missing row.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    # =====================================================================
    # CREATE OPERATIONS
    # =====================================================================

    def create(self, db: Session, *, user_id: UUID, obj_in: Dict[str, Any]) -> ModelType:
        """
        Insert a new row owned by user_id.

        Raises:
            DatabaseIntegrityError: If user_id names no stored user
        """
        db_obj = self.model(user_id=user_id, **obj_in)
        db.add(db_obj)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise DatabaseIntegrityError(f"No user {user_id}") from e
        db.refresh(db_obj)
        return db_obj

    def upsert_by_day(
        self, db: Session, *, user_id: UUID, day: date, values: Dict[str, Any]
    ) -> ModelType:
        """
        Insert the row for (user_id, day) or overwrite its fields in place.

        Runs as one INSERT ... ON CONFLICT DO UPDATE against the
        (user_id, date) unique constraint. id and created_at of an existing
        row are kept.

        Raises:
            DatabaseError: If the bound dialect has no conditional insert
            DatabaseIntegrityError: If user_id names no stored user
        """
        dialect = db.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise DatabaseError(f"Upsert is not supported on dialect '{dialect}'")

        now = datetime.now(timezone.utc)
        stmt = insert(self.model.__table__).values(
            user_id=user_id, date=day, created_at=now, updated_at=now, **values
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "date"],
            set_={**values, "updated_at": now},
        )
        try:
            db.execute(stmt)
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise DatabaseIntegrityError(f"No user {user_id}") from e

        return self.get_by_day(db, user_id=user_id, day=day)

    # =====================================================================
    # READ OPERATIONS
    # =====================================================================

    def get_owned(self, db: Session, *, user_id: UUID, id: UUID) -> Optional[ModelType]:
        """Get a row by id, only if user_id owns it."""
        return (
            db.query(self.model)
            .filter(self.model.id == id)
            .filter(self.model.user_id == user_id)
            .first()
        )

    def get_by_day(self, db: Session, *, user_id: UUID, day: date) -> Optional[ModelType]:
        """Get the row for a specific user and calendar day."""
        return (
            db.query(self.model)
            .filter(self.model.user_id == user_id)
            .filter(self.model.date == day)
            .first()
        )

    def get_all_by_user(
        self,
        db: Session,
        *,
        user_id: UUID,
        order_by: Sequence[Any],
        limit: Optional[int] = None,
    ) -> List[ModelType]:
        """Get every row owned by user_id, sorted by the order_by clauses."""
        query = (
            db.query(self.model)
            .filter(self.model.user_id == user_id)
            .order_by(*order_by)
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    # =====================================================================
    # DELETE OPERATIONS
    # =====================================================================

    def delete_owned(self, db: Session, *, user_id: UUID, id: UUID) -> bool:
        """Delete a row by id if user_id owns it. Returns whether a row was removed."""
        db_obj = self.get_owned(db, user_id=user_id, id=id)
        if db_obj is None:
            return False
        db.delete(db_obj)
        db.commit()
        return True
