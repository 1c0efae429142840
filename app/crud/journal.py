# crud/journal.py
from typing import List
from uuid import UUID
from datetime import date
from sqlalchemy.orm import Session

from app.crud.base import CRUDOwnedBase
from app.models.journal import JournalEntry
from app.schemas.journal import JournalCreate


class CRUDJournal(CRUDOwnedBase[JournalEntry]):
    """CRUD operations for JournalEntry model."""

    def upsert(
        self, db: Session, *, user_id: UUID, day: date, obj_in: JournalCreate
    ) -> JournalEntry:
        """Write the journal entry for a day, replacing any earlier one."""
        values = obj_in.model_dump(include={"lesson", "appreciation", "gratitude", "mood"})
        return self.upsert_by_day(db, user_id=user_id, day=day, values=values)

    def get_recent(self, db: Session, *, user_id: UUID, limit: int = 30) -> List[JournalEntry]:
        """Newest entries first, capped at limit."""
        return self.get_all_by_user(
            db, user_id=user_id, order_by=(JournalEntry.date.desc(),), limit=limit
        )


crud_journal = CRUDJournal(JournalEntry)
