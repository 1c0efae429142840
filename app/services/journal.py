# services/journal.py
import logging
from typing import List
from uuid import UUID
from sqlalchemy.orm import Session

from app.core.config import settings
from app.crud.journal import crud_journal
from app.models.journal import JournalEntry
from app.schemas.common import today
from app.schemas.journal import JournalCreate
from app.services.common import database_errors

logger = logging.getLogger(__name__)


class JournalService:
    """Gratitude journal: one entry per user per calendar day."""

    def save_entry(self, db: Session, *, user_id: UUID, entry_in: JournalCreate) -> JournalEntry:
        """Create or overwrite the caller's entry for the given day (today if omitted)."""
        day = entry_in.date or today()
        with database_errors(db, "save journal entry"):
            entry = crud_journal.upsert(db, user_id=user_id, day=day, obj_in=entry_in)

        logger.info(f"Saved journal entry for user {user_id} on {day}")
        return entry

    def list_entries(self, db: Session, *, user_id: UUID) -> List[JournalEntry]:
        """The most recent entries, newest day first."""
        with database_errors(db, "fetch journal entries"):
            return crud_journal.get_recent(db, user_id=user_id, limit=settings.JOURNAL_LIST_LIMIT)


journal_service = JournalService()
