# services/mood.py
import logging
from typing import List, Optional
from uuid import UUID
from datetime import date
from sqlalchemy.orm import Session

from app.core.exceptions import ValidationError
from app.crud.mood import crud_mood
from app.models.mood import MoodEntry
from app.schemas.common import today
from app.schemas.mood import MoodCreate
from app.services.common import database_errors

logger = logging.getLogger(__name__)


class MoodService:
    """Mood tracking: one entry per user per calendar day."""

    def save_mood(self, db: Session, *, user_id: UUID, mood_in: MoodCreate) -> MoodEntry:
        """Create or overwrite the caller's mood for mood_in.date."""
        with database_errors(db, "save mood"):
            entry = crud_mood.upsert(db, user_id=user_id, day=mood_in.date, mood=mood_in.mood)

        logger.info(f"Saved mood {entry.mood.value} for user {user_id} on {entry.date}")
        return entry

    def list_moods(
        self,
        db: Session,
        *,
        user_id: UUID,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[MoodEntry]:
        """
        Moods in the inclusive range, oldest first.

        A missing start means today; a missing end means the start day.

        Raises:
            ValidationError: If end_date is before start_date
        """
        start = start_date or today()
        end = end_date or start
        if end < start:
            raise ValidationError("endDate must not be before startDate")

        with database_errors(db, "fetch moods"):
            return crud_mood.get_by_date_range(db, user_id=user_id, start_date=start, end_date=end)


mood_service = MoodService()
