# crud/mood.py
from typing import List
from uuid import UUID
from datetime import date
from sqlalchemy.orm import Session

from app.crud.base import CRUDOwnedBase
from app.models.mood import MoodEntry, MoodLabel


class CRUDMood(CRUDOwnedBase[MoodEntry]):
    """CRUD operations for MoodEntry model."""

    def upsert(
        self, db: Session, *, user_id: UUID, day: date, mood: MoodLabel
    ) -> MoodEntry:
        """Record the mood for a day, replacing any earlier one."""
        return self.upsert_by_day(db, user_id=user_id, day=day, values={"mood": mood})

    def get_by_date_range(
        self, db: Session, *, user_id: UUID, start_date: date, end_date: date
    ) -> List[MoodEntry]:
        """Get moods within an inclusive date range, oldest first."""
        return (
            db.query(MoodEntry)
            .filter(MoodEntry.user_id == user_id)
            .filter(MoodEntry.date >= start_date)
            .filter(MoodEntry.date <= end_date)
            .order_by(MoodEntry.date.asc())
            .all()
        )


crud_mood = CRUDMood(MoodEntry)
