# app/api/routers/moods.py
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.core.security import get_current_user_id
from app.services.mood import mood_service
from app.schemas.common import CalendarDay
from app.schemas.mood import MoodCreate, MoodEntryOut

router = APIRouter(prefix="/api/moods", tags=["Mood Tracker"])


@router.post(
    "",
    response_model=MoodEntryOut,
    summary="Record today's (or any day's) mood"
)
def save_mood(
    mood_in: MoodCreate,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Save the mood for a calendar day.

    - **mood**: One of Happy, Sad, Neutral, Angry, Loved
    - **date**: Day (YYYY-MM-DD) or ISO timestamp, truncated to its UTC day

    A second submission for the same day replaces the first.
    """
    return mood_service.save_mood(db, user_id=user_id, mood_in=mood_in)


@router.get(
    "",
    response_model=List[MoodEntryOut],
    summary="List moods in a date range"
)
def list_moods(
    start_date: Optional[CalendarDay] = Query(None, alias="startDate", description="First day (inclusive), defaults to today"),
    end_date: Optional[CalendarDay] = Query(None, alias="endDate", description="Last day (inclusive), defaults to startDate"),
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Moods within [startDate, endDate], oldest first."""
    return mood_service.list_moods(
        db, user_id=user_id, start_date=start_date, end_date=end_date
    )
