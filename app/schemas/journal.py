# schemas/journal.py
import datetime as dt
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from app.schemas.common import APIModel, CalendarDay, UTCDateTime


class JournalCreate(BaseModel):
    """Gratitude journal submission. Date defaults to today (UTC)."""
    lesson: str = Field(..., min_length=1)
    appreciation: str = Field(..., min_length=1)
    gratitude: str = Field(..., min_length=1)
    mood: str = Field(..., min_length=1, max_length=50)
    date: Optional[CalendarDay] = None
    # Ignored, see MoodCreate.user_id
    user_id: Optional[str] = Field(default=None, validation_alias="userId")


class JournalEntryOut(APIModel):
    id: UUID = Field(serialization_alias="_id")
    user_id: UUID
    date: dt.date
    lesson: str
    appreciation: str
    gratitude: str
    mood: str
    created_at: UTCDateTime
    updated_at: Optional[UTCDateTime] = None
