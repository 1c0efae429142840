# schemas/mood.py
import datetime as dt
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from app.models.mood import MoodLabel
from app.schemas.common import APIModel, CalendarDay, UTCDateTime


class MoodCreate(BaseModel):
    """Mood submission for one calendar day."""
    mood: MoodLabel
    date: CalendarDay
    # The client echoes its user id here. Identity comes from the token, never from this field.
    user_id: Optional[str] = Field(default=None, validation_alias="userId")


class MoodEntryOut(APIModel):
    id: UUID = Field(serialization_alias="_id")
    user_id: UUID
    date: dt.date
    mood: MoodLabel
    created_at: UTCDateTime
    updated_at: Optional[UTCDateTime] = None
