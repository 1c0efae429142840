# schemas/planner.py
import datetime as dt
from uuid import UUID

from pydantic import BaseModel, Field, field_serializer

from app.models.planner import Priority
from app.schemas.common import APIModel, UTCDateTime


class PlannerTaskCreate(BaseModel):
    text: str = Field(..., min_length=1)
    time: dt.time = Field(..., description="Time of day, e.g. 09:30")
    priority: Priority


class PlannerTaskOut(APIModel):
    id: UUID = Field(serialization_alias="_id")
    user_id: UUID
    text: str
    time: dt.time
    priority: Priority
    created_at: UTCDateTime

    @field_serializer("time")
    def serialize_time(self, value: dt.time) -> str:
        return value.strftime("%H:%M")
