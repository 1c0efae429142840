# schemas/todo.py
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from app.schemas.common import APIModel, UTCDateTime


class TodoCreate(BaseModel):
    text: str = Field(..., min_length=1)


class TodoUpdate(BaseModel):
    """Omitting `completed` flips the current flag."""
    completed: Optional[bool] = None


class TodoItemOut(APIModel):
    id: UUID = Field(serialization_alias="_id")
    user_id: UUID
    text: str
    completed: bool
    created_at: UTCDateTime
