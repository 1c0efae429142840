# app/models/__init__.py

from app.core.config import Base

# Import all models here so metadata.create_all and app-wide imports see them
from .user_auth import UserAuth
from .mood import MoodEntry, MoodLabel
from .journal import JournalEntry
from .todo import TodoItem
from .planner import PlannerTask, Priority

__all__ = [
    "Base",
    "UserAuth",
    "MoodEntry",
    "MoodLabel",
    "JournalEntry",
    "TodoItem",
    "PlannerTask",
    "Priority",
]
