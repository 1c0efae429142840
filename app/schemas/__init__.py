# app/schemas/__init__.py

from .common import APIModel, MessageResponse, CalendarDay, UTCDateTime, normalize_day, today
from .user_auth import RegisterRequest, LoginRequest, UserAuthOut, TokenResponse
from .mood import MoodCreate, MoodEntryOut
from .journal import JournalCreate, JournalEntryOut
from .todo import TodoCreate, TodoUpdate, TodoItemOut
from .planner import PlannerTaskCreate, PlannerTaskOut


__all__ = [
    # Common
    "APIModel", "MessageResponse", "CalendarDay", "UTCDateTime", "normalize_day", "today",

    # Auth
    "RegisterRequest", "LoginRequest", "UserAuthOut", "TokenResponse",

    # Resources
    "MoodCreate", "MoodEntryOut",
    "JournalCreate", "JournalEntryOut",
    "TodoCreate", "TodoUpdate", "TodoItemOut",
    "PlannerTaskCreate", "PlannerTaskOut",
]
