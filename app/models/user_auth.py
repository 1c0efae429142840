# models/user_auth.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.orm import relationship
from app.core.config import Base


class UserAuth(Base):
    __tablename__ = "user_auth"

    # ---- Base fields ----
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, unique=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    # ---- Relationships ----
    moods = relationship("MoodEntry", back_populates="user", cascade="all, delete-orphan")
    journal_entries = relationship("JournalEntry", back_populates="user", cascade="all, delete-orphan")
    todos = relationship("TodoItem", back_populates="user", cascade="all, delete-orphan")
    planner_tasks = relationship("PlannerTask", back_populates="user", cascade="all, delete-orphan")
