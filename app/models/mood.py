# models/mood.py

import enum
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, Date, DateTime, ForeignKey, UniqueConstraint, Uuid, Enum as SqlEnum
from sqlalchemy.orm import relationship
from app.core.config import Base


class MoodLabel(str, enum.Enum):
    Happy = "Happy"
    Sad = "Sad"
    Neutral = "Neutral"
    Angry = "Angry"
    Loved = "Loved"


class MoodEntry(Base):
    __tablename__ = "mood_entry"
    # one mood per user per calendar day; the upsert relies on this constraint
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_mood_entry_user_date"),)

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("user_auth.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    mood = Column(SqlEnum(MoodLabel, name="mood_label"), nullable=False)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    user = relationship("UserAuth", back_populates="moods")
