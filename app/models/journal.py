# models/journal.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, Date, DateTime, String, Text, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship
from app.core.config import Base


class JournalEntry(Base):
    __tablename__ = "journal_entry"
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_journal_entry_user_date"),)

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("user_auth.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)

    lesson = Column(Text, nullable=False)
    appreciation = Column(Text, nullable=False)
    gratitude = Column(Text, nullable=False)
    mood = Column(String(50), nullable=False)  # free text, e.g. "Peaceful"

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    user = relationship("UserAuth", back_populates="journal_entries")
