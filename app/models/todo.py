# models/todo.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, Boolean, DateTime, Text, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from app.core.config import Base


class TodoItem(Base):
    __tablename__ = "todo_item"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("user_auth.id", ondelete="CASCADE"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True)

    user = relationship("UserAuth", back_populates="todos")
