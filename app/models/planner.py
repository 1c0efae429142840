# models/planner.py

import enum
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Text, Time, ForeignKey, Uuid, Enum as SqlEnum
from sqlalchemy.orm import relationship
from app.core.config import Base


class Priority(str, enum.Enum):
    High = "High"
    Medium = "Medium"
    Low = "Low"


class PlannerTask(Base):
    __tablename__ = "planner_task"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("user_auth.id", ondelete="CASCADE"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    time = Column(Time, nullable=False)  # time of day, list order key
    priority = Column(SqlEnum(Priority, name="planner_priority"), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    user = relationship("UserAuth", back_populates="planner_tasks")
