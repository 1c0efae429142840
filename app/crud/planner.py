# crud/planner.py
from typing import List
from uuid import UUID
from sqlalchemy.orm import Session

from app.crud.base import CRUDOwnedBase
from app.models.planner import PlannerTask


class CRUDPlanner(CRUDOwnedBase[PlannerTask]):
    """CRUD operations for PlannerTask model."""

    def get_all(self, db: Session, *, user_id: UUID) -> List[PlannerTask]:
        """Tasks in time-of-day order, whatever their priority."""
        return self.get_all_by_user(
            db,
            user_id=user_id,
            order_by=(PlannerTask.time.asc(), PlannerTask.created_at.asc()),
        )


crud_planner = CRUDPlanner(PlannerTask)
