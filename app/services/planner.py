# services/planner.py
import logging
from typing import List
from uuid import UUID
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.crud.planner import crud_planner
from app.models.planner import PlannerTask
from app.schemas.planner import PlannerTaskCreate
from app.services.common import database_errors, parse_resource_id

logger = logging.getLogger(__name__)

TASK_NOT_FOUND = "Task not found"


class PlannerService:
    """Daily planner tasks. Tasks are only ever added or removed."""

    def create_task(self, db: Session, *, user_id: UUID, task_in: PlannerTaskCreate) -> PlannerTask:
        with database_errors(db, "create task"):
            return crud_planner.create(db, user_id=user_id, obj_in=task_in.model_dump())

    def list_tasks(self, db: Session, *, user_id: UUID) -> List[PlannerTask]:
        with database_errors(db, "fetch tasks"):
            return crud_planner.get_all(db, user_id=user_id)

    def delete_task(self, db: Session, *, user_id: UUID, task_id: str) -> None:
        """
        Raises:
            NotFoundError: If the task is missing or belongs to someone else
        """
        id = parse_resource_id(task_id, TASK_NOT_FOUND)
        with database_errors(db, "delete task"):
            deleted = crud_planner.delete_owned(db, user_id=user_id, id=id)

        if not deleted:
            raise NotFoundError(TASK_NOT_FOUND)
        logger.info(f"Deleted planner task {id} for user {user_id}")


planner_service = PlannerService()
