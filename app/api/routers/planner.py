# app/api/routers/planner.py
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.core.security import get_current_user_id
from app.services.planner import planner_service
from app.schemas.common import MessageResponse
from app.schemas.planner import PlannerTaskCreate, PlannerTaskOut

router = APIRouter(prefix="/api/planner", tags=["Daily Planner"])


@router.post(
    "",
    response_model=PlannerTaskOut,
    status_code=status.HTTP_201_CREATED,
    summary="Add a planner task"
)
def create_task(
    task_in: PlannerTaskCreate,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    - **text**: what to do
    - **time**: time of day (HH:MM)
    - **priority**: High, Medium or Low
    """
    return planner_service.create_task(db, user_id=user_id, task_in=task_in)


@router.get(
    "",
    response_model=List[PlannerTaskOut],
    summary="List planner tasks by time of day"
)
def list_tasks(
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return planner_service.list_tasks(db, user_id=user_id)


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    summary="Delete a planner task"
)
def delete_task(
    task_id: str,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    planner_service.delete_task(db, user_id=user_id, task_id=task_id)
    return MessageResponse(message="Task deleted successfully")
