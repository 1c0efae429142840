# app/api/routers/todo.py
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.core.security import get_current_user_id
from app.services.todo import todo_service
from app.schemas.common import MessageResponse
from app.schemas.todo import TodoCreate, TodoUpdate, TodoItemOut

router = APIRouter(prefix="/api/todo", tags=["To-Do List"])


@router.post(
    "",
    response_model=TodoItemOut,
    status_code=status.HTTP_201_CREATED,
    summary="Add a todo"
)
def create_todo(
    todo_in: TodoCreate,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return todo_service.create_todo(db, user_id=user_id, todo_in=todo_in)


@router.get(
    "",
    response_model=List[TodoItemOut],
    summary="List todos, newest first"
)
def list_todos(
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return todo_service.list_todos(db, user_id=user_id)


@router.patch(
    "/{todo_id}",
    response_model=TodoItemOut,
    summary="Mark a todo done or not done"
)
def update_todo(
    todo_id: str,
    todo_in: Optional[TodoUpdate] = None,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    - **completed**: new flag value; omit it to toggle

    Returns 404 for ids that don't exist or belong to another user.
    """
    return todo_service.update_todo(db, user_id=user_id, todo_id=todo_id, todo_in=todo_in or TodoUpdate())


@router.delete(
    "/{todo_id}",
    response_model=MessageResponse,
    summary="Delete a todo"
)
def delete_todo(
    todo_id: str,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    todo_service.delete_todo(db, user_id=user_id, todo_id=todo_id)
    return MessageResponse(message="Todo deleted successfully")
