# services/todo.py
import logging
from typing import List
from uuid import UUID
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.crud.todo import crud_todo
from app.models.todo import TodoItem
from app.schemas.todo import TodoCreate, TodoUpdate
from app.services.common import database_errors, parse_resource_id

logger = logging.getLogger(__name__)

TODO_NOT_FOUND = "Todo not found"


class TodoService:
    """To-do list operations, always scoped to the requesting user."""

    def create_todo(self, db: Session, *, user_id: UUID, todo_in: TodoCreate) -> TodoItem:
        with database_errors(db, "create todo"):
            return crud_todo.create(
                db, user_id=user_id, obj_in={"text": todo_in.text, "completed": False}
            )

    def list_todos(self, db: Session, *, user_id: UUID) -> List[TodoItem]:
        with database_errors(db, "fetch todos"):
            return crud_todo.get_all(db, user_id=user_id)

    def update_todo(
        self, db: Session, *, user_id: UUID, todo_id: str, todo_in: TodoUpdate
    ) -> TodoItem:
        """
        Set or toggle the completed flag.

        Raises:
            NotFoundError: If the todo is missing or belongs to someone else
        """
        id = parse_resource_id(todo_id, TODO_NOT_FOUND)
        with database_errors(db, "update todo"):
            todo = crud_todo.set_completed(db, user_id=user_id, id=id, completed=todo_in.completed)

        if todo is None:
            raise NotFoundError(TODO_NOT_FOUND)
        return todo

    def delete_todo(self, db: Session, *, user_id: UUID, todo_id: str) -> None:
        """
        Raises:
            NotFoundError: If the todo is missing or belongs to someone else
        """
        id = parse_resource_id(todo_id, TODO_NOT_FOUND)
        with database_errors(db, "delete todo"):
            deleted = crud_todo.delete_owned(db, user_id=user_id, id=id)

        if not deleted:
            raise NotFoundError(TODO_NOT_FOUND)
        logger.info(f"Deleted todo {id} for user {user_id}")


todo_service = TodoService()
