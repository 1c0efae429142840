# crud/todo.py
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from app.crud.base import CRUDOwnedBase
from app.models.todo import TodoItem


class CRUDTodo(CRUDOwnedBase[TodoItem]):
    """CRUD operations for TodoItem model."""

    def get_all(self, db: Session, *, user_id: UUID) -> List[TodoItem]:
        return self.get_all_by_user(db, user_id=user_id, order_by=(TodoItem.created_at.desc(),))

    def set_completed(
        self, db: Session, *, user_id: UUID, id: UUID, completed: Optional[bool]
    ) -> Optional[TodoItem]:
        """
        Set the completed flag on an owned todo; None flips it.

        Returns:
            Updated TodoItem, or None if the id is absent or not owned
        """
        db_obj = self.get_owned(db, user_id=user_id, id=id)
        if db_obj is None:
            return None

        db_obj.completed = (not db_obj.completed) if completed is None else completed
        db.commit()
        db.refresh(db_obj)
        return db_obj


crud_todo = CRUDTodo(TodoItem)
