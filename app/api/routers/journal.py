# app/api/routers/journal.py
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.core.security import get_current_user_id
from app.services.journal import journal_service
from app.schemas.journal import JournalCreate, JournalEntryOut

router = APIRouter(prefix="/api/journal", tags=["Gratitude Journal"])


@router.post(
    "",
    response_model=JournalEntryOut,
    summary="Write the journal entry for a day"
)
def save_entry(
    entry_in: JournalCreate,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Save a gratitude journal entry.

    - **lesson**, **appreciation**, **gratitude**, **mood**: required text
    - **date**: optional, defaults to today

    One entry per day; resubmitting overwrites it.
    """
    return journal_service.save_entry(db, user_id=user_id, entry_in=entry_in)


@router.get(
    "",
    response_model=List[JournalEntryOut],
    summary="List recent journal entries"
)
def list_entries(
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Up to 30 entries, newest first."""
    return journal_service.list_entries(db, user_id=user_id)
