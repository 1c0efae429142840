from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.exceptions import DatabaseIntegrityError, ServiceError, UnauthorizedError
from app.core.security import create_access_token
from app.crud.todo import crud_todo
from app.models import JournalEntry, MoodEntry, PlannerTask, TodoItem
from app.services.common import database_errors

pytestmark = pytest.mark.integration


def _fail_with(exc):
    def _raise(*args, **kwargs):
        raise exc
    return _raise


# ==================== Store failures ====================

@pytest.mark.unit
def test_database_errors_rolls_back_and_wraps():
    db = MagicMock()

    with pytest.raises(ServiceError, match="Failed to fetch todos"):
        with database_errors(db, "fetch todos"):
            raise SQLAlchemyError("disk I/O error")

    db.rollback.assert_called_once()


@pytest.mark.unit
def test_database_errors_maps_missing_owner_to_unauthorized():
    db = MagicMock()

    with pytest.raises(UnauthorizedError, match="User not found"):
        with database_errors(db, "create todo"):
            raise DatabaseIntegrityError("No user")

    db.rollback.assert_called_once()


def test_sqlalchemy_failure_is_500_without_detail(lenient_client, auth_headers, monkeypatch):
    monkeypatch.setattr(crud_todo, "get_all", _fail_with(SQLAlchemyError("disk I/O error")))

    resp = lenient_client.get("/api/todo", headers=auth_headers)

    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error"}


def test_sqlalchemy_failure_carries_detail_in_debug(lenient_client, auth_headers, monkeypatch):
    monkeypatch.setattr(crud_todo, "get_all", _fail_with(SQLAlchemyError("disk I/O error")))
    monkeypatch.setattr(settings, "DEBUG", True)

    resp = lenient_client.get("/api/todo", headers=auth_headers)

    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error", "error": "Failed to fetch todos"}


def test_unexpected_exception_is_generic_500(lenient_client, auth_headers, monkeypatch):
    monkeypatch.setattr(crud_todo, "get_all", _fail_with(RuntimeError("boom")))

    resp = lenient_client.get("/api/todo", headers=auth_headers)

    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error"}


def test_unexpected_exception_detail_only_in_debug(lenient_client, auth_headers, monkeypatch):
    monkeypatch.setattr(crud_todo, "get_all", _fail_with(RuntimeError("boom")))
    monkeypatch.setattr(settings, "DEBUG", True)

    resp = lenient_client.get("/api/todo", headers=auth_headers)

    assert resp.status_code == 500
    assert resp.json()["error"] == "boom"


# ==================== Owner must exist ====================

def test_token_for_unknown_user_cannot_write(client, db_session):
    headers = {"Authorization": f"Bearer {create_access_token({'sub': str(uuid4())})}"}

    writes = [
        ("/api/todo", {"text": "orphan"}),
        ("/api/planner", {"text": "orphan", "time": "09:00", "priority": "Low"}),
        ("/api/moods", {"mood": "Happy", "date": "2024-01-01"}),
        ("/api/journal", {"lesson": "a", "appreciation": "b", "gratitude": "c", "mood": "Calm"}),
    ]
    for path, body in writes:
        resp = client.post(path, json=body, headers=headers)
        assert resp.status_code == 401, path
        assert resp.json() == {"message": "User not found"}

    for model in (TodoItem, PlannerTask, MoodEntry, JournalEntry):
        assert db_session.query(model).count() == 0
