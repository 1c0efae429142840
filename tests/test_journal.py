import pytest

from app.schemas.common import today

pytestmark = pytest.mark.integration

ENTRY = {
    "lesson": "Rest is productive",
    "appreciation": "My sister called",
    "gratitude": "Warm coffee",
    "mood": "Peaceful",
}


def test_entry_without_date_lands_on_today(client, auth_headers):
    resp = client.post("/api/journal", json=ENTRY, headers=auth_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["date"] == today().isoformat()
    assert body["gratitude"] == "Warm coffee"


def test_same_day_entry_is_overwritten(client, auth_headers):
    first = client.post("/api/journal", json={**ENTRY, "date": "2024-06-01"}, headers=auth_headers).json()
    second = client.post(
        "/api/journal",
        json={**ENTRY, "lesson": "Ship small", "date": "2024-06-01T18:30:00.000Z"},
        headers=auth_headers,
    ).json()

    assert second["_id"] == first["_id"]
    assert second["createdAt"] == first["createdAt"]

    rows = client.get("/api/journal", headers=auth_headers).json()
    assert len(rows) == 1
    assert rows[0]["lesson"] == "Ship small"


def test_list_is_newest_first_and_capped_at_30(client, auth_headers):
    for day in range(1, 32):
        client.post("/api/journal", json={**ENTRY, "date": f"2024-01-{day:02d}"}, headers=auth_headers)

    rows = client.get("/api/journal", headers=auth_headers).json()
    assert len(rows) == 30
    assert rows[0]["date"] == "2024-01-31"
    assert rows[-1]["date"] == "2024-01-02"


@pytest.mark.parametrize("missing", ["lesson", "appreciation", "gratitude", "mood"])
def test_missing_field_is_400(client, auth_headers, missing):
    payload = {k: v for k, v in ENTRY.items() if k != missing}
    resp = client.post("/api/journal", json=payload, headers=auth_headers)
    assert resp.status_code == 400


def test_empty_field_is_400(client, auth_headers):
    resp = client.post("/api/journal", json={**ENTRY, "gratitude": ""}, headers=auth_headers)
    assert resp.status_code == 400


def test_journal_is_scoped_per_user(client, auth_headers, other_auth_headers):
    client.post("/api/journal", json=ENTRY, headers=auth_headers)
    assert client.get("/api/journal", headers=other_auth_headers).json() == []
