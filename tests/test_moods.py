import pytest

pytestmark = pytest.mark.integration


def test_second_submission_same_day_overwrites(client, auth_headers):
    first = client.post("/api/moods", json={"mood": "Happy", "date": "2024-01-01"}, headers=auth_headers)
    assert first.status_code == 200
    second = client.post("/api/moods", json={"mood": "Sad", "date": "2024-01-01"}, headers=auth_headers)
    assert second.status_code == 200

    assert second.json()["_id"] == first.json()["_id"]
    assert second.json()["createdAt"] == first.json()["createdAt"]

    resp = client.get(
        "/api/moods",
        params={"startDate": "2024-01-01", "endDate": "2024-01-01"},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    rows = resp.json()
    assert len(rows) == 1
    assert rows[0]["mood"] == "Sad"
    assert rows[0]["date"] == "2024-01-01"


def test_timestamp_input_collapses_to_utc_day(client, auth_headers):
    client.post("/api/moods", json={"mood": "Happy", "date": "2024-03-05T08:00:00.000Z"}, headers=auth_headers)
    client.post("/api/moods", json={"mood": "Loved", "date": "2024-03-05T21:15:00Z"}, headers=auth_headers)

    rows = client.get("/api/moods", params={"startDate": "2024-03-05"}, headers=auth_headers).json()
    assert [r["mood"] for r in rows] == ["Loved"]


def test_range_is_inclusive_and_ascending(client, auth_headers):
    for day, mood in [("2024-02-03", "Sad"), ("2024-01-31", "Happy"), ("2024-02-01", "Neutral"), ("2024-02-10", "Angry")]:
        client.post("/api/moods", json={"mood": mood, "date": day}, headers=auth_headers)

    rows = client.get(
        "/api/moods",
        params={"startDate": "2024-02-01T00:00:00.000Z", "endDate": "2024-02-03"},
        headers=auth_headers,
    ).json()

    assert [r["date"] for r in rows] == ["2024-02-01", "2024-02-03"]
    assert [r["mood"] for r in rows] == ["Neutral", "Sad"]


def test_invalid_mood_label_is_400(client, auth_headers):
    resp = client.post("/api/moods", json={"mood": "Ecstatic", "date": "2024-01-01"}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["message"].startswith("mood:")


def test_missing_date_is_400(client, auth_headers):
    resp = client.post("/api/moods", json={"mood": "Happy"}, headers=auth_headers)
    assert resp.status_code == 400


def test_end_before_start_is_400(client, auth_headers):
    resp = client.get(
        "/api/moods",
        params={"startDate": "2024-02-10", "endDate": "2024-02-01"},
        headers=auth_headers,
    )
    assert resp.status_code == 400


def test_body_user_id_is_ignored(client, login_as):
    alice_headers, alice = login_as()
    bob_headers, bob = login_as(name="Bob", email="bob@routiner.io", password="hunter2-pass")

    resp = client.post(
        "/api/moods",
        json={"mood": "Angry", "date": "2024-05-05", "userId": bob["id"]},
        headers=alice_headers,
    )
    assert resp.status_code == 200
    assert resp.json()["userId"] == alice["id"]

    bob_rows = client.get("/api/moods", params={"startDate": "2024-05-05"}, headers=bob_headers).json()
    assert bob_rows == []


def test_moods_are_scoped_per_user(client, auth_headers, other_auth_headers):
    client.post("/api/moods", json={"mood": "Happy", "date": "2024-01-01"}, headers=auth_headers)
    client.post("/api/moods", json={"mood": "Sad", "date": "2024-01-01"}, headers=other_auth_headers)

    mine = client.get("/api/moods", params={"startDate": "2024-01-01"}, headers=auth_headers).json()
    theirs = client.get("/api/moods", params={"startDate": "2024-01-01"}, headers=other_auth_headers).json()
    assert [r["mood"] for r in mine] == ["Happy"]
    assert [r["mood"] for r in theirs] == ["Sad"]


def test_moods_require_token(client):
    assert client.post("/api/moods", json={"mood": "Happy", "date": "2024-01-01"}).status_code == 401
    assert client.get("/api/moods").status_code == 401


def test_timestamps_carry_utc_offset(client, auth_headers):
    first = client.post("/api/moods", json={"mood": "Happy", "date": "2024-04-01"}, headers=auth_headers).json()
    assert first["createdAt"].endswith(("Z", "+00:00"))
    assert first["updatedAt"] == first["createdAt"]

    second = client.post("/api/moods", json={"mood": "Sad", "date": "2024-04-01"}, headers=auth_headers).json()
    assert second["createdAt"] == first["createdAt"]
    assert second["updatedAt"] >= second["createdAt"]
