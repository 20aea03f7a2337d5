"""Exercise Routes — POST /api/users/{id}/exercises.

Invariants:
    - Validation order: presence → duration number → user exists → date
    - Missing date defaults to today, rendered as "Mon Jan 01 2024"
    - Invalid date → 400 and nothing stored
"""

from datetime import date
from uuid import uuid4

from sqlalchemy import func, select

from exercise_tracker.core.format_dates import format_human_date
from exercise_tracker.models.exercise import Exercise


async def test_log_exercise_without_date_uses_today(client, alice):
    res = await client.post(
        f"/api/users/{alice['id']}/exercises",
        json={"description": "run", "duration": "30"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body == {
        "id": alice["id"],
        "username": "alice",
        "date": format_human_date(date.today()),
        "duration": 30,
        "description": "run",
    }


async def test_log_exercise_with_date(client, alice):
    res = await client.post(
        f"/api/users/{alice['id']}/exercises",
        json={"description": "swim", "duration": 45, "date": "2024-01-01"},
    )
    assert res.status_code == 200
    assert res.json()["date"] == "Mon Jan 01 2024"
    assert res.json()["duration"] == 45


async def test_log_exercise_fractional_duration(client, alice):
    res = await client.post(
        f"/api/users/{alice['id']}/exercises",
        json={"description": "walk", "duration": "12.5"},
    )
    assert res.status_code == 200
    assert res.json()["duration"] == 12.5


async def test_log_exercise_accepts_form_data(client, alice):
    res = await client.post(
        f"/api/users/{alice['id']}/exercises",
        data={"description": "row", "duration": "20", "date": "2023-05-10"},
    )
    assert res.status_code == 200
    assert res.json()["date"] == "Wed May 10 2023"


async def test_log_exercise_invalid_date_returns_400_and_stores_nothing(
    client, alice, test_db,
):
    res = await client.post(
        f"/api/users/{alice['id']}/exercises",
        json={"description": "run", "duration": "30", "date": "2023-13-40"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid date format. Use YYYY-MM-DD"}
    count = await test_db.scalar(select(func.count()).select_from(Exercise))
    assert count == 0


async def test_log_exercise_missing_description_returns_400(client, alice):
    res = await client.post(
        f"/api/users/{alice['id']}/exercises", json={"duration": "30"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Description and duration are required"}


async def test_log_exercise_non_numeric_duration_returns_400(client, alice):
    res = await client.post(
        f"/api/users/{alice['id']}/exercises",
        json={"description": "run", "duration": "thirty"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Duration must be a number"}


async def test_log_exercise_unknown_user_returns_404(client):
    res = await client.post(
        f"/api/users/{uuid4()}/exercises",
        json={"description": "run", "duration": "30"},
    )
    assert res.status_code == 404
    assert res.json() == {"error": "User not found"}


async def test_log_exercise_malformed_user_id_returns_404(client):
    res = await client.post(
        "/api/users/not-an-id/exercises",
        json={"description": "run", "duration": "30"},
    )
    assert res.status_code == 404


async def test_missing_fields_reported_before_unknown_user(client):
    res = await client.post(f"/api/users/{uuid4()}/exercises", json={})
    assert res.status_code == 400


async def test_unknown_user_reported_before_invalid_date(client):
    res = await client.post(
        f"/api/users/{uuid4()}/exercises",
        json={"description": "run", "duration": "30", "date": "nope"},
    )
    assert res.status_code == 404


async def test_log_exercise_oversized_json_duration_returns_400(client, alice):
    res = await client.post(
        f"/api/users/{alice['id']}/exercises",
        content=b'{"description": "run", "duration": 1' + b"0" * 400 + b"}",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Duration must be a number"}
