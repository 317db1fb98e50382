"""Exercise logging API — user lookup, defaults and lenient duration.

Invariants:
    - Unknown or malformed user id → 400, nothing inserted
    - Omitted date → today's date rendered as a calendar string
    - Missing, non-numeric or out-of-range duration → stored as null, not an error
"""

from datetime import date
from uuid import uuid4

from sqlalchemy import func, select

from exercise_tracker.core.dates import render_calendar_date
from exercise_tracker.models.exercise import Exercise


async def test_add_exercise_returns_merged_view(make_user, log_exercise):
    user = await make_user("alice")
    res = await log_exercise(
        user["id"], description="swim", duration="45", date="2024-01-15",
    )
    assert res.status_code == 200
    assert res.json() == {
        "id": user["id"],
        "username": "alice",
        "description": "swim",
        "duration": 45,
        "date": "Mon Jan 15 2024",
    }


async def test_add_exercise_defaults_date_to_today(make_user, log_exercise):
    user = await make_user("alice")
    res = await log_exercise(user["id"])
    assert res.json()["date"] == render_calendar_date(date.today())


async def test_blank_date_defaults_to_today(client, make_user):
    user = await make_user("alice")
    res = await client.post(
        f"/api/users/{user['id']}/exercises",
        data={"description": "yoga", "duration": "20", "date": ""},
    )
    assert res.status_code == 200
    assert res.json()["date"] == render_calendar_date(date.today())


async def test_add_exercise_accepts_form_body(client, make_user):
    user = await make_user("alice")
    res = await client.post(
        f"/api/users/{user['id']}/exercises",
        data={"description": "row", "duration": "15", "date": "2023-06-01"},
    )
    assert res.status_code == 200
    assert res.json()["duration"] == 15
    assert res.json()["date"] == "Thu Jun 01 2023"


async def test_duration_parses_leading_integer(make_user, log_exercise):
    user = await make_user("alice")
    res = await log_exercise(user["id"], duration="25min")
    assert res.json()["duration"] == 25


async def test_non_numeric_duration_is_stored_as_null(
    make_user, log_exercise, test_db,
):
    user = await make_user("alice")
    res = await log_exercise(user["id"], duration="abc")
    assert res.status_code == 200
    assert res.json()["duration"] is None
    stored = (await test_db.execute(select(Exercise))).scalar_one()
    assert stored.duration is None


async def test_missing_duration_is_stored_as_null(client, make_user, test_db):
    user = await make_user("alice")
    res = await client.post(
        f"/api/users/{user['id']}/exercises", json={"description": "run"},
    )
    assert res.status_code == 200
    assert res.json()["duration"] is None
    stored = (await test_db.execute(select(Exercise))).scalar_one()
    assert stored.duration is None


async def test_oversized_duration_is_stored_as_null(make_user, log_exercise):
    user = await make_user("alice")
    res = await log_exercise(user["id"], duration="99999999999999999999999")
    assert res.status_code == 200
    assert res.json()["duration"] is None


async def test_unknown_user_returns_400_and_inserts_nothing(
    log_exercise, test_db,
):
    res = await log_exercise(str(uuid4()))
    assert res.status_code == 400
    assert res.json() == {"error": "User not found"}
    count = await test_db.scalar(select(func.count()).select_from(Exercise))
    assert count == 0


async def test_malformed_user_id_returns_400(log_exercise):
    res = await log_exercise("not-a-real-id")
    assert res.status_code == 400
    assert res.json() == {"error": "User not found"}


async def test_missing_description_is_validation_error(client, make_user):
    user = await make_user("alice")
    res = await client.post(
        f"/api/users/{user['id']}/exercises", json={"duration": 10},
    )
    assert res.status_code == 400
    fields = [d["field"] for d in res.json()["details"]]
    assert "body.description" in fields


async def test_unparseable_date_is_validation_error(make_user, log_exercise):
    user = await make_user("alice")
    res = await log_exercise(user["id"], date="someday")
    assert res.status_code == 400


async def test_invalid_utf8_json_is_validation_error(client, make_user):
    user = await make_user("alice")
    res = await client.post(
        f"/api/users/{user['id']}/exercises",
        content=b'{"description":"\xff","duration":5}',
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request data"


async def test_add_exercise_reports_persistence_failure(
    client, make_user, test_engine,
):
    user = await make_user("alice")
    async with test_engine.begin() as conn:
        await conn.run_sync(Exercise.__table__.drop)
    res = await client.post(
        f"/api/users/{user['id']}/exercises",
        json={"description": "run", "duration": 5},
    )
    assert res.status_code == 500
    assert res.json() == {"error": "Failed to add exercise"}
