from datetime import datetime, timezone
import logging
import uuid

from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.actions import workouts as workout_actions
from app.actions.workouts import NOT_FOUND, create_workout_action, update_workout_action
from app.models import Workout
from app.repositories.workout_repo import WorkoutRepository

ALICE = "user_alice"
BOB = "user_bob"

def count_workouts(db):
    return db.execute(select(func.count()).select_from(Workout)).scalar_one()

def create(db, revalidator, user_id=ALICE, **data):
    data.setdefault("started_at", "2024-01-16T08:00:00")
    return create_workout_action(data, db=db, user_id=user_id, revalidator=revalidator)


def test_create_success_returns_workout_and_marks_dashboard_stale(db, revalidator):
    result = create(db, revalidator, name="Leg Day")
    assert result["success"] is True
    w = result["workout"]
    assert w.name == "Leg Day"
    assert w.user_id == ALICE
    assert w.started_at == datetime(2024, 1, 16, 8, 0)
    assert w.completed_at is None
    assert revalidator.consume() == ["/dashboard"]

def test_create_without_session_is_unauthorized(db, revalidator):
    result = create(db, revalidator, user_id=None, name="x")
    assert result == {"success": False, "error": "Unauthorized"}
    assert count_workouts(db) == 0

def test_update_without_session_is_unauthorized(db, revalidator):
    result = update_workout_action(
        {"workout_id": str(uuid.uuid4()), "name": "x"}, db=db, user_id=None, revalidator=revalidator
    )
    assert result == {"success": False, "error": "Unauthorized"}

def test_create_invalid_input_never_reaches_the_store(db, revalidator):
    result = create_workout_action(
        {"name": "", "started_at": "not-a-date"}, db=db, user_id=ALICE, revalidator=revalidator
    )
    assert result["success"] is False
    assert result["error"] == "Invalid input"
    fields = result["details"]["field_errors"]
    assert "name" in fields and "started_at" in fields
    assert count_workouts(db) == 0
    assert revalidator.consume() == []

def test_create_requires_started_at(db, revalidator):
    result = create_workout_action({"name": "No date"}, db=db, user_id=ALICE, revalidator=revalidator)
    assert result["error"] == "Invalid input"
    assert "started_at" in result["details"]["field_errors"]

def test_create_name_length_limit(db, revalidator):
    assert create(db, revalidator, name="x" * 100)["success"] is True
    result = create(db, revalidator, name="x" * 101)
    assert result["error"] == "Invalid input"
    assert "name" in result["details"]["field_errors"]

def test_create_allows_null_name(db, revalidator):
    result = create(db, revalidator, name=None)
    assert result["success"] is True
    assert result["workout"].name is None

def test_non_object_input_is_a_form_error(db, revalidator):
    result = create_workout_action("nope", db=db, user_id=ALICE, revalidator=revalidator)
    assert result["error"] == "Invalid input"
    assert result["details"]["form_errors"]

def test_owner_is_never_taken_from_input(db, revalidator):
    smuggled = create_workout_action(
        {"name": "Sneaky", "started_at": "2024-01-16T08:00:00", "user_id": BOB},
        db=db, user_id=ALICE, revalidator=revalidator,
    )
    assert smuggled["success"] is True
    assert smuggled["workout"].user_id == ALICE
    assert WorkoutRepository(db).list_by_user(BOB) == []

def test_aware_timestamps_are_stored_as_utc(db, revalidator):
    result = create(db, revalidator, started_at="2024-01-16T10:00:00+02:00")
    assert result["workout"].started_at == datetime(2024, 1, 16, 8, 0)

def test_update_partial_and_revalidates_detail_view(db, revalidator):
    w = create(db, revalidator, name="A")["workout"]
    revalidator.consume()

    result = update_workout_action(
        {"workout_id": str(w.id), "completed_at": datetime(2024, 1, 16, 9, 15, tzinfo=timezone.utc)},
        db=db, user_id=ALICE, revalidator=revalidator,
    )
    assert result["success"] is True
    assert result["workout"].name == "A"
    assert result["workout"].completed_at == datetime(2024, 1, 16, 9, 15)
    assert revalidator.consume() == ["/dashboard", f"/dashboard/workout/{w.id}"]

def test_update_someone_elses_workout_looks_like_missing(db, revalidator):
    w = create(db, revalidator, name="A")["workout"]
    foreign = update_workout_action(
        {"workout_id": str(w.id), "name": "B"}, db=db, user_id=BOB, revalidator=revalidator
    )
    missing = update_workout_action(
        {"workout_id": str(uuid.uuid4()), "name": "B"}, db=db, user_id=BOB, revalidator=revalidator
    )
    assert foreign == missing == {"success": False, "error": NOT_FOUND}
    assert WorkoutRepository(db).get(w.id, ALICE).name == "A"

def test_update_rejects_bad_id_and_null_started_at(db, revalidator):
    bad_id = update_workout_action({"workout_id": "123", "name": "x"}, db=db, user_id=ALICE, revalidator=revalidator)
    assert bad_id["error"] == "Invalid input"
    assert "workout_id" in bad_id["details"]["field_errors"]

    w = create(db, revalidator)["workout"]
    null_start = update_workout_action(
        {"workout_id": str(w.id), "started_at": None}, db=db, user_id=ALICE, revalidator=revalidator
    )
    assert null_start["error"] == "Invalid input"
    assert "started_at" in null_start["details"]["field_errors"]

def test_update_rejects_unparseable_completed_at(db, revalidator):
    w = create(db, revalidator, name="A")["workout"]
    revalidator.consume()

    result = update_workout_action(
        {"workout_id": str(w.id), "name": "B", "completed_at": "not-a-date"},
        db=db, user_id=ALICE, revalidator=revalidator,
    )
    assert result["success"] is False
    assert result["error"] == "Invalid input"
    assert "completed_at" in result["details"]["field_errors"]

    stored = WorkoutRepository(db).get(w.id, ALICE)
    assert stored.name == "A"
    assert stored.completed_at is None
    assert revalidator.consume() == []

def test_storage_failure_is_logged_and_hidden(db, revalidator, monkeypatch, caplog):
    def boom(self, *a, **kw):
        raise OperationalError("INSERT INTO workouts", {}, Exception("connection refused on 10.0.0.7"))
    monkeypatch.setattr(workout_actions.WorkoutRepository, "create", boom)

    with caplog.at_level(logging.ERROR, logger="uvicorn"):
        result = create(db, revalidator, name="A")

    assert result == {"success": False, "error": "Failed to create workout"}
    assert "10.0.0.7" not in str(result)
    assert "Failed to create workout" in caplog.text
    assert revalidator.consume() == []

def test_update_storage_failure(db, revalidator, monkeypatch):
    def boom(self, *a, **kw):
        raise OperationalError("UPDATE workouts", {}, Exception("deadlock"))
    monkeypatch.setattr(workout_actions.WorkoutRepository, "update", boom)

    result = update_workout_action(
        {"workout_id": str(uuid.uuid4()), "name": "x"}, db=db, user_id=ALICE, revalidator=revalidator
    )
    assert result == {"success": False, "error": "Failed to update workout"}
