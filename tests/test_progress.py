import logging
from datetime import UTC, datetime

from fastapi.testclient import TestClient

from deps.identity import current_user_id
from main import app
from progress import ProgressEvaluator, StatelessProgressStore, check_achievements
from schemas.progress import ProgressEvent

client = TestClient(app)

FIXED = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)


def _evaluator():
    return ProgressEvaluator(clock=lambda: FIXED)


def _ids(snapshot):
    return [a.id for a in snapshot.achievements]


def test_completed_high_score_unlocks_both():
    event = ProgressEvent(simulation_id="double-slit", completed=True, score=95.0, time_spent_minutes=10)
    s = _evaluator().save(event)
    assert _ids(s) == ["first-experiment", "quantum-master"]
    assert len(s.completed_simulations) == 1
    done = s.completed_simulations[0]
    assert done.simulation_id == "double-slit"
    assert done.score == 95.0 and done.time_spent_minutes == 10
    assert done.completed_at == FIXED
    assert s.current_simulation is None
    assert s.total_time_minutes == 10
    assert s.last_activity == FIXED


def test_in_progress_high_score_still_master():
    event = ProgressEvent(simulation_id="tunneling", completed=False, score=92.0, time_spent_minutes=5)
    s = _evaluator().save(event)
    assert s.completed_simulations == []
    assert s.current_simulation is not None
    assert s.current_simulation.simulation_id == "tunneling"
    assert _ids(s) == ["quantum-master"]


def test_no_score_not_completed_no_achievements():
    event = ProgressEvent(simulation_id="x", completed=False, time_spent_minutes=3)
    s = _evaluator().save(event)
    assert s.achievements == []
    assert s.total_time_minutes == 3


def test_threshold_is_inclusive():
    at = ProgressEvent(simulation_id="x", completed=False, score=90.0, time_spent_minutes=1)
    below = ProgressEvent(simulation_id="x", completed=False, score=89.99, time_spent_minutes=1)
    assert [a.id for a in check_achievements(at, FIXED)] == ["quantum-master"]
    assert check_achievements(below, FIXED) == []


def test_completed_low_score_first_experiment_only():
    event = ProgressEvent(simulation_id="hydrogen", completed=True, score=40.0, time_spent_minutes=7)
    s = _evaluator().save(event)
    assert _ids(s) == ["first-experiment"]
    assert s.achievements[0].icon == "🔬"
    assert s.achievements[0].earned_at == FIXED


def test_parameters_pass_through_to_current_simulation():
    params = {"wavelength": 532, "observer": [True, {"nested": None}]}
    event = ProgressEvent(
        simulation_id="double-slit", completed=False, time_spent_minutes=2, parameters=params
    )
    s = _evaluator().save(event)
    assert s.current_simulation.last_parameters == params
    assert s.current_simulation.started_at == FIXED


def test_save_emits_diagnostic_log(caplog):
    event = ProgressEvent(simulation_id="tunneling", completed=True, time_spent_minutes=4)
    with caplog.at_level(logging.INFO, logger="physics-tutorial.progress"):
        _evaluator().save(event)
    records = [r for r in caplog.records if r.name == "physics-tutorial.progress"]
    assert len(records) == 1
    assert records[0].getMessage() == "Saving progress: simulation=tunneling, completed=True"
    assert records[0].simulation_id == "tunneling"
    assert records[0].completed is True


def test_store_threads_user_id_and_never_accumulates():
    store = StatelessProgressStore(_evaluator())
    event = ProgressEvent(simulation_id="double-slit", completed=True, score=99.0, time_spent_minutes=10)
    saved = store.save("learner-7", event)
    assert saved.user_id == "learner-7"

    loaded = store.load("learner-7")
    assert loaded.user_id == "learner-7"
    assert loaded.completed_simulations == []
    assert loaded.current_simulation is None
    assert loaded.achievements == []
    assert loaded.total_time_minutes == 0


# ---------- HTTP ----------


def test_get_progress_default():
    r = client.get("/api/v1/progress")
    assert r.status_code == 200
    body = r.json()
    assert body["user_id"] == "demo-user"
    assert body["completed_simulations"] == []
    assert body["current_simulation"] is None
    assert body["total_time_minutes"] == 0
    assert body["achievements"] == []
    assert "last_activity" in body


def test_post_progress():
    r = client.post(
        "/api/v1/progress",
        json={"simulation_id": "double-slit", "completed": True, "score": 95.0, "time_spent_minutes": 10},
    )
    assert r.status_code == 200
    body = r.json()
    assert [a["id"] for a in body["achievements"]] == ["first-experiment", "quantum-master"]
    assert body["completed_simulations"][0]["simulation_id"] == "double-slit"


def test_get_after_post_is_still_default():
    client.post(
        "/api/v1/progress",
        json={"simulation_id": "tunneling", "completed": True, "time_spent_minutes": 8},
    )
    body = client.get("/api/v1/progress").json()
    assert body["completed_simulations"] == [] and body["achievements"] == []


def test_post_progress_rejects_malformed():
    r = client.post("/api/v1/progress", json={"simulation_id": "x", "completed": True})
    assert r.status_code == 422
    r = client.post(
        "/api/v1/progress",
        json={"simulation_id": "x", "completed": True, "time_spent_minutes": -1},
    )
    assert r.status_code == 422


def test_identity_override():
    app.dependency_overrides[current_user_id] = lambda: "someone-else"
    try:
        body = client.get("/api/v1/progress").json()
    finally:
        app.dependency_overrides.clear()
    assert body["user_id"] == "someone-else"
