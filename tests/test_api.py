from __future__ import annotations

from datetime import date, time

import pytest

from src.incentive_system.incentive_system.container import wire_container
from src.incentive_system.incentive_system.main import create_app
from src.incentive_system.incentive_system.reviews.model import PerformanceReview
from src.incentive_system.incentive_system.shifts.model import ShiftSchedule


@pytest.fixture
def container(employees, schedules, reviews, ledger_repo, clock):
    return wire_container(
        employees=employees,
        schedules=schedules,
        reviews=reviews,
        ledger_repo=ledger_repo,
        clock=clock,
    )


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    app.config["TESTING"] = True
    return app.test_client()


def test_append_and_read_points(client):
    resp = client.post("/api/points", json={"employee_id": "A", "amount": 3, "type": "TASK_MASTER", "reason": "tasks"})
    assert resp.status_code == 201
    assert resp.get_json()["type"] == "TASK_MASTER"

    summary = client.get("/api/points/A?month=3&year=2026").get_json()
    assert summary["total_points"] == 3
    assert len(summary["history"]) == 1


def test_invalid_append_returns_400(client, container):
    resp = client.post("/api/points", json={"employee_id": "A", "amount": 7, "type": "EARLY_BIRD", "reason": "x"})
    assert resp.status_code == 400
    assert "error" in resp.get_json()
    assert len(container.ledger) == 0


def test_checkin_awards_early_bird(client, schedules, clock):
    schedules.add(ShiftSchedule(employee_id="A", work_date=date(2026, 3, 10), start_time=time(9, 0)))

    body = client.post("/api/attendance/check-in", json={"employee_id": "A"}).get_json()

    assert body["status"] == "PRESENT"
    assert body["early_bird"] is True
    assert body["award"]["amount"] == 2


def test_bonus_leaderboard_and_eotm(client, reviews):
    client.post("/api/points", json={"employee_id": "A", "amount": 2, "type": "EARLY_BIRD", "reason": "x"})
    client.post("/api/points", json={"employee_id": "A", "amount": 3, "type": "TASK_MASTER", "reason": "x"})
    client.post("/api/points", json={"employee_id": "A", "amount": -1, "type": "MANUAL_ADJUSTMENT", "reason": "x"})
    client.post("/api/points", json={"employee_id": "B", "amount": 10, "type": "MANUAL_ADJUSTMENT", "reason": "x"})
    reviews.reviews.append(
        PerformanceReview(review_id="r-1", employee_id="A", period_month=3, period_year=2026, overall_score=4.5, is_finalized=True)
    )

    assert client.get("/api/bonus/A?month=3&year=2026").get_json()["bonus"] == 20000

    board = client.get("/api/leaderboard?month=3&year=2026").get_json()["entries"]
    assert [(e["employee_id"], e["rank"]) for e in board] == [("B", 1), ("A", 2)]

    winner = client.get("/api/eotm?month=3&year=2026").get_json()
    assert winner["employee_id"] == "A"
    assert winner["final_score"] == 24.5


def test_eotm_not_found(client):
    assert client.get("/api/eotm?month=1&year=2026").status_code == 404


def test_bad_period_returns_400(client):
    assert client.get("/api/leaderboard?month=13&year=2026").status_code == 400
    assert client.get("/api/leaderboard?month=march").status_code == 400


def test_bonus_rate_config_endpoints(client):
    resp = client.put("/api/config/bonus-rates", json={"category": "rate_probation", "rate": 4000})
    assert resp.get_json()["rate_probation"] == 4000

    assert client.put("/api/config/bonus-rates", json={"category": "rate_probation", "rate": -5}).status_code == 400

    reset = client.post("/api/config/bonus-rates/reset").get_json()
    assert reset == {"rate_permanent": 5000, "rate_probation": 3000, "rate_daily_worker": 2000}


def test_eotm_bonus_only_through_award_endpoint(client, container):
    client.post("/api/points", json={"employee_id": "A", "amount": 3, "type": "TASK_MASTER", "reason": "x"})
    direct = client.post(
        "/api/points",
        json={"employee_id": "C", "amount": -9, "type": "EOTM_BONUS", "reason": "Employee of the Month 03/2026"},
    )
    assert direct.status_code == 400
    assert len(container.ledger) == 1

    award = client.post("/api/eotm/award", json={"month": 3, "year": 2026, "points": 10})
    assert award.status_code == 201
    assert award.get_json()["employee_id"] == "A"
    assert client.post("/api/eotm/award", json={"month": 3, "year": 2026, "points": 10}).status_code == 400


def test_padded_employee_id_is_refused(client, container):
    resp = client.post("/api/points", json={"employee_id": " A ", "amount": 2, "type": "EARLY_BIRD", "reason": "x"})
    assert resp.status_code == 400
    assert len(container.ledger) == 0
