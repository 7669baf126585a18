from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.validators import parse_period
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/points", methods=["POST"], endpoint="points_append")
    def append_points():
        payload = request.get_json(silent=True) or {}
        tx = container.points_service.record(
            payload.get("employee_id"),
            payload.get("amount"),
            payload.get("type"),
            payload.get("reason", ""),
        )
        return jsonify(tx.to_dict()), 201

    @app.route("/api/points/<employee_id>", methods=["GET"], endpoint="points_summary")
    def points_summary(employee_id: str):
        month, year = parse_period(request.args.get("month"), request.args.get("year"), today=now_local().date())
        history = container.points_service.history(employee_id, month=month, year=year)
        return jsonify(
            {
                "employee_id": employee_id,
                "month": month,
                "year": year,
                "total_points": container.points_service.get_employee_points(employee_id, month, year),
                "history": [t.to_dict() for t in history],
            }
        )

    @app.route("/api/points/task-master", methods=["POST"], endpoint="points_task_master")
    def task_master():
        payload = request.get_json(silent=True) or {}
        tx = container.points_service.award_task_master(
            payload.get("employee_id"),
            completed=payload.get("completed"),
            total=payload.get("total"),
        )
        return jsonify({"awarded": tx is not None, "transaction": tx.to_dict() if tx else None})

    @app.route("/api/points/perfect-audit", methods=["POST"], endpoint="points_perfect_audit")
    def perfect_audit():
        payload = request.get_json(silent=True) or {}
        tx = container.points_service.award_perfect_audit(
            payload.get("employee_id"),
            overall_score=payload.get("overall_score", 0),
        )
        return jsonify({"awarded": tx is not None, "transaction": tx.to_dict() if tx else None})
