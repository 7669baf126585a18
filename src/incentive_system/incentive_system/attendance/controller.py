from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="attendance_checkin")
    def checkin():
        payload = request.get_json(silent=True) or {}
        decision = container.attendance_service.check_in(payload.get("employee_id"))
        return jsonify(decision.to_dict())
