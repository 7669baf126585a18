from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.validators import parse_period
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _period():
        return parse_period(request.args.get("month"), request.args.get("year"), today=now_local().date())

    @app.route("/api/bonus/report", methods=["GET"], endpoint="bonus_report")
    def bonus_report():
        month, year = _period()
        rows = container.bonus_service.build_bonus_report(month, year)
        return jsonify({"month": month, "year": year, "rows": [r.to_dict() for r in rows]})

    @app.route("/api/bonus/<employee_id>", methods=["GET"], endpoint="bonus_for_employee")
    def bonus_for_employee(employee_id: str):
        month, year = _period()
        bonus = container.bonus_service.compute_bonus(employee_id, month, year)
        return jsonify({"employee_id": employee_id, "month": month, "year": year, "bonus": bonus})

    @app.route("/api/config/bonus-rates", methods=["GET"], endpoint="bonus_rates")
    def bonus_rates():
        return jsonify(container.bonus_rates.as_dict())

    @app.route("/api/config/bonus-rates", methods=["PUT"], endpoint="bonus_rates_update")
    def bonus_rates_update():
        payload = request.get_json(silent=True) or {}
        container.bonus_rates.update(payload.get("category"), payload.get("rate"))
        return jsonify(container.bonus_rates.as_dict())

    @app.route("/api/config/bonus-rates/reset", methods=["POST"], endpoint="bonus_rates_reset")
    def bonus_rates_reset():
        container.bonus_rates.reset_to_defaults()
        return jsonify(container.bonus_rates.as_dict())
