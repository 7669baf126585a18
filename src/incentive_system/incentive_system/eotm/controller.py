from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.validators import parse_period
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/eotm", methods=["GET"], endpoint="eotm")
    def eotm():
        month, year = parse_period(request.args.get("month"), request.args.get("year"), today=now_local().date())
        winner = container.eotm_service.compute_eotm(month, year)
        if winner is None:
            return jsonify({"error": f"No Employee of the Month for {month:02d}/{year}"}), 404
        return jsonify(winner.to_dict())

    @app.route("/api/eotm/candidates", methods=["GET"], endpoint="eotm_candidates")
    def eotm_candidates():
        month, year = parse_period(request.args.get("month"), request.args.get("year"), today=now_local().date())
        candidates = container.eotm_service.rank_candidates(month, year)
        return jsonify({"month": month, "year": year, "candidates": [c.to_dict() for c in candidates]})

    @app.route("/api/eotm/award", methods=["POST"], endpoint="eotm_award")
    def eotm_award():
        payload = request.get_json(silent=True) or {}
        month, year = parse_period(payload.get("month"), payload.get("year"), today=now_local().date())
        tx = container.eotm_service.award_eotm_bonus(month, year, points=payload.get("points"))
        if tx is None:
            return jsonify({"error": f"No Employee of the Month for {month:02d}/{year}"}), 404
        return jsonify(tx.to_dict()), 201
