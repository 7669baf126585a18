from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.validators import parse_period
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leaderboard", methods=["GET"], endpoint="leaderboard")
    def leaderboard():
        month, year = parse_period(request.args.get("month"), request.args.get("year"), today=now_local().date())
        board = container.leaderboard_service.build_leaderboard(month, year)
        return jsonify({"month": month, "year": year, "entries": [e.to_dict() for e in board]})
