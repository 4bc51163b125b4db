from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/time-slots/coverage", methods=["GET"], endpoint="coverage_summary")
    def coverage_summary():
        date_s = (request.args.get("date") or "").strip()
        try:
            on_date = parse_iso_date(date_s) if date_s else None
        except ValueError:
            return jsonify({"error": "Invalid date"}), 400

        try:
            summaries = container.coverage_service.evaluate(on_date=on_date)
        except Exception:
            app.logger.exception("coverage summary failed for date=%s", date_s or "today")
            return jsonify({"error": "Failed to load coverage summary"}), 500

        return jsonify([s.to_dict() for s in summaries])
