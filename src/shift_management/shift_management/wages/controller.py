from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_positive_int
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/hourly-wages/history", methods=["GET"], endpoint="hourly_wage_history")
    def hourly_wage_history():
        try:
            employee_id = require_positive_int(request.args.get("employee_id"), "employee_id")
            history = container.wage_service.history(employee_id)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            app.logger.exception("wage history failed")
            return jsonify({"error": "Failed to load wage history"}), 500

        return jsonify([w.to_dict() for w in history])

    @app.route("/api/hourly-wages/current", methods=["GET"], endpoint="hourly_wage_current")
    def hourly_wage_current():
        try:
            employee_id = require_positive_int(request.args.get("employee_id"), "employee_id")
            record = container.wage_service.current(employee_id)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            app.logger.exception("current wage lookup failed")
            return jsonify({"error": "Failed to load hourly wage"}), 500

        return jsonify(record.to_dict())
