from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_month, require_positive_int, require_year
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/calculate", methods=["GET"], endpoint="payroll_calculate")
    def payroll_calculate():
        try:
            year = require_year(request.args.get("year"))
            month = require_month(request.args.get("month"))
            results = container.payroll_service.calculate_monthly(year=year, month=month)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            app.logger.exception("payroll calculation failed")
            return jsonify({"error": "Failed to load shift data"}), 500

        return jsonify([r.to_dict() for r in results])

    @app.route("/api/payroll/employee/<employee_id>", methods=["GET"], endpoint="payroll_employee")
    def payroll_employee(employee_id: str):
        try:
            year = require_year(request.args.get("year"))
            month = require_month(request.args.get("month"))
            emp_id = require_positive_int(employee_id, "employee id")
            result = container.payroll_service.calculate_employee(employee_id=emp_id, year=year, month=month)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            app.logger.exception("employee payroll failed for employee=%s", employee_id)
            return jsonify({"error": "Failed to load shift data"}), 500

        return jsonify(result.to_dict())
