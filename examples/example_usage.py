"""Example: run the payroll service directly (no Flask).

Prints the monthly payroll given as ``year month`` arguments.
"""

import importlib
import json
import sys

from config import get_settings_module

from src.shift_management.shift_management.container import build_container


def main():
    year, month = int(sys.argv[1]), int(sys.argv[2])
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, default_wage=settings.DEFAULT_HOURLY_WAGE)
    results = container.payroll_service.calculate_monthly(year=year, month=month)
    print(json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
