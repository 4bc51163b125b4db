from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_HOURLY_WAGE
from .coverage.mysql_coverage_repository import MySQLCoverageRepository, MySQLTimeSlotRepository
from .coverage.repository import CoverageRepository, TimeSlotRepository
from .coverage.service import CoverageService
from .database.connection import DBConfig, DatabaseConnection
from .payroll.aggregator import PayrollAggregator
from .payroll.calculator.standard_calculator import StandardHoursCalculator
from .payroll.service import PayrollService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .wages.mysql_wage_repository import MySQLWageRepository
from .wages.repository import WageRepository
from .wages.resolver import WageResolver
from .wages.service import WageService


@dataclass(frozen=True)
class Container:
    shifts_repo: ShiftRepository
    wages_repo: WageRepository
    time_slots_repo: TimeSlotRepository
    coverage_repo: CoverageRepository

    payroll_service: PayrollService
    coverage_service: CoverageService
    wage_service: WageService


def build_services(
    *,
    shifts_repo: ShiftRepository,
    wages_repo: WageRepository,
    time_slots_repo: TimeSlotRepository,
    coverage_repo: CoverageRepository,
    default_wage: int = DEFAULT_HOURLY_WAGE,
) -> Container:
    aggregator = PayrollAggregator(
        calculator=StandardHoursCalculator(),
        resolver=WageResolver(default_wage=default_wage),
    )
    return Container(
        shifts_repo=shifts_repo,
        wages_repo=wages_repo,
        time_slots_repo=time_slots_repo,
        coverage_repo=coverage_repo,
        payroll_service=PayrollService(shifts_repo, wages_repo, aggregator=aggregator),
        coverage_service=CoverageService(time_slots_repo, coverage_repo),
        wage_service=WageService(wages_repo),
    )


def build_container(*, db_config: dict, default_wage: int = DEFAULT_HOURLY_WAGE) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return build_services(
        shifts_repo=MySQLShiftRepository(conn),
        wages_repo=MySQLWageRepository(conn),
        time_slots_repo=MySQLTimeSlotRepository(conn),
        coverage_repo=MySQLCoverageRepository(conn),
        default_wage=default_wage,
    )
