from __future__ import annotations

from datetime import date, time

from src.shift_management.shift_management.core.enums import CoverageStatus
from src.shift_management.shift_management.coverage.evaluator import CoverageEvaluator
from src.shift_management.shift_management.coverage.model import CoverageObservation, StaffingRequirement

MONDAY = date(2024, 3, 4)

CASHIER = StaffingRequirement(
    time_slot_id=1, day_of_week=1, start_time=time(9, 0), end_time=time(17, 0), position="cashier", required_count=2
)
KITCHEN = StaffingRequirement(
    time_slot_id=2, day_of_week=1, start_time=time(9, 0), end_time=time(17, 0), position="kitchen", required_count=3
)
CLOSE = StaffingRequirement(
    time_slot_id=3, day_of_week=1, start_time=time(17, 0), end_time=time(22, 0), position="cashier", required_count=1
)


def test_missing_observation_counts_as_zero():
    [summary] = CoverageEvaluator().evaluate(MONDAY, [CASHIER], [])

    assert summary.actual_count == 0
    assert summary.shortage == 2
    assert summary.status == CoverageStatus.SHORTAGE
    assert summary.day_of_week == 1


def test_statuses_and_signed_shortage():
    observations = [
        CoverageObservation(work_date=MONDAY, time_slot_id=1, actual_count=2),
        CoverageObservation(work_date=MONDAY, time_slot_id=2, actual_count=1),
        CoverageObservation(work_date=MONDAY, time_slot_id=3, actual_count=3),
    ]

    summaries = CoverageEvaluator().evaluate(MONDAY, [CASHIER, KITCHEN, CLOSE], observations)

    assert [s.status for s in summaries] == [
        CoverageStatus.SUFFICIENT,
        CoverageStatus.SHORTAGE,
        CoverageStatus.SUFFICIENT,
    ]
    assert [s.shortage for s in summaries] == [0, 2, -2]


def test_observations_for_other_dates_are_ignored():
    observations = [CoverageObservation(work_date=date(2024, 3, 11), time_slot_id=1, actual_count=5)]

    [summary] = CoverageEvaluator().evaluate(MONDAY, [CASHIER], observations)

    assert summary.actual_count == 0


def test_output_follows_requirement_order():
    summaries = CoverageEvaluator().evaluate(MONDAY, [CLOSE, CASHIER], [])

    assert [(s.start_time, s.position) for s in summaries] == [(time(17, 0), "cashier"), (time(9, 0), "cashier")]


def test_summary_to_dict():
    [summary] = CoverageEvaluator().evaluate(MONDAY, [CASHIER], [])

    assert summary.to_dict() == {
        "date": "2024-03-04",
        "day_of_week": 1,
        "start_time": "09:00",
        "end_time": "17:00",
        "position": "cashier",
        "required_count": 2,
        "actual_count": 0,
        "shortage": 2,
        "status": "shortage",
    }
