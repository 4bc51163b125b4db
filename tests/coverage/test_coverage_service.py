from __future__ import annotations

from datetime import date, time

from src.shift_management.shift_management.coverage.model import CoverageObservation, StaffingRequirement
from src.shift_management.shift_management.coverage.service import CoverageService


class InMemoryTimeSlots:
    def __init__(self, slots):
        self._slots = slots
        self.requested_days = []

    def list_for_day_of_week(self, day_of_week):
        self.requested_days.append(day_of_week)
        return [s for s in self._slots if s.day_of_week == day_of_week]


class InMemoryCoverage:
    def __init__(self, observations):
        self._observations = observations

    def list_for_date(self, work_date):
        return [o for o in self._observations if o.work_date == work_date]


SLOTS = [
    StaffingRequirement(1, 0, time(13, 0), time(18, 0), "server", 2),
    StaffingRequirement(2, 0, time(9, 0), time(13, 0), "server", 1),
    StaffingRequirement(3, 0, time(9, 0), time(13, 0), "cook", 1),
    StaffingRequirement(4, 6, time(9, 0), time(13, 0), "cook", 1),
]


def test_uses_sunday_slots_sorted_by_start_then_position():
    sunday = date(2024, 3, 3)
    slots = InMemoryTimeSlots(SLOTS)
    coverage = InMemoryCoverage([CoverageObservation(work_date=sunday, time_slot_id=1, actual_count=2)])

    summaries = CoverageService(slots, coverage).evaluate(on_date=sunday)

    assert slots.requested_days == [0]
    assert [(s.start_time, s.position) for s in summaries] == [
        (time(9, 0), "cook"),
        (time(9, 0), "server"),
        (time(13, 0), "server"),
    ]
    assert summaries[2].status.value == "sufficient"


def test_defaults_to_today(monkeypatch):
    monkeypatch.setattr(
        "src.shift_management.shift_management.coverage.service.today_local",
        lambda: date(2024, 3, 9),
    )
    slots = InMemoryTimeSlots(SLOTS)

    summaries = CoverageService(slots, InMemoryCoverage([])).evaluate()

    assert slots.requested_days == [6]
    assert [s.work_date for s in summaries] == [date(2024, 3, 9)]


def test_day_without_slots_is_empty():
    assert CoverageService(InMemoryTimeSlots(SLOTS), InMemoryCoverage([])).evaluate(on_date=date(2024, 3, 5)) == []
