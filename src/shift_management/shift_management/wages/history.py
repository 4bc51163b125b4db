from __future__ import annotations

from bisect import bisect_right
from datetime import date
from typing import Iterable, Optional

from .model import WageRecord


class WageHistory:
    """One employee's wage records, sorted once by (effective_date, wage_id).

    Lookups are a bisect over the effective dates, so a record inserted later
    for the same effective date (higher wage_id) wins.
    """

    def __init__(self, records: Iterable[WageRecord]):
        self._records = sorted(records, key=lambda r: (r.effective_date, r.wage_id))
        self._dates = [r.effective_date for r in self._records]

    def effective_on(self, on_date: date) -> Optional[WageRecord]:
        """Record with the latest effective_date <= on_date, or None."""
        idx = bisect_right(self._dates, on_date)
        if idx == 0:
            return None
        return self._records[idx - 1]

    def latest(self) -> Optional[WageRecord]:
        return self._records[-1] if self._records else None

    def newest_first(self) -> list[WageRecord]:
        return list(reversed(self._records))
