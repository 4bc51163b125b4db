from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import today_local
from ..core.exceptions import NotFoundError
from .history import WageHistory
from .model import WageRecord
from .repository import WageRepository

logger = logging.getLogger(__name__)


class WageService:
    """Read-side queries over an employee's wage history."""

    def __init__(self, wages: WageRepository):
        self._wages = wages

    def history(self, employee_id: int) -> list[WageRecord]:
        """Wage records, newest effective date first."""
        return WageHistory(self._wages.list_for_employee(employee_id)).newest_first()

    def current(self, employee_id: int, *, on_date: Optional[date] = None) -> WageRecord:
        """Wage in force on on_date (today when omitted).

        When every record is future-dated, the newest one is returned.
        """
        on_date = on_date or today_local()
        history = WageHistory(self._wages.list_for_employee(employee_id))
        record = history.effective_on(on_date) or history.latest()
        if record is None:
            logger.debug("no wage history for employee=%s", employee_id)
            raise NotFoundError("No hourly wage is set for this employee")
        return record
