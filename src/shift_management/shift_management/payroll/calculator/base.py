from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import time


@dataclass(frozen=True)
class ShiftHours:
    gross_hours: float
    net_hours: float


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked hours)."""

    @abstractmethod
    def compute(self, start: time, end: time, break_minutes: int) -> ShiftHours:
        raise NotImplementedError
