from __future__ import annotations

from enum import Enum


class CoverageStatus(str, Enum):
    """Staffing status of one time slot on one date."""

    SUFFICIENT = "sufficient"
    SHORTAGE = "shortage"
    # Listed for API compatibility; never produced by the evaluator.
    EXCESS = "excess"
