import math
from typing import Optional

from app.config import PERCENT_SCALE, MIN_PERCENT_LIMIT
from app.models.enums import YesNo


def derive_ceiling(absolute_limit: Optional[float], percent_limit: Optional[float]) -> float:
    """
    Effective spending ceiling in cents from the two optional limits.

    A percent limit below MIN_PERCENT_LIMIT counts as unset. When both limits
    are set the tighter one wins. With no limit at all the ceiling is
    infinite, so cost alone never rejects.
    """
    has_percent = percent_limit is not None and percent_limit >= MIN_PERCENT_LIMIT
    has_absolute = absolute_limit is not None

    if has_absolute and has_percent:
        return min(float(absolute_limit), percent_limit * PERCENT_SCALE)
    if has_absolute:
        return float(absolute_limit)
    if has_percent:
        return percent_limit * PERCENT_SCALE
    return math.inf


def approve(estimate_cost: int, ceiling: float, use_thresholds: YesNo) -> bool:
    # equal to the ceiling is a rejection
    return use_thresholds is YesNo.NO or estimate_cost < ceiling
