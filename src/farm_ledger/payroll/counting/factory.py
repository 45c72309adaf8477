from __future__ import annotations

from ...attendance.repository import AttendanceRepository
from ...core.enums import CountStrategy
from ...core.exceptions import ValidationError
from .base import AttendanceCounter
from .grouped import GroupedCounter
from .per_laborer import PerLaborerCounter


def build_counter(strategy: str | CountStrategy, attendance: AttendanceRepository) -> AttendanceCounter:
    try:
        strategy = CountStrategy(strategy)
    except ValueError:
        raise ValidationError(f"Unknown report count strategy: {strategy!r}") from None

    if strategy == CountStrategy.GROUPED:
        return GroupedCounter(attendance)
    return PerLaborerCounter(attendance)
