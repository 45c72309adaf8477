from __future__ import annotations

from typing import Mapping, Sequence

from ...attendance.repository import AttendanceRepository
from ...laborers.model import Laborer
from .base import AttendanceCounter


class GroupedCounter(AttendanceCounter):
    """Single grouped count for all laborers; same numbers as PerLaborerCounter."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def count(self, laborers: Sequence[Laborer]) -> Mapping[str, int]:
        if not laborers:
            return {}
        ids = list(dict.fromkeys(lab.laborer_id for lab in laborers))
        totals = self._attendance.count_for_laborers(ids)
        return {i: int(totals.get(i, 0)) for i in ids}
