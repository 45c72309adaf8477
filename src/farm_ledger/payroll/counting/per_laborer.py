from __future__ import annotations

from typing import Mapping, Sequence

from ...attendance.repository import AttendanceRepository
from ...laborers.model import Laborer
from .base import AttendanceCounter


class PerLaborerCounter(AttendanceCounter):
    """One count query per laborer."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def count(self, laborers: Sequence[Laborer]) -> Mapping[str, int]:
        return {lab.laborer_id: self._attendance.count_for_laborer(lab.laborer_id) for lab in laborers}
