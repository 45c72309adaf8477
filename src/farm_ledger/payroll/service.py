from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..laborers.repository import LaborerRepository
from .counting.base import AttendanceCounter
from .counting.per_laborer import PerLaborerCounter
from .model import ReportTotals, SalaryReportLine

logger = logging.getLogger(__name__)


class SalaryReportService:
    """Joins laborers with their attendance counts into salary lines.

    Days worked count every attendance row that references the laborer id,
    whoever recorded it, across all dates. Pay uses the current wage, so a
    wage change applies to past attendance as well.
    """

    def __init__(
        self,
        laborers: LaborerRepository,
        attendance: AttendanceRepository,
        *,
        counter: Optional[AttendanceCounter] = None,
    ):
        self._laborers = laborers
        self._counter = counter or PerLaborerCounter(attendance)

    def generate_report(self, owner_id: str) -> list[SalaryReportLine]:
        laborers = self._laborers.list_for_owner(owner_id)
        counts = self._counter.count(laborers)

        lines = []
        # Keep the store's order; no sorting.
        for lab in laborers:
            days = int(counts.get(lab.laborer_id, 0))
            wage = lab.daily_wage if lab.daily_wage is not None else Decimal(0)
            lines.append(
                SalaryReportLine(
                    laborer_id=lab.laborer_id,
                    name=lab.name,
                    days_worked=days,
                    salary=days * wage,
                )
            )

        logger.debug("salary report for owner %s: %d line(s)", owner_id, len(lines))
        return lines

    @staticmethod
    def summarize(lines: Sequence[SalaryReportLine]) -> ReportTotals:
        return ReportTotals(
            laborers=len(lines),
            days_worked=sum(line.days_worked for line in lines),
            salary=sum((line.salary for line in lines), Decimal(0)),
        )
