from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class SalaryReportLine:
    """Read-model: one laborer's days worked and pay, computed on demand."""

    laborer_id: str
    name: str
    days_worked: int
    salary: Decimal

    def to_dict(self) -> dict:
        return {
            "id": self.laborer_id,
            "name": self.name,
            "daysWorked": self.days_worked,
            "salary": float(self.salary),
        }


@dataclass(frozen=True)
class ReportTotals:
    laborers: int
    days_worked: int
    salary: Decimal

    def to_dict(self) -> dict:
        return {
            "laborers": self.laborers,
            "daysWorked": self.days_worked,
            "salary": float(self.salary),
        }
