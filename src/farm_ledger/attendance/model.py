from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AttendanceRecord:
    """A fact that a laborer worked on a given date.

    work_date is stored exactly as submitted; it is never parsed.
    """

    laborer_id: str
    work_date: str
    owner_id: str
