from __future__ import annotations

import logging
from typing import Any

from ..common.validators import require_id_list, require_present
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: append attendance for a batch of laborers."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def record_attendance(self, owner_id: str, *, work_date: Any, laborer_ids: Any) -> int:
        """Write one record per id, duplicates included.

        Ids are not checked against the laborer registry, so orphaned or
        foreign ids are stored as given. The batch is all-or-nothing.
        """

        work_date = require_present(work_date, "Date")
        ids = require_id_list(laborer_ids, "Laborer ids")
        if not ids:
            return 0

        records = [AttendanceRecord(laborer_id=i, work_date=work_date, owner_id=owner_id) for i in ids]
        written = self._attendance.insert_many(records)
        logger.info("recorded %d attendance record(s) for %s (owner %s)", written, work_date, owner_id)
        return written

    def count_days(self, laborer_id: str) -> int:
        return self._attendance.count_for_laborer(laborer_id)
