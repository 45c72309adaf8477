from __future__ import annotations

from typing import Mapping, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def insert_many(self, records: Sequence[AttendanceRecord]) -> int:
        """Insert all records or none of them."""

        raise NotImplementedError

    def count_for_laborer(self, laborer_id: str) -> int:
        raise NotImplementedError

    def count_for_laborers(self, laborer_ids: Sequence[str]) -> Mapping[str, int]:
        """Grouped count; ids without attendance may be missing from the result."""

        raise NotImplementedError
