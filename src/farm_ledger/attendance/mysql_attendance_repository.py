from __future__ import annotations

from typing import Mapping, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert_many(self, records: Sequence[AttendanceRecord]) -> int:
        if not records:
            return 0
        # One transaction for the whole batch: db_cursor rolls back on failure.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO attendance_records(laborer_id, work_date, owner_id)
                VALUES(%s,%s,%s)
                """,
                [(r.laborer_id, r.work_date, r.owner_id) for r in records],
            )
        return len(records)

    def count_for_laborer(self, laborer_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS total FROM attendance_records WHERE laborer_id=%s",
                (laborer_id,),
            )
            r = fetchone(cur)
            return int(r["total"]) if r else 0

    def count_for_laborers(self, laborer_ids: Sequence[str]) -> Mapping[str, int]:
        if not laborer_ids:
            return {}

        placeholders = ",".join(["%s"] * len(laborer_ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT laborer_id, COUNT(*) AS total
                FROM attendance_records
                WHERE laborer_id IN ({placeholders})
                GROUP BY laborer_id
                """,
                tuple(laborer_ids),
            )
            return {str(r["laborer_id"]): int(r["total"]) for r in fetchall(cur)}
