from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Laborer
from .repository import LaborerRepository


def _to_laborer(r: dict) -> Laborer:
    return Laborer(
        laborer_id=str(r["laborer_id"]),
        owner_id=str(r["owner_id"]),
        name=r["name"],
        daily_wage=Decimal(r["daily_wage"]) if r.get("daily_wage") is not None else Decimal(0),
        created_at=r.get("created_at"),
    )


class MySQLLaborerRepository(LaborerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_owner(self, owner_id: str) -> Sequence[Laborer]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT laborer_id, owner_id, name, daily_wage, created_at
                FROM laborers
                WHERE owner_id=%s
                """,
                (owner_id,),
            )
            return [_to_laborer(r) for r in fetchall(cur)]

    def get_for_owner(self, owner_id: str, laborer_id: str) -> Optional[Laborer]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT laborer_id, owner_id, name, daily_wage, created_at
                FROM laborers
                WHERE laborer_id=%s AND owner_id=%s
                """,
                (laborer_id, owner_id),
            )
            r = fetchone(cur)
            return _to_laborer(r) if r else None

    def create(self, laborer: Laborer) -> Laborer:
        created_at = laborer.created_at or datetime.now()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO laborers(laborer_id, owner_id, name, daily_wage, created_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (laborer.laborer_id, laborer.owner_id, laborer.name, laborer.daily_wage, created_at),
            )
        return Laborer(
            laborer_id=laborer.laborer_id,
            owner_id=laborer.owner_id,
            name=laborer.name,
            daily_wage=laborer.daily_wage,
            created_at=created_at,
        )

    def delete_with_attendance(self, owner_id: str, laborer_id: str) -> Optional[int]:
        # Both deletes share one transaction; the cascade ignores the row owner.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM laborers WHERE laborer_id=%s AND owner_id=%s",
                (laborer_id, owner_id),
            )
            if cur.rowcount <= 0:
                return None
            cur.execute("DELETE FROM attendance_records WHERE laborer_id=%s", (laborer_id,))
            return int(cur.rowcount or 0)
