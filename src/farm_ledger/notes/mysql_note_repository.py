from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Note
from .repository import NoteRepository


class MySQLNoteRepository(NoteRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_owner(self, owner_id: str) -> Optional[Note]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT owner_id, content, updated_at FROM notes WHERE owner_id=%s",
                (owner_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Note(owner_id=str(r["owner_id"]), content=r["content"] or "", updated_at=r.get("updated_at"))

    def upsert_for_owner(self, owner_id: str, content: str) -> Note:
        updated_at = datetime.now()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO notes(owner_id, content, updated_at)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE content=VALUES(content), updated_at=VALUES(updated_at)
                """,
                (owner_id, content, updated_at),
            )
        return Note(owner_id=owner_id, content=content, updated_at=updated_at)
