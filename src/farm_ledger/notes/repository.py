from __future__ import annotations

from typing import Optional, Protocol

from .model import Note


class NoteRepository(Protocol):
    def get_for_owner(self, owner_id: str) -> Optional[Note]:
        raise NotImplementedError

    def upsert_for_owner(self, owner_id: str, content: str) -> Note:
        raise NotImplementedError
