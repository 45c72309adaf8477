from __future__ import annotations

import logging
from typing import Any

from ..core.exceptions import ValidationError
from .model import Note
from .repository import NoteRepository

logger = logging.getLogger(__name__)


class NoteService:
    """Use case: keep one free-text crop note per owner."""

    def __init__(self, notes: NoteRepository):
        self._notes = notes

    def save_note(self, owner_id: str, content: Any) -> Note:
        if not isinstance(content, str):
            raise ValidationError("Note must be text")
        note = self._notes.upsert_for_owner(owner_id, content)
        logger.info("note saved for owner %s (%d chars)", owner_id, len(content))
        return note

    def latest_note(self, owner_id: str) -> Note:
        return self._notes.get_for_owner(owner_id) or Note(owner_id=owner_id, content="")
