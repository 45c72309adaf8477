from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Note:
    """The owner's single crop note."""

    owner_id: str
    content: str
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "content": self.content,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
