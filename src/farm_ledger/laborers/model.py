from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Laborer:
    """A named worker with a current daily wage, owned by one user."""

    laborer_id: str
    owner_id: str
    name: str
    daily_wage: Decimal
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.laborer_id,
            "name": self.name,
            "dailyWage": float(self.daily_wage),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
