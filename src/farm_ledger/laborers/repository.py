from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Laborer


class LaborerRepository(Protocol):
    """Store interface for Laborer.

    Every lookup is scoped by owner; services never see another owner's rows.
    """

    def list_for_owner(self, owner_id: str) -> Sequence[Laborer]:
        raise NotImplementedError

    def get_for_owner(self, owner_id: str, laborer_id: str) -> Optional[Laborer]:
        raise NotImplementedError

    def create(self, laborer: Laborer) -> Laborer:
        raise NotImplementedError

    def delete_with_attendance(self, owner_id: str, laborer_id: str) -> Optional[int]:
        """Delete the laborer and every attendance row for its id, atomically.

        Returns the number of attendance rows removed, or None when the owner
        has no such laborer (nothing is touched then).
        """
        raise NotImplementedError
