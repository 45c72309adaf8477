from __future__ import annotations

import logging
import uuid
from typing import Any, Sequence

from ..common.validators import require_non_empty, require_non_negative_amount
from ..core.exceptions import NotFoundError
from .model import Laborer
from .repository import LaborerRepository

logger = logging.getLogger(__name__)


class LaborerService:
    """Use case: manage the laborers of one owner."""

    def __init__(self, laborers: LaborerRepository):
        self._laborers = laborers

    def list_laborers(self, owner_id: str) -> Sequence[Laborer]:
        return self._laborers.list_for_owner(owner_id)

    def create_laborer(self, owner_id: str, *, name: Any, daily_wage: Any) -> Laborer:
        name = require_non_empty(name, "Name")
        wage = require_non_negative_amount(daily_wage, "Daily wage")

        laborer = self._laborers.create(
            Laborer(
                laborer_id=uuid.uuid4().hex,
                owner_id=owner_id,
                name=name,
                daily_wage=wage,
            )
        )
        logger.info("laborer %s created for owner %s", laborer.laborer_id, owner_id)
        return laborer

    def delete_laborer(self, owner_id: str, laborer_id: str) -> None:
        """Delete a laborer and every attendance row pointing at it.

        The cascade matches on laborer id only, so rows recorded by another
        owner against the same id go too. Both deletes run in one transaction.
        """

        removed = self._laborers.delete_with_attendance(owner_id, laborer_id)
        if removed is None:
            raise NotFoundError("Laborer not found")

        logger.info("laborer %s deleted with %d attendance record(s)", laborer_id, removed)
