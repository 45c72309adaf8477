from __future__ import annotations

from enum import Enum


class CountStrategy(str, Enum):
    """How the salary report counts attendance per laborer."""

    PER_LABORER = "per_laborer"
    GROUPED = "grouped"
