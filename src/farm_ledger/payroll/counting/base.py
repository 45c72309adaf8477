from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping, Sequence

from ...laborers.model import Laborer


class AttendanceCounter(ABC):
    """Counting interface (Strategy Pattern for the salary report).

    Implementations return days worked keyed by laborer id, covering every
    laborer passed in.
    """

    @abstractmethod
    def count(self, laborers: Sequence[Laborer]) -> Mapping[str, int]:
        raise NotImplementedError
