from __future__ import annotations

from collections import Counter
from datetime import datetime
from typing import Optional

import pytest

from farm_ledger.attendance.model import AttendanceRecord
from farm_ledger.container import wire_services
from farm_ledger.laborers.model import Laborer
from farm_ledger.notes.model import Note


class InMemoryLaborers:
    def __init__(self, attendance: "InMemoryAttendance"):
        self._rows: dict[str, Laborer] = {}
        self._attendance = attendance
        self.list_calls = 0

    def list_for_owner(self, owner_id: str):
        self.list_calls += 1
        return [lab for lab in self._rows.values() if lab.owner_id == owner_id]

    def get_for_owner(self, owner_id: str, laborer_id: str) -> Optional[Laborer]:
        lab = self._rows.get(laborer_id)
        return lab if lab and lab.owner_id == owner_id else None

    def create(self, laborer: Laborer) -> Laborer:
        saved = Laborer(
            laborer_id=laborer.laborer_id,
            owner_id=laborer.owner_id,
            name=laborer.name,
            daily_wage=laborer.daily_wage,
            created_at=laborer.created_at or datetime(2024, 1, 1, 8, 0),
        )
        self._rows[saved.laborer_id] = saved
        return saved

    def delete_with_attendance(self, owner_id: str, laborer_id: str) -> Optional[int]:
        if not self.get_for_owner(owner_id, laborer_id):
            return None
        del self._rows[laborer_id]
        before = len(self._attendance.records)
        self._attendance.records = [r for r in self._attendance.records if r.laborer_id != laborer_id]
        return before - len(self._attendance.records)


class InMemoryAttendance:
    def __init__(self):
        self.records: list[AttendanceRecord] = []
        self.count_calls = 0
        self.grouped_calls = 0

    def insert_many(self, records) -> int:
        self.records.extend(records)
        return len(records)

    def count_for_laborer(self, laborer_id: str) -> int:
        self.count_calls += 1
        return sum(1 for r in self.records if r.laborer_id == laborer_id)

    def count_for_laborers(self, laborer_ids):
        self.grouped_calls += 1
        wanted = set(laborer_ids)
        return dict(Counter(r.laborer_id for r in self.records if r.laborer_id in wanted))


class InMemoryNotes:
    def __init__(self):
        self._by_owner: dict[str, Note] = {}

    def get_for_owner(self, owner_id: str) -> Optional[Note]:
        return self._by_owner.get(owner_id)

    def upsert_for_owner(self, owner_id: str, content: str) -> Note:
        note = Note(owner_id=owner_id, content=content, updated_at=datetime(2024, 1, 1, 9, 0))
        self._by_owner[owner_id] = note
        return note


@pytest.fixture
def laborers_repo(attendance_repo):
    return InMemoryLaborers(attendance_repo)


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def notes_repo():
    return InMemoryNotes()


@pytest.fixture
def container(laborers_repo, attendance_repo, notes_repo):
    return wire_services(
        laborers_repo=laborers_repo,
        attendance_repo=attendance_repo,
        notes_repo=notes_repo,
    )


@pytest.fixture
def grouped_container(laborers_repo, attendance_repo, notes_repo):
    return wire_services(
        laborers_repo=laborers_repo,
        attendance_repo=attendance_repo,
        notes_repo=notes_repo,
        report_strategy="grouped",
    )
