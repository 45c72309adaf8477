from __future__ import annotations

import pytest

from farm_ledger.attendance.model import AttendanceRecord
from farm_ledger.core.enums import CountStrategy
from farm_ledger.core.exceptions import ValidationError
from farm_ledger.payroll.counting.factory import build_counter
from farm_ledger.payroll.counting.grouped import GroupedCounter
from farm_ledger.payroll.counting.per_laborer import PerLaborerCounter
from farm_ledger.payroll.service import SalaryReportService


def _seed(container, attendance_repo):
    svc = container.laborer_service
    ravi = svc.create_laborer("owner-a", name="Ravi", daily_wage=500)
    sita = svc.create_laborer("owner-a", name="Sita", daily_wage="412.25")
    svc.create_laborer("owner-a", name="Idle", daily_wage=300)
    meena = svc.create_laborer("owner-b", name="Meena", daily_wage=400)

    att = container.attendance_service
    att.record_attendance("owner-a", work_date="2024-01-01", laborer_ids=[ravi.laborer_id, sita.laborer_id])
    att.record_attendance("owner-a", work_date="2024-01-02", laborer_ids=[ravi.laborer_id, ravi.laborer_id])
    att.record_attendance("owner-b", work_date="2024-01-02", laborer_ids=[meena.laborer_id, "orphan"])
    attendance_repo.insert_many([AttendanceRecord(laborer_id=sita.laborer_id, work_date="x", owner_id="owner-b")])


@pytest.mark.parametrize("owner", ["owner-a", "owner-b", "nobody"])
def test_grouped_and_per_laborer_reports_agree(container, laborers_repo, attendance_repo, owner):
    _seed(container, attendance_repo)

    per_laborer = SalaryReportService(laborers_repo, attendance_repo, counter=PerLaborerCounter(attendance_repo))
    grouped = SalaryReportService(laborers_repo, attendance_repo, counter=GroupedCounter(attendance_repo))

    assert per_laborer.generate_report(owner) == grouped.generate_report(owner)


def test_grouped_counter_uses_a_single_query(container, attendance_repo, laborers_repo):
    _seed(container, attendance_repo)
    counter = GroupedCounter(attendance_repo)

    counts = counter.count(laborers_repo.list_for_owner("owner-a"))

    assert attendance_repo.grouped_calls == 1
    assert attendance_repo.count_calls == 0
    assert sorted(counts.values()) == [0, 2, 3]


def test_grouped_counter_skips_store_for_no_laborers(attendance_repo):
    assert GroupedCounter(attendance_repo).count([]) == {}
    assert attendance_repo.grouped_calls == 0


def test_factory_builds_requested_strategy(attendance_repo):
    assert isinstance(build_counter("per_laborer", attendance_repo), PerLaborerCounter)
    assert isinstance(build_counter(CountStrategy.GROUPED, attendance_repo), GroupedCounter)


def test_factory_rejects_unknown_strategy(attendance_repo):
    with pytest.raises(ValidationError):
        build_counter("sql-magic", attendance_repo)
