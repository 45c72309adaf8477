from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_REPORT_COUNT_STRATEGY
from .database.connection import DBConfig, DatabaseConnection
from .laborers.mysql_laborer_repository import MySQLLaborerRepository
from .laborers.repository import LaborerRepository
from .laborers.service import LaborerService
from .notes.mysql_note_repository import MySQLNoteRepository
from .notes.repository import NoteRepository
from .notes.service import NoteService
from .payroll.counting.factory import build_counter
from .payroll.service import SalaryReportService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    laborers_repo: LaborerRepository
    attendance_repo: AttendanceRepository
    notes_repo: NoteRepository

    laborer_service: LaborerService
    attendance_service: AttendanceService
    salary_report_service: SalaryReportService
    note_service: NoteService

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()


def wire_services(
    *,
    laborers_repo: LaborerRepository,
    attendance_repo: AttendanceRepository,
    notes_repo: NoteRepository,
    report_strategy: str = DEFAULT_REPORT_COUNT_STRATEGY,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    return Container(
        conn=conn,
        laborers_repo=laborers_repo,
        attendance_repo=attendance_repo,
        notes_repo=notes_repo,
        laborer_service=LaborerService(laborers_repo),
        attendance_service=AttendanceService(attendance_repo),
        salary_report_service=SalaryReportService(
            laborers_repo,
            attendance_repo,
            counter=build_counter(report_strategy, attendance_repo),
        ),
        note_service=NoteService(notes_repo),
    )


def build_container(*, db_config: dict, report_strategy: str = DEFAULT_REPORT_COUNT_STRATEGY) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    conn.open()

    return wire_services(
        laborers_repo=MySQLLaborerRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        notes_repo=MySQLNoteRepository(conn),
        report_strategy=report_strategy,
        conn=conn,
    )
