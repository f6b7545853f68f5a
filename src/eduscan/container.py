from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .attendance.debounce import RescanDebouncer
from .attendance.factory import AttendanceStrategyFactory
from .attendance.service import AttendanceService
from .attendance.store_repository import StoreAttendanceRepository
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .grades.service import GradeService
from .grades.store_repository import StoreGradeRepository
from .reports.service import ReportService
from .store.backends import DocumentBackend, FileDocumentBackend, InMemoryDocumentBackend
from .store.document_store import DocumentStore
from .store.mysql_backend import MySQLDocumentBackend
from .students.service import StudentService
from .students.store_repository import StoreStudentRepository
from .summaries.service import SummaryService
from .summaries.summarizer import GroqSummarizer, Summarizer
from .users.service import AuthService, UserService
from .users.store_repository import StoreSessionRepository, StoreUserRepository


@dataclass(frozen=True)
class Container:
    store: DocumentStore

    users_repo: StoreUserRepository
    sessions_repo: StoreSessionRepository
    grades_repo: StoreGradeRepository
    students_repo: StoreStudentRepository
    attendance_repo: StoreAttendanceRepository

    auth_service: AuthService
    user_service: UserService
    grade_service: GradeService
    student_service: StudentService
    attendance_service: AttendanceService
    report_service: ReportService
    summary_service: SummaryService

    scan_debouncer: RescanDebouncer

    rescan_window_seconds: float = 3


def build_backend(settings) -> DocumentBackend:
    kind = str(getattr(settings, "STORE_BACKEND", "file")).lower()
    if kind == "memory":
        return InMemoryDocumentBackend()
    if kind == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(settings.DB_CONFIG))
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(conn)
        return MySQLDocumentBackend(conn)
    if kind == "file":
        return FileDocumentBackend(settings.DATA_DIR, prefix=getattr(settings, "STORE_PREFIX", "eduscan"))
    raise ValueError(f"Unknown STORE_BACKEND: {kind!r}")


def build_container(
    *,
    settings,
    backend: Optional[DocumentBackend] = None,
    summarizer_factory: Optional[Callable[[str], Summarizer]] = None,
) -> Container:
    store = DocumentStore(backend or build_backend(settings))
    store.initialize()

    users_repo = StoreUserRepository(store)
    sessions_repo = StoreSessionRepository(store)
    grades_repo = StoreGradeRepository(store)
    students_repo = StoreStudentRepository(store)
    attendance_repo = StoreAttendanceRepository(store)

    rescan_window_seconds = float(getattr(settings, "RESCAN_WINDOW_SECONDS", 3))

    model = getattr(settings, "GROQ_MODEL", "llama-3.1-8b-instant")

    def groq_factory(api_key: str) -> Summarizer:
        return GroqSummarizer(api_key=api_key, model=model)

    return Container(
        store=store,
        users_repo=users_repo,
        sessions_repo=sessions_repo,
        grades_repo=grades_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(users_repo, sessions_repo),
        user_service=UserService(users_repo),
        grade_service=GradeService(grades_repo),
        student_service=StudentService(students_repo, grades_repo),
        attendance_service=AttendanceService(
            attendance_repo,
            students_repo,
            strategy_factory=AttendanceStrategyFactory(late_cutoff_hour=int(getattr(settings, "LATE_CUTOFF_HOUR", 9))),
        ),
        report_service=ReportService(attendance_repo, students_repo),
        summary_service=SummaryService(
            api_key=getattr(settings, "GROQ_API_KEY", ""),
            summarizer_factory=summarizer_factory or groq_factory,
        ),
        scan_debouncer=RescanDebouncer(rescan_window_seconds),
        rescan_window_seconds=rescan_window_seconds,
    )
