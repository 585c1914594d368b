"""Composition root for wiring infrastructure adapters."""

from glledger.application.ports.database import DatabaseEnginePort
from glledger.application.ports.journal_entry_repository import (
    JournalEntryRepositoryPort,
)
from glledger.application.use_cases import (
    GetJournalEntriesCountUseCase,
    GetJournalEntryAssignmentsUseCase,
    RetrieveJournalEntriesUseCase,
    RetrieveJournalEntryUseCase,
)
from glledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from glledger.infrastructure.journal_entry_repository import (
    SqlAlchemyJournalEntryRepository,
)
from glledger.infrastructure.logging.logger import get_app_logger
from glledger.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_journal_entry_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> JournalEntryRepositoryPort:
    """Return the SQL journal entry repository."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or LedgerSettings.from_env()
    return SqlAlchemyJournalEntryRepository(
        resolved_db,
        found_rows_mode=resolved_settings.found_rows_mode,
    )


def build_retrieve_journal_entries_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> RetrieveJournalEntriesUseCase:
    """Return the paginated journal entry read use case."""
    settings = LedgerSettings.from_env()
    return RetrieveJournalEntriesUseCase(
        build_journal_entry_repository(db_port, settings=settings),
        logger=get_app_logger(),
        max_page_limit=settings.max_page_limit,
    )


def build_retrieve_journal_entry_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> RetrieveJournalEntryUseCase:
    """Return the single journal entry read use case."""
    return RetrieveJournalEntryUseCase(
        build_journal_entry_repository(db_port),
        logger=get_app_logger(),
    )


def build_journal_entry_assignments_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetJournalEntryAssignmentsUseCase:
    """Return the journal entry assignments use case."""
    return GetJournalEntryAssignmentsUseCase(build_journal_entry_repository(db_port))


def build_journal_entries_count_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetJournalEntriesCountUseCase:
    """Return the journal entry count use case."""
    return GetJournalEntriesCountUseCase(
        build_journal_entry_repository(db_port),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_journal_entry_repository",
    "build_retrieve_journal_entries_use_case",
    "build_retrieve_journal_entry_use_case",
    "build_journal_entry_assignments_use_case",
    "build_journal_entries_count_use_case",
]
