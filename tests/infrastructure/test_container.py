"""Tests for the composition root."""

from unittest.mock import MagicMock

from glledger.application.use_cases import (
    GetJournalEntriesCountUseCase,
    GetJournalEntryAssignmentsUseCase,
    RetrieveJournalEntriesUseCase,
    RetrieveJournalEntryUseCase,
)
from glledger.infrastructure import container
from glledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from glledger.infrastructure.journal_entry_repository import (
    SqlAlchemyJournalEntryRepository,
)
from glledger.infrastructure.settings import LedgerSettings


def test_build_database_adapter_returns_sqlalchemy_adapter() -> None:
    assert isinstance(container.build_database_adapter(), SqlAlchemyDatabaseEngineAdapter)


def test_build_journal_entry_repository_uses_settings() -> None:
    db_port = MagicMock()

    repository = container.build_journal_entry_repository(
        db_port,
        settings=LedgerSettings(found_rows_mode="count"),
    )

    assert isinstance(repository, SqlAlchemyJournalEntryRepository)
    assert repository._db_port is db_port
    assert repository._found_rows_mode == "count"


def test_use_case_builders_wire_repository(monkeypatch) -> None:
    """Every builder should return its use case with the configured cap."""
    monkeypatch.setattr(
        container.LedgerSettings,
        "from_env",
        classmethod(lambda cls: cls(found_rows_mode="auto", max_page_limit=25)),
    )
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    db_port = MagicMock()

    list_use_case = container.build_retrieve_journal_entries_use_case(db_port)

    assert isinstance(list_use_case, RetrieveJournalEntriesUseCase)
    assert list_use_case._max_page_limit == 25
    assert isinstance(
        container.build_retrieve_journal_entry_use_case(db_port),
        RetrieveJournalEntryUseCase,
    )
    assert isinstance(
        container.build_journal_entry_assignments_use_case(db_port),
        GetJournalEntryAssignmentsUseCase,
    )
    assert isinstance(
        container.build_journal_entries_count_use_case(db_port),
        GetJournalEntriesCountUseCase,
    )
