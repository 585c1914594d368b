"""Application port for journal entry reads."""

from typing import Protocol

from glledger.domain.constants import JournalEntryCategory
from glledger.domain.models import (
    JournalEntryAssignment,
    JournalEntryAssociationParameters,
    JournalEntryFilter,
    JournalEntryView,
    Page,
)


class JournalEntryRepositoryPort(Protocol):
    """Port exposing read access to journal entries."""

    def fetch_journal_entries(
        self,
        entry_filter: JournalEntryFilter,
        associations: JournalEntryAssociationParameters,
    ) -> Page[JournalEntryView]:
        """Return one page of matching entries and the total match count."""

    def fetch_journal_entry(
        self,
        journal_entry_id: int,
        associations: JournalEntryAssociationParameters,
    ) -> JournalEntryView | None:
        """Return the entry with the given id, or None when missing."""

    def fetch_journal_entry_assignments(
        self,
        journal_entry_id: int,
    ) -> list[JournalEntryAssignment]:
        """Return loan/client assignments of a journal entry."""

    def count_journal_entries(
        self,
        category: JournalEntryCategory | None,
        search: str | None,
    ) -> int:
        """Return the number of grouped entries matching category and search."""


__all__ = ["JournalEntryRepositoryPort"]
