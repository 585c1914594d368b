"""Application use cases package."""

from .get_journal_entries_count import GetJournalEntriesCountUseCase
from .get_journal_entry_assignments import GetJournalEntryAssignmentsUseCase
from .retrieve_journal_entries import RetrieveJournalEntriesUseCase
from .retrieve_journal_entry import RetrieveJournalEntryUseCase

__all__ = [
    "GetJournalEntriesCountUseCase",
    "GetJournalEntryAssignmentsUseCase",
    "RetrieveJournalEntriesUseCase",
    "RetrieveJournalEntryUseCase",
]
