"""Use case to list the loans a journal entry was assigned to."""

from glledger.application.ports.journal_entry_repository import (
    JournalEntryRepositoryPort,
)
from glledger.domain.models import JournalEntryAssignment


class GetJournalEntryAssignmentsUseCase:
    """Return loan/client assignments through non-reversed loan transactions."""

    def __init__(self, journal_entry_repository: JournalEntryRepositoryPort) -> None:
        self._repository = journal_entry_repository

    def execute(self, journal_entry_id: int) -> list[JournalEntryAssignment]:
        return self._repository.fetch_journal_entry_assignments(journal_entry_id)


__all__ = ["GetJournalEntryAssignmentsUseCase"]
