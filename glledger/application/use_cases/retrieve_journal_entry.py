"""Use case to read a single journal entry by id."""

from glledger.application.ports.journal_entry_repository import (
    JournalEntryRepositoryPort,
)
from glledger.domain.errors import JournalEntryNotFoundError
from glledger.domain.models import (
    JournalEntryAssociationParameters,
    JournalEntryView,
)
from glledger.infrastructure.logging.logger import get_app_logger


class RetrieveJournalEntryUseCase:
    """Fetch one journal entry or fail with a not-found error."""

    def __init__(
        self,
        journal_entry_repository: JournalEntryRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = journal_entry_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        journal_entry_id: int,
        associations: JournalEntryAssociationParameters | None = None,
    ) -> JournalEntryView:
        """Return the journal entry with the given id.

        Raises:
            JournalEntryNotFoundError: When no entry has this id.
        """
        entry = self._repository.fetch_journal_entry(
            journal_entry_id,
            associations or JournalEntryAssociationParameters(),
        )
        if entry is None:
            self._logger.warning(f"Journal entry {journal_entry_id} not found")
            raise JournalEntryNotFoundError(journal_entry_id)
        return entry


__all__ = ["RetrieveJournalEntryUseCase"]
