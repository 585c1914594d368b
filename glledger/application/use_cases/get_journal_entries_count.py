"""Use case to count grouped journal entries by category and search text."""

from glledger.application.ports.journal_entry_repository import (
    JournalEntryRepositoryPort,
)
from glledger.domain.constants import JOURNAL_ENTRY_RESOURCE, JournalEntryCategory
from glledger.domain.errors import ApiParameterError, PlatformApiDataValidationError
from glledger.infrastructure.logging.logger import get_app_logger


class GetJournalEntriesCountUseCase:
    """Count journal entry groups for one of the exclusive categories."""

    def __init__(
        self,
        journal_entry_repository: JournalEntryRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = journal_entry_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        category: JournalEntryCategory | str | None = None,
        search: str | None = None,
    ) -> int:
        """Return the number of grouped entries.

        Args:
            category: ``reversed``, ``unidentified_profit``,
                ``unidentified_deposits`` or None for every entry.
            search: Free text matched against description, client name,
                formatted dates and credit/debit sums.

        Raises:
            PlatformApiDataValidationError: When the category is unknown.
        """
        resolved = self._resolve_category(category)
        count = self._repository.count_journal_entries(resolved, search)
        self._logger.info(
            f"Counted {count} journal entries "
            f"(category={resolved.value if resolved else None}, search={search!r})"
        )
        return count

    @staticmethod
    def _resolve_category(
        category: JournalEntryCategory | str | None,
    ) -> JournalEntryCategory | None:
        if category is None or isinstance(category, JournalEntryCategory):
            return category
        if not category.strip():
            return None
        try:
            return JournalEntryCategory(category.strip().lower())
        except ValueError:
            allowed = ", ".join(member.value for member in JournalEntryCategory)
            raise PlatformApiDataValidationError(
                [
                    ApiParameterError(
                        message_code=(
                            f"validation.msg.{JOURNAL_ENTRY_RESOURCE}.filter.invalid"
                        ),
                        default_message=f"The parameter filter must be one of {allowed}.",
                        parameter_name="filter",
                        value=category,
                    )
                ]
            ) from None


__all__ = ["GetJournalEntriesCountUseCase"]
