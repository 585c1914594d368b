"""Use case to list journal entries page by page."""

from dataclasses import replace

from glledger.application.ports.journal_entry_repository import (
    JournalEntryRepositoryPort,
)
from glledger.domain.constants import DEFAULT_MAX_PAGE_LIMIT
from glledger.domain.models import (
    JournalEntryAssociationParameters,
    JournalEntryFilter,
    JournalEntryView,
    Page,
)
from glledger.infrastructure.logging.logger import get_app_logger


class RetrieveJournalEntriesUseCase:
    """Return one filtered page of journal entries with the total count."""

    def __init__(
        self,
        journal_entry_repository: JournalEntryRepositoryPort,
        logger=None,
        max_page_limit: int = DEFAULT_MAX_PAGE_LIMIT,
    ) -> None:
        """Initialize the use case.

        Args:
            journal_entry_repository: Port providing journal entry reads.
            logger: Optional logger compatible with logging.Logger-like API.
            max_page_limit: Default and largest page size; larger limits are
                capped.
        """
        self._repository = journal_entry_repository
        self._logger = logger or get_app_logger()
        self._max_page_limit = max_page_limit

    def execute(
        self,
        entry_filter: JournalEntryFilter | None = None,
        associations: JournalEntryAssociationParameters | None = None,
    ) -> Page[JournalEntryView]:
        """Return the requested page.

        Args:
            entry_filter: Filters, ordering and pagination; defaults to all
                entries. A missing limit becomes the maximum page size and
                a limit <= 0 reads every matching entry.
            associations: Optional sections to load for each entry.

        Returns:
            Page: Entries on the page and the number of matching entries.
        """
        entry_filter = self._checked_filter(entry_filter or JournalEntryFilter())
        associations = associations or JournalEntryAssociationParameters()
        page = self._repository.fetch_journal_entries(entry_filter, associations)
        self._logger.info(
            f"Fetched {len(page.page_items)} journal entries "
            f"(total={page.total_filtered_records}, "
            f"limit={entry_filter.search.limit}, "
            f"offset={entry_filter.search.offset})"
        )
        return page

    def _checked_filter(self, entry_filter: JournalEntryFilter) -> JournalEntryFilter:
        limit = entry_filter.search.limit
        if limit is None:
            self._logger.info(
                f"No limit requested; using page size {self._max_page_limit}"
            )
        elif limit <= self._max_page_limit:
            return entry_filter
        else:
            self._logger.warning(
                f"Requested limit {limit} exceeds {self._max_page_limit}; capping"
            )
        search = replace(entry_filter.search, limit=self._max_page_limit)
        return replace(entry_filter, search=search)


__all__ = ["RetrieveJournalEntriesUseCase"]
