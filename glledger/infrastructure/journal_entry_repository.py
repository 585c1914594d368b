"""SQLAlchemy-backed repository for journal entry reads."""

from sqlalchemy import text
from sqlalchemy.engine import Engine

from glledger.application.ports.database import DatabaseEnginePort
from glledger.application.ports.journal_entry_repository import (
    JournalEntryRepositoryPort,
)
from glledger.domain.constants import JournalEntryCategory
from glledger.domain.models import (
    JournalEntryAssignment,
    JournalEntryAssociationParameters,
    JournalEntryFilter,
    JournalEntryView,
    Page,
)
from glledger.infrastructure.journal_entry_mapper import (
    JournalEntryMapper,
    map_assignment_row,
)
from glledger.infrastructure.journal_entry_query import (
    JOURNAL_ENTRIES_COUNT_SQL,
    JOURNAL_ENTRY_ASSIGNMENTS_SQL,
    JournalEntryQueryBuilder,
)
from glledger.infrastructure.pagination import PaginationHelper

_FOUND_ROWS_DIALECTS = ("mysql", "mariadb")


class SqlAlchemyJournalEntryRepository(JournalEntryRepositoryPort):
    """Repository backed by SQLAlchemy for journal entry queries."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        found_rows_mode: str = "auto",
        query_builder: JournalEntryQueryBuilder | None = None,
        pagination_helper: PaginationHelper | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            found_rows_mode: ``auto``, ``found_rows`` or ``count``.
            query_builder: Optional query builder override.
            pagination_helper: Optional pagination helper override.
        """
        self._db_port = db_port
        self._found_rows_mode = found_rows_mode
        self._query_builder = query_builder or JournalEntryQueryBuilder()
        self._pagination_helper = pagination_helper or PaginationHelper()

    def fetch_journal_entries(
        self,
        entry_filter: JournalEntryFilter,
        associations: JournalEntryAssociationParameters,
    ) -> Page[JournalEntryView]:
        engine = self._db_port.get_ledger_engine()
        use_found_rows = self._uses_found_rows(engine)
        query = self._query_builder.build(
            entry_filter,
            associations,
            calc_found_rows=use_found_rows,
        )
        mapper = JournalEntryMapper(associations)
        with engine.connect() as conn:
            return self._pagination_helper.fetch_page(
                conn,
                query.page_statement(),
                query.parameters,
                mapper.map_row,
                count_statement=None if use_found_rows else query.count_statement(),
            )

    def fetch_journal_entry(
        self,
        journal_entry_id: int,
        associations: JournalEntryAssociationParameters,
    ) -> JournalEntryView | None:
        query = self._query_builder.build_by_id(journal_entry_id, associations)
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(query.page_statement(), query.parameters).first()
        if row is None:
            return None
        return JournalEntryMapper(associations).map_row(row)

    def fetch_journal_entry_assignments(
        self,
        journal_entry_id: int,
    ) -> list[JournalEntryAssignment]:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                text(JOURNAL_ENTRY_ASSIGNMENTS_SQL),
                {"journal_entry_id": journal_entry_id},
            ).all()
        return [map_assignment_row(row) for row in rows]

    def count_journal_entries(
        self,
        category: JournalEntryCategory | None,
        search: str | None,
    ) -> int:
        params = {
            "category": category.value if category is not None else None,
            "search": self._search_pattern(search),
        }
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            count = conn.execute(text(JOURNAL_ENTRIES_COUNT_SQL), params).scalar()
        return int(count or 0)

    def _uses_found_rows(self, engine: Engine) -> bool:
        if self._found_rows_mode == "found_rows":
            return True
        if self._found_rows_mode == "count":
            return False
        return engine.dialect.name in _FOUND_ROWS_DIALECTS

    @staticmethod
    def _search_pattern(search: str | None) -> str:
        if search is None or not search.strip():
            return "%"
        return f"%{search.strip()}%"


__all__ = ["SqlAlchemyJournalEntryRepository"]
