"""Page fetching over a single connection."""

from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.sql.elements import TextClause

from glledger.domain.models import Page

T = TypeVar("T")

FOUND_ROWS_SQL = "SELECT FOUND_ROWS()"


class PaginationHelper:
    """Run a page query and its total-count query on the same connection."""

    def fetch_page(
        self,
        conn: Connection,
        page_statement: TextClause,
        params: dict[str, Any],
        row_mapper: Callable[[Any], T],
        count_statement: TextClause | None = None,
    ) -> Page[T]:
        """Return mapped rows and the number of rows matching the filters.

        Args:
            conn: Open connection; FOUND_ROWS() is only meaningful on the
                connection that ran the page query.
            page_statement: Paginated SELECT.
            params: Bound parameters shared by both statements.
            row_mapper: Callable mapping one result row.
            count_statement: Total-count statement. When None the page query
                is expected to use SQL_CALC_FOUND_ROWS and FOUND_ROWS() is read.

        Returns:
            Page: Mapped rows plus the total filtered record count.
        """
        rows = conn.execute(page_statement, params).all()
        items = [row_mapper(row) for row in rows]
        if count_statement is None:
            total = conn.execute(text(FOUND_ROWS_SQL)).scalar()
        else:
            total = conn.execute(count_statement, params).scalar()
        return Page(page_items=items, total_filtered_records=int(total or 0))


__all__ = ["PaginationHelper", "FOUND_ROWS_SQL"]
