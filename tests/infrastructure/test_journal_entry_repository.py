"""Tests for SqlAlchemyJournalEntryRepository."""

from types import SimpleNamespace
from unittest.mock import MagicMock

from sqlalchemy import create_engine, text

from glledger.domain.constants import JournalEntryCategory
from glledger.domain.models import (
    JournalEntryAssociationParameters,
    JournalEntryFilter,
    Page,
    SearchParameters,
)
from glledger.infrastructure.journal_entry_query import (
    JOURNAL_ENTRIES_COUNT_SQL,
    JOURNAL_ENTRY_ASSIGNMENTS_SQL,
)
from glledger.infrastructure.journal_entry_repository import (
    SqlAlchemyJournalEntryRepository,
)

NO_ASSOCIATIONS = JournalEntryAssociationParameters()


def _build_db_port(dialect: str = "mysql") -> tuple[MagicMock, MagicMock]:
    engine = MagicMock()
    engine.dialect.name = dialect
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context

    db_port = MagicMock()
    db_port.get_ledger_engine.return_value = engine
    return db_port, conn


def _build_sqlite_port(entry_count: int) -> MagicMock:
    engine = create_engine("sqlite://")
    with engine.begin() as conn:
        conn.execute(
            text(
                "create table acc_gl_account (id integer primary key, "
                "classification_enum integer, name text, currency_code text, "
                "gl_code text)"
            )
        )
        conn.execute(text("create table m_office (id integer primary key, name text)"))
        conn.execute(
            text("create table m_appuser (id integer primary key, username text)")
        )
        conn.execute(
            text(
                "create table m_currency (code text primary key, name text, "
                "internationalized_name_code text, display_symbol text, "
                "decimal_places integer, currency_multiplesof integer)"
            )
        )
        conn.execute(
            text(
                "create table m_loan_transaction (id integer primary key, "
                "related_transaction_id text, is_reversed integer)"
            )
        )
        conn.execute(
            text(
                "create table acc_gl_journal_entry (id integer primary key, "
                "account_id integer, office_id integer, reversal_id integer, "
                "currency_code text, transaction_id text, "
                "loan_transaction_id integer, reversed integer, ref_num text, "
                "manual_entry integer, entry_date date, type_enum integer, "
                "amount numeric, exchange_rate numeric, description text, "
                "entity_type_enum integer, entity_id integer, createdby_id integer, "
                "created_date datetime, unidentified_entry integer, "
                "profit integer, profit_transaction_id text)"
            )
        )
        conn.execute(
            text(
                "insert into acc_gl_account values (1, 1, 'Cash', 'USD', '10-100')"
            )
        )
        conn.execute(text("insert into m_office values (1, 'Head Office')"))
        conn.execute(text("insert into m_appuser values (1, 'mifos')"))
        conn.execute(
            text(
                "insert into m_currency values "
                "('USD', 'US Dollar', 'currency.USD', '$', 2, 1)"
            )
        )
        for entry_id in range(1, entry_count + 1):
            conn.execute(
                text(
                    "insert into acc_gl_journal_entry (id, account_id, office_id, "
                    "currency_code, transaction_id, reversed, manual_entry, "
                    "entry_date, type_enum, amount, createdby_id, created_date, "
                    "unidentified_entry, profit) values (:id, 1, 1, 'USD', :tx, 0, "
                    "1, :entry_date, 1, :amount, 1, :entry_date, 0, 0)"
                ),
                {
                    "id": entry_id,
                    "tx": f"MX{entry_id}",
                    "entry_date": f"2020-02-{(entry_id - 1) // 2 + 1:02d}",
                    "amount": entry_id * 10,
                },
            )

    db_port = MagicMock()
    db_port.get_ledger_engine.return_value = engine
    return db_port


def test_fetch_journal_entries_reads_found_rows_on_mysql() -> None:
    """MySQL pages should use SQL_CALC_FOUND_ROWS and FOUND_ROWS()."""
    db_port, conn = _build_db_port("mysql")
    helper = MagicMock()
    helper.fetch_page.return_value = Page(page_items=[], total_filtered_records=0)
    repository = SqlAlchemyJournalEntryRepository(db_port, pagination_helper=helper)

    repository.fetch_journal_entries(
        JournalEntryFilter(transaction_id="T1", search=SearchParameters(office_id=5)),
        NO_ASSOCIATIONS,
    )

    args, kwargs = helper.fetch_page.call_args
    assert args[0] is conn
    assert str(args[1]).startswith("select SQL_CALC_FOUND_ROWS ")
    assert args[2] == {"transaction_id": "T1", "office_id": 5}
    assert kwargs["count_statement"] is None


def test_fetch_journal_entries_uses_count_query_elsewhere() -> None:
    """Other dialects should wrap the filtered query in COUNT(*)."""
    db_port, _ = _build_db_port("postgresql")
    helper = MagicMock()
    helper.fetch_page.return_value = Page(page_items=[], total_filtered_records=0)
    repository = SqlAlchemyJournalEntryRepository(db_port, pagination_helper=helper)

    repository.fetch_journal_entries(JournalEntryFilter(), NO_ASSOCIATIONS)

    args, kwargs = helper.fetch_page.call_args
    assert not str(args[1]).startswith("select SQL_CALC_FOUND_ROWS")
    assert str(kwargs["count_statement"]).startswith("select count(*)")


def test_found_rows_mode_overrides_dialect() -> None:
    db_port, _ = _build_db_port("mysql")
    helper = MagicMock()
    helper.fetch_page.return_value = Page(page_items=[], total_filtered_records=0)
    repository = SqlAlchemyJournalEntryRepository(
        db_port,
        found_rows_mode="count",
        pagination_helper=helper,
    )

    repository.fetch_journal_entries(JournalEntryFilter(), NO_ASSOCIATIONS)

    assert helper.fetch_page.call_args.kwargs["count_statement"] is not None


def test_fetch_journal_entry_returns_none_when_missing() -> None:
    db_port, conn = _build_db_port()
    conn.execute.return_value.first.return_value = None
    repository = SqlAlchemyJournalEntryRepository(db_port)

    assert repository.fetch_journal_entry(404, NO_ASSOCIATIONS) is None
    statement, params = conn.execute.call_args.args
    assert str(statement).endswith("where journalEntry.id = :journal_entry_id")
    assert params == {"journal_entry_id": 404}


def test_fetch_journal_entry_assignments_maps_rows() -> None:
    db_port, conn = _build_db_port()
    conn.execute.return_value.all.return_value = [
        SimpleNamespace(
            journal_id=9,
            loan_id=2,
            enum_value="Active",
            display_name="Jane Doe",
            external_id=None,
            account_no="000000002",
        )
    ]
    repository = SqlAlchemyJournalEntryRepository(db_port)

    assignments = repository.fetch_journal_entry_assignments(9)

    assert [a.loan_id for a in assignments] == [2]
    statement, params = conn.execute.call_args.args
    assert str(statement) == JOURNAL_ENTRY_ASSIGNMENTS_SQL
    assert params == {"journal_entry_id": 9}


def test_count_journal_entries_binds_category_and_search_pattern() -> None:
    db_port, conn = _build_db_port()
    conn.execute.return_value.scalar.return_value = 4
    repository = SqlAlchemyJournalEntryRepository(db_port)

    count = repository.count_journal_entries(JournalEntryCategory.REVERSED, " rent ")

    assert count == 4
    statement, params = conn.execute.call_args.args
    assert str(statement) == JOURNAL_ENTRIES_COUNT_SQL
    assert params == {"category": "reversed", "search": "%rent%"}


def test_count_journal_entries_without_filters_matches_everything() -> None:
    db_port, conn = _build_db_port()
    conn.execute.return_value.scalar.return_value = None
    repository = SqlAlchemyJournalEntryRepository(db_port)

    assert repository.count_journal_entries(None, None) == 0
    assert conn.execute.call_args.args[1] == {"category": None, "search": "%"}


def test_fetch_journal_entries_pages_through_sqlite() -> None:
    """limit=10, offset=20 should return the 21st to 30th matching rows."""
    repository = SqlAlchemyJournalEntryRepository(
        _build_sqlite_port(35),
        found_rows_mode="count",
    )

    page = repository.fetch_journal_entries(
        JournalEntryFilter(
            search=SearchParameters(office_id=1, limit=10, offset=20),
            only_manual_entries=True,
        ),
        NO_ASSOCIATIONS,
    )

    assert [entry.id for entry in page.page_items] == list(range(21, 31))
    assert page.total_filtered_records == 35
    first = page.page_items[0]
    assert first.transaction_id == "MX21"
    assert first.gl_account_name == "Cash"
    assert first.office_name == "Head Office"
    assert first.created_by_user_name == "mifos"
    assert first.currency.display_symbol == "$"
    assert first.used_in_loan is False
    assert first.manual_entry is True


def test_fetch_journal_entry_reads_sqlite_row() -> None:
    repository = SqlAlchemyJournalEntryRepository(
        _build_sqlite_port(3),
        found_rows_mode="count",
    )

    entry = repository.fetch_journal_entry(2, NO_ASSOCIATIONS)

    assert entry.id == 2
    assert entry.entry_type.value == "CREDIT"
    assert str(entry.transaction_date) == "2020-02-01"
