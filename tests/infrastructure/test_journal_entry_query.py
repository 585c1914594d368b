"""Tests for the journal entry query builder."""

from datetime import date

import pytest

from glledger.domain.errors import PlatformApiDataValidationError
from glledger.domain.models import (
    JournalEntryAssociationParameters,
    JournalEntryFilter,
    SearchParameters,
)
from glledger.infrastructure.journal_entry_query import (
    DEFAULT_ORDER_BY,
    JournalEntryQueryBuilder,
    Predicate,
)

NO_ASSOCIATIONS = JournalEntryAssociationParameters()


def _build(entry_filter: JournalEntryFilter, **kwargs):
    return JournalEntryQueryBuilder().build(entry_filter, NO_ASSOCIATIONS, **kwargs)


def test_transaction_and_office_filters_bind_in_order() -> None:
    """Transaction id and office id should be two conjuncts, two parameters."""
    query = _build(
        JournalEntryFilter(
            search=SearchParameters(office_id=5),
            transaction_id="T1",
        )
    )

    assert query.predicates == (
        Predicate(
            "journalEntry.transaction_id = :transaction_id",
            (("transaction_id", "T1"),),
        ),
        Predicate("journalEntry.office_id = :office_id", (("office_id", 5),)),
    )
    assert list(query.parameters.items()) == [("transaction_id", "T1"), ("office_id", 5)]
    assert (
        " where journalEntry.transaction_id = :transaction_id "
        "and journalEntry.office_id = :office_id"
    ) in query.page_sql()


def test_no_filters_produce_no_where_clause() -> None:
    query = _build(JournalEntryFilter())

    assert query.predicates == ()
    assert query.parameters == {}
    assert " where " not in query.page_sql()
    assert query.page_sql().endswith(f" order by {DEFAULT_ORDER_BY}")


def test_date_range_is_inclusive_between_with_formatted_bounds() -> None:
    query = _build(
        JournalEntryFilter(from_date=date(2020, 1, 1), to_date=date(2020, 1, 31))
    )

    assert query.predicates == (
        Predicate(
            "journalEntry.entry_date between :from_date and :to_date",
            (("from_date", "2020-01-01"), ("to_date", "2020-01-31")),
        ),
    )


@pytest.mark.parametrize(
    ("entry_filter", "expected"),
    [
        (
            JournalEntryFilter(from_date=date(2021, 3, 9)),
            Predicate(
                "journalEntry.entry_date >= :from_date",
                (("from_date", "2021-03-09"),),
            ),
        ),
        (
            JournalEntryFilter(to_date=date(2021, 12, 31)),
            Predicate(
                "journalEntry.entry_date <= :to_date",
                (("to_date", "2021-12-31"),),
            ),
        ),
    ],
)
def test_open_ended_date_ranges(entry_filter, expected) -> None:
    assert _build(entry_filter).predicates == (expected,)


def test_filters_follow_fixed_order() -> None:
    """Every filter present should appear in the documented order."""
    query = _build(
        JournalEntryFilter(
            search=SearchParameters(office_id=2),
            transaction_id="L17",
            entity_type=1,
            gl_account_id=40,
            from_date=date(2020, 1, 1),
            only_unidentified_entries=True,
        )
    )

    assert [predicate.sql for predicate in query.predicates] == [
        "journalEntry.transaction_id = :transaction_id",
        "journalEntry.entity_type_enum = :entity_type",
        "journalEntry.office_id = :office_id",
        "journalEntry.account_id = :gl_account_id",
        "journalEntry.entry_date >= :from_date",
        "journalEntry.unidentified_entry = 1 and ltex.id is null",
    ]
    assert list(query.parameters) == [
        "transaction_id",
        "entity_type",
        "office_id",
        "gl_account_id",
        "from_date",
    ]


def test_manual_flag_suppresses_entity_type_filter() -> None:
    """Entity type is ignored whenever the manual-only flag is set."""
    query = _build(JournalEntryFilter(entity_type=2, only_manual_entries=True))

    assert query.predicates == (Predicate("journalEntry.manual_entry = 1"),)
    assert query.parameters == {}


def test_false_flags_and_zero_ids_add_nothing() -> None:
    query = _build(
        JournalEntryFilter(
            search=SearchParameters(office_id=0),
            transaction_id="   ",
            entity_type=0,
            gl_account_id=0,
            only_manual_entries=False,
            only_unidentified_entries=False,
        )
    )

    assert query.predicates == ()


def test_custom_ordering_and_pagination() -> None:
    query = _build(
        JournalEntryFilter(
            search=SearchParameters(
                order_by="journalEntry.amount",
                sort_order="desc",
                limit=10,
                offset=20,
            )
        )
    )

    assert query.page_sql().endswith(
        " order by journalEntry.amount DESC limit 10 offset 20"
    )


def test_offset_requires_limit() -> None:
    query = _build(JournalEntryFilter(search=SearchParameters(offset=20)))

    assert query.limit is None
    assert query.offset is None
    assert " limit " not in query.page_sql()


def test_ordering_must_be_a_column_reference() -> None:
    with pytest.raises(PlatformApiDataValidationError) as exc_info:
        _build(
            JournalEntryFilter(
                search=SearchParameters(
                    order_by="id; drop table m_office",
                    sort_order="sideways",
                )
            )
        )

    assert exc_info.value.parameter_names == ["orderBy", "sortOrder"]


def test_found_rows_prefix_and_count_query() -> None:
    query = _build(
        JournalEntryFilter(gl_account_id=3, search=SearchParameters(limit=5)),
        calc_found_rows=True,
    )

    assert query.page_sql().startswith("select SQL_CALC_FOUND_ROWS ")
    count_sql = query.count_sql()
    assert count_sql.startswith("select count(*) as total_count from (")
    assert "journalEntry.account_id = :gl_account_id" in count_sql
    assert " limit " not in count_sql
    assert " order by " not in count_sql


def test_associations_control_columns_and_joins() -> None:
    builder = JournalEntryQueryBuilder()
    plain = builder.build(JournalEntryFilter(), NO_ASSOCIATIONS).page_sql()
    detailed = builder.build(
        JournalEntryFilter(),
        JournalEntryAssociationParameters(
            running_balance_required=True,
            transaction_details_required=True,
        ),
    ).page_sql()

    assert "office_running_balance" not in plain
    assert "m_payment_detail" not in plain
    assert "m_note" not in plain
    assert "journalEntry.office_running_balance as officeRunningBalance" in detailed
    assert "left join m_payment_detail as pd" in detailed
    assert "left join m_code_value as cdv" in detailed
    assert detailed.index("as lt on") < detailed.index("m_payment_detail")


def test_build_by_id_binds_identifier() -> None:
    query = JournalEntryQueryBuilder().build_by_id(77, NO_ASSOCIATIONS)

    assert query.parameters == {"journal_entry_id": 77}
    assert query.page_sql().endswith(" where journalEntry.id = :journal_entry_id")
