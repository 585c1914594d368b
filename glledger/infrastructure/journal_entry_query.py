"""SQL assembly for journal entry reads.

Queries are built as ``JournalEntryQuery`` objects: an ordered tuple of
predicates, each owning its bound parameters, rendered into SQLAlchemy
``text`` statements. Parameter order always follows predicate order.
"""

from dataclasses import dataclass
import re
from typing import Any

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause

from glledger.domain.constants import JOURNAL_ENTRY_RESOURCE, SQL_DATE_FORMAT
from glledger.domain.errors import ApiParameterError, PlatformApiDataValidationError
from glledger.domain.models import (
    JournalEntryAssociationParameters,
    JournalEntryFilter,
)

DEFAULT_ORDER_BY = "journalEntry.entry_date, journalEntry.id"

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_.]*$")
_SORT_ORDERS = ("ASC", "DESC")

_BASE_COLUMNS = (
    "journalEntry.id as id, glAccount.classification_enum as classification, "
    "glAccount.name as glAccountName, glAccount.currency_code as glAccountCurrencyCode, "
    "glAccount.gl_code as glAccountCode, glAccount.id as glAccountId, "
    "journalEntry.office_id as officeId, office.name as officeName, "
    "journalEntry.ref_num as referenceNumber, "
    "journalEntry.manual_entry as manualEntry, journalEntry.entry_date as transactionDate, "
    "journalEntry.unidentified_entry as unidentifiedEntry, "
    "journalEntry.type_enum as entryType, journalEntry.amount as amount, "
    "journalEntry.exchange_rate as exchangeRate, journalEntry.transaction_id as transactionId, "
    "journalEntry.entity_type_enum as entityType, journalEntry.entity_id as entityId, "
    "creatingUser.id as createdByUserId, creatingUser.username as createdByUserName, "
    "journalEntry.description as comments, journalEntry.created_date as createdDate, "
    "journalEntry.reversed as reversed, journalEntry.currency_code as currencyCode, "
    "curr.name as currencyName, curr.internationalized_name_code as currencyNameCode, "
    "curr.display_symbol as currencyDisplaySymbol, curr.decimal_places as currencyDigits, "
    "curr.currency_multiplesof as inMultiplesOf, "
    "journalEntry.profit as isProfit, journalEntry.profit_transaction_id as profitTransactionId, "
    "(ltex.id is not null) as usedInLoan, "
    "(reversalJournalEntry.id is not null) as isReversalEntry, "
    "lt.is_reversed as isTransactionReversed"
)

_RUNNING_BALANCE_COLUMNS = (
    ", journalEntry.is_running_balance_calculated as runningBalanceComputed, "
    "journalEntry.office_running_balance as officeRunningBalance, "
    "journalEntry.organization_running_balance as organizationRunningBalance"
)

_TRANSACTION_DETAIL_COLUMNS = (
    ", pd.receipt_number as receiptNumber, pd.check_number as checkNumber, "
    "pd.account_number as accountNumber, cdv.code_value as paymentTypeName, "
    "pd.payment_type_cv_id as paymentTypeId, pd.bank_number as bankNumber, "
    "pd.routing_code as routingCode, note.id as noteId, "
    "note.note as transactionNote, lt.transaction_type_enum as loanTransactionType, "
    "st.transaction_type_enum as savingsTransactionType"
)

_BASE_JOINS = (
    "from acc_gl_journal_entry as journalEntry "
    "left join acc_gl_account as glAccount on glAccount.id = journalEntry.account_id "
    "left join m_office as office on office.id = journalEntry.office_id "
    "left join m_appuser as creatingUser on creatingUser.id = journalEntry.createdby_id "
    "join m_currency curr on curr.code = journalEntry.currency_code "
    "left join m_loan_transaction as lt on journalEntry.loan_transaction_id = lt.id "
    "left join m_loan_transaction as ltex "
    "on journalEntry.transaction_id = ltex.related_transaction_id "
    "left join acc_gl_journal_entry as reversalJournalEntry "
    "on journalEntry.id = reversalJournalEntry.reversal_id"
)

_TRANSACTION_DETAIL_JOINS = (
    " left join m_savings_account_transaction as st "
    "on journalEntry.savings_transaction_id = st.id "
    "left join m_payment_detail as pd "
    "on lt.payment_detail_id = pd.id or st.payment_detail_id = pd.id "
    "left join m_code_value as cdv on cdv.id = pd.payment_type_cv_id "
    "left join m_note as note "
    "on lt.id = note.loan_transaction_id or st.id = note.savings_account_transaction_id"
)

JOURNAL_ENTRY_ASSIGNMENTS_SQL = (
    "SELECT j.id journal_id, l.id loan_id, c.display_name, e.enum_value, "
    "c.external_id, l.account_no "
    "FROM acc_gl_journal_entry j "
    "INNER JOIN m_loan_transaction lt ON lt.related_transaction_id = j.transaction_id "
    "INNER JOIN m_loan l ON l.id = lt.loan_id "
    "INNER JOIN m_client c ON c.id = l.client_id "
    "INNER JOIN r_enum_value e ON e.enum_id = l.loan_status_id "
    "WHERE j.id = :journal_entry_id "
    "AND lt.is_reversed = 0"
)

JOURNAL_ENTRIES_COUNT_SQL = (
    "SELECT COUNT(tt.id) AS je_count FROM ("
    "SELECT y.id FROM ("
    "SELECT m.id, DATE_FORMAT(m.created_date, '%d/%m/%Y') createdOn, "
    "DATE_FORMAT(m.entry_date, '%d/%m/%Y') transactionDate, "
    "c.display_name clientName, description, entry_date, "
    "SUM(CASE WHEN type_enum = 1 THEN IF(lt.is_reversed, m.amount / 2, m.amount) "
    "ELSE 0 END) AS credit, "
    "SUM(CASE WHEN type_enum = 2 THEN IF(lt.is_reversed, m.amount / 2, m.amount) "
    "ELSE 0 END) AS debit "
    "FROM acc_gl_journal_entry m "
    "LEFT JOIN m_office o ON o.id = m.office_id "
    "LEFT JOIN m_loan l ON l.id = m.entity_id "
    "LEFT JOIN m_loan_transaction lt ON lt.id = m.loan_transaction_id "
    "LEFT JOIN m_client c ON c.id = l.client_id "
    "WHERE 1 "
    "AND IF(:category = 'reversed', m.reversed OR lt.is_reversed, 1) "
    "AND IF(:category = 'unidentified_profit', m.profit, 1) "
    "AND IF(:category = 'unidentified_deposits', m.unidentified_entry, 1) "
    "GROUP BY transaction_id) y "
    "WHERE 1 AND ("
    "y.description LIKE :search "
    "OR y.clientName LIKE :search "
    "OR y.createdOn LIKE :search "
    "OR y.transactionDate LIKE :search "
    "OR CONVERT(y.credit, CHAR) LIKE :search "
    "OR CONVERT(y.debit, CHAR) LIKE :search)) tt"
)


@dataclass(frozen=True)
class Predicate:
    """One conjunct of a WHERE clause and the parameters it binds."""

    sql: str
    params: tuple[tuple[str, Any], ...] = ()


@dataclass(frozen=True)
class JournalEntryQuery:
    """A rendered-on-demand journal entry SELECT.

    Attributes:
        columns: Projection list.
        from_clause: FROM and JOIN clauses.
        predicates: WHERE conjuncts in application order.
        order_by: ORDER BY expression, or None for unordered lookups.
        limit: Page size, or None for unlimited.
        offset: Rows to skip, applied only with a limit.
        calc_found_rows: Prefix the select with SQL_CALC_FOUND_ROWS.
    """

    columns: str
    from_clause: str
    predicates: tuple[Predicate, ...] = ()
    order_by: str | None = None
    limit: int | None = None
    offset: int | None = None
    calc_found_rows: bool = False

    @property
    def parameters(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        for predicate in self.predicates:
            params.update(predicate.params)
        return params

    @property
    def where_sql(self) -> str:
        if not self.predicates:
            return ""
        return " where " + " and ".join(p.sql for p in self.predicates)

    def page_sql(self) -> str:
        sql = "select "
        if self.calc_found_rows:
            sql += "SQL_CALC_FOUND_ROWS "
        sql += f"{self.columns} {self.from_clause}{self.where_sql}"
        if self.order_by:
            sql += f" order by {self.order_by}"
        if self.limit is not None:
            sql += f" limit {int(self.limit)}"
            if self.offset:
                sql += f" offset {int(self.offset)}"
        return sql

    def count_sql(self) -> str:
        return (
            "select count(*) as total_count from ("
            f"select journalEntry.id {self.from_clause}{self.where_sql}"
            ") as filtered_entries"
        )

    def page_statement(self) -> TextClause:
        return text(self.page_sql())

    def count_statement(self) -> TextClause:
        return text(self.count_sql())


class JournalEntryQueryBuilder:
    """Build journal entry queries from filters and association flags."""

    @staticmethod
    def columns(associations: JournalEntryAssociationParameters) -> str:
        columns = _BASE_COLUMNS
        if associations.running_balance_required:
            columns += _RUNNING_BALANCE_COLUMNS
        if associations.transaction_details_required:
            columns += _TRANSACTION_DETAIL_COLUMNS
        return columns

    @staticmethod
    def from_clause(associations: JournalEntryAssociationParameters) -> str:
        joins = _BASE_JOINS
        if associations.transaction_details_required:
            joins += _TRANSACTION_DETAIL_JOINS
        return joins

    def build(
        self,
        entry_filter: JournalEntryFilter,
        associations: JournalEntryAssociationParameters,
        calc_found_rows: bool = False,
    ) -> JournalEntryQuery:
        """Return the paginated list query for a filter.

        Raises:
            PlatformApiDataValidationError: When the ordering is not a plain
                column reference or direction.
        """
        search = entry_filter.search
        order_by = DEFAULT_ORDER_BY
        if search.is_order_by_requested:
            self._validate_ordering(search.order_by, search.sort_order)
            order_by = search.order_by.strip()
            if search.is_sort_order_provided:
                order_by += f" {search.sort_order.strip().upper()}"

        limit = search.limit if search.is_limited else None
        offset = search.offset if limit is not None and search.is_offset else None
        return JournalEntryQuery(
            columns=self.columns(associations),
            from_clause=self.from_clause(associations),
            predicates=tuple(self.predicates(entry_filter)),
            order_by=order_by,
            limit=limit,
            offset=offset,
            calc_found_rows=calc_found_rows,
        )

    def build_by_id(
        self,
        journal_entry_id: int,
        associations: JournalEntryAssociationParameters,
    ) -> JournalEntryQuery:
        return JournalEntryQuery(
            columns=self.columns(associations),
            from_clause=self.from_clause(associations),
            predicates=(
                Predicate(
                    "journalEntry.id = :journal_entry_id",
                    (("journal_entry_id", journal_entry_id),),
                ),
            ),
        )

    @staticmethod
    def predicates(entry_filter: JournalEntryFilter) -> list[Predicate]:
        """Return the WHERE conjuncts for a filter in their fixed order."""
        predicates: list[Predicate] = []
        search = entry_filter.search

        if entry_filter.transaction_id and entry_filter.transaction_id.strip():
            predicates.append(
                Predicate(
                    "journalEntry.transaction_id = :transaction_id",
                    (("transaction_id", entry_filter.transaction_id),),
                )
            )
        if entry_filter.entity_type and entry_filter.only_manual_entries is None:
            predicates.append(
                Predicate(
                    "journalEntry.entity_type_enum = :entity_type",
                    (("entity_type", entry_filter.entity_type),),
                )
            )
        if search.is_office_id_passed:
            predicates.append(
                Predicate(
                    "journalEntry.office_id = :office_id",
                    (("office_id", search.office_id),),
                )
            )
        if entry_filter.gl_account_id:
            predicates.append(
                Predicate(
                    "journalEntry.account_id = :gl_account_id",
                    (("gl_account_id", entry_filter.gl_account_id),),
                )
            )

        from_date = entry_filter.from_date
        to_date = entry_filter.to_date
        if from_date is not None and to_date is not None:
            predicates.append(
                Predicate(
                    "journalEntry.entry_date between :from_date and :to_date",
                    (
                        ("from_date", from_date.strftime(SQL_DATE_FORMAT)),
                        ("to_date", to_date.strftime(SQL_DATE_FORMAT)),
                    ),
                )
            )
        elif from_date is not None:
            predicates.append(
                Predicate(
                    "journalEntry.entry_date >= :from_date",
                    (("from_date", from_date.strftime(SQL_DATE_FORMAT)),),
                )
            )
        elif to_date is not None:
            predicates.append(
                Predicate(
                    "journalEntry.entry_date <= :to_date",
                    (("to_date", to_date.strftime(SQL_DATE_FORMAT)),),
                )
            )

        if entry_filter.only_manual_entries:
            predicates.append(Predicate("journalEntry.manual_entry = 1"))
        if entry_filter.only_unidentified_entries:
            predicates.append(
                Predicate("journalEntry.unidentified_entry = 1 and ltex.id is null")
            )
        return predicates

    @staticmethod
    def _validate_ordering(order_by: str, sort_order: str | None) -> None:
        errors: list[ApiParameterError] = []
        if not _IDENTIFIER.match(order_by.strip()):
            errors.append(
                ApiParameterError(
                    message_code=(
                        f"validation.msg.{JOURNAL_ENTRY_RESOURCE}.orderBy.invalid"
                    ),
                    default_message="The parameter orderBy must be a column name.",
                    parameter_name="orderBy",
                    value=order_by,
                )
            )
        if sort_order and sort_order.strip() and (
            sort_order.strip().upper() not in _SORT_ORDERS
        ):
            errors.append(
                ApiParameterError(
                    message_code=(
                        f"validation.msg.{JOURNAL_ENTRY_RESOURCE}.sortOrder.invalid"
                    ),
                    default_message="The parameter sortOrder must be ASC or DESC.",
                    parameter_name="sortOrder",
                    value=sort_order,
                )
            )
        if errors:
            raise PlatformApiDataValidationError(errors)


__all__ = [
    "DEFAULT_ORDER_BY",
    "JOURNAL_ENTRY_ASSIGNMENTS_SQL",
    "JOURNAL_ENTRIES_COUNT_SQL",
    "Predicate",
    "JournalEntryQuery",
    "JournalEntryQueryBuilder",
]
