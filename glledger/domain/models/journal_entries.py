"""Domain models for journal entry reads."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Generic, TypeVar

from glledger.domain.enums import EnumOption

T = TypeVar("T")


@dataclass(frozen=True)
class JournalEntryAssociationParameters:
    """Optional sections to load alongside each journal entry."""

    running_balance_required: bool = False
    transaction_details_required: bool = False


@dataclass(frozen=True)
class SearchParameters:
    """Office scoping, ordering and pagination for list reads.

    Attributes:
        office_id: Optional office filter.
        order_by: Optional SQL column to order by.
        sort_order: Optional ``ASC``/``DESC`` direction.
        limit: Optional page size; None or <= 0 means unlimited.
        offset: Optional number of rows to skip.
    """

    office_id: int | None = None
    order_by: str | None = None
    sort_order: str | None = None
    limit: int | None = None
    offset: int | None = None

    @property
    def is_office_id_passed(self) -> bool:
        return self.office_id is not None and self.office_id != 0

    @property
    def is_order_by_requested(self) -> bool:
        return bool(self.order_by and self.order_by.strip())

    @property
    def is_sort_order_provided(self) -> bool:
        return bool(self.sort_order and self.sort_order.strip())

    @property
    def is_limited(self) -> bool:
        return self.limit is not None and self.limit > 0

    @property
    def is_offset(self) -> bool:
        return self.offset is not None and self.offset > 0


@dataclass(frozen=True)
class JournalEntryFilter:
    """Filters applied to a journal entry list read."""

    search: SearchParameters = field(default_factory=SearchParameters)
    transaction_id: str | None = None
    entity_type: int | None = None
    gl_account_id: int | None = None
    from_date: date | None = None
    to_date: date | None = None
    only_manual_entries: bool | None = None
    only_unidentified_entries: bool | None = None


@dataclass(frozen=True)
class CurrencyView:
    code: str
    name: str | None
    decimal_places: int | None
    in_multiples_of: int | None
    display_symbol: str | None
    name_code: str | None


@dataclass(frozen=True)
class CodeValueView:
    id: int
    name: str | None


@dataclass(frozen=True)
class PaymentDetailView:
    id: int
    payment_type: CodeValueView
    account_number: str | None
    check_number: str | None
    routing_code: str | None
    receipt_number: str | None
    bank_number: str | None


@dataclass(frozen=True)
class NoteView:
    id: int
    note: str | None


@dataclass(frozen=True)
class TransactionTypeView:
    id: int
    code: str
    value: str


@dataclass(frozen=True)
class TransactionDetailView:
    """Loan or savings transaction detail linked to a journal entry."""

    transaction_id: int | None
    payment_details: PaymentDetailView | None
    note: NoteView | None
    transaction_type: TransactionTypeView | None


@dataclass(frozen=True)
class JournalEntryView:
    """Single debit or credit line with its reference data."""

    id: int
    office_id: int | None
    office_name: str | None
    gl_account_name: str | None
    gl_account_id: int | None
    gl_code: str | None
    gl_account_type: EnumOption | None
    transaction_date: date | None
    entry_type: EnumOption | None
    amount: Decimal | None
    exchange_rate: Decimal | None
    transaction_id: str | None
    manual_entry: bool
    entity_type: EnumOption | None
    entity_id: int | None
    created_by_user_id: int | None
    created_date: date | None
    created_by_user_name: str | None
    comments: str | None
    reversed: bool
    reference_number: str | None
    currency: CurrencyView
    unidentified_entry: bool
    is_profit: bool
    profit_transaction_id: str | None
    used_in_loan: bool
    is_reversal_entry: bool
    is_transaction_reversed: bool
    office_running_balance: Decimal | None = None
    organization_running_balance: Decimal | None = None
    running_balance_computed: bool | None = None
    transaction_details: TransactionDetailView | None = None


@dataclass(frozen=True)
class JournalEntryAssignment:
    """Loan and client a journal entry has been assigned to."""

    journal_id: int
    loan_id: int
    loan_status: str | None
    client_name: str | None
    client_file_number: str | None
    loan_account_number: str | None


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results and the total number of matching rows."""

    page_items: list[T]
    total_filtered_records: int


__all__ = [
    "JournalEntryAssociationParameters",
    "SearchParameters",
    "JournalEntryFilter",
    "CurrencyView",
    "CodeValueView",
    "PaymentDetailView",
    "NoteView",
    "TransactionTypeView",
    "TransactionDetailView",
    "JournalEntryView",
    "JournalEntryAssignment",
    "Page",
]
