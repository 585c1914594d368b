"""Row mappers turning journal entry result rows into domain views."""

from datetime import date, datetime

from glledger.domain.enums import (
    GLAccountType,
    JournalEntryType,
    LoanTransactionType,
    PortfolioAccountType,
    PortfolioProductType,
    SavingsTransactionType,
    enum_option,
)
from glledger.domain.models import (
    CodeValueView,
    CurrencyView,
    JournalEntryAssignment,
    JournalEntryAssociationParameters,
    JournalEntryView,
    NoteView,
    PaymentDetailView,
    TransactionDetailView,
    TransactionTypeView,
)
from glledger.utils.decimal_utils import coerce_optional_decimal


class JournalEntryMapper:
    """Map rows selected by ``JournalEntryQueryBuilder`` into views.

    Optional sections are only read from the row when the matching
    association was requested, since their columns are otherwise absent.
    """

    def __init__(
        self,
        associations: JournalEntryAssociationParameters | None = None,
    ) -> None:
        self._associations = associations or JournalEntryAssociationParameters()

    def map_row(self, row) -> JournalEntryView:
        entity_type_id = row.entityType
        entity_type = enum_option(PortfolioProductType, entity_type_id)

        office_running_balance = None
        organization_running_balance = None
        running_balance_computed = None
        if self._associations.running_balance_required:
            office_running_balance = coerce_optional_decimal(row.officeRunningBalance)
            organization_running_balance = coerce_optional_decimal(
                row.organizationRunningBalance
            )
            running_balance_computed = bool(row.runningBalanceComputed)

        transaction_details = None
        if self._associations.transaction_details_required:
            transaction_details = self._map_transaction_details(row, entity_type_id)

        return JournalEntryView(
            id=row.id,
            office_id=row.officeId,
            office_name=row.officeName,
            gl_account_name=row.glAccountName,
            gl_account_id=row.glAccountId,
            gl_code=row.glAccountCode,
            gl_account_type=enum_option(GLAccountType, row.classification),
            transaction_date=_to_date(row.transactionDate),
            entry_type=enum_option(JournalEntryType, row.entryType),
            amount=coerce_optional_decimal(row.amount),
            exchange_rate=coerce_optional_decimal(row.exchangeRate),
            transaction_id=row.transactionId,
            manual_entry=bool(row.manualEntry),
            entity_type=entity_type,
            entity_id=row.entityId,
            created_by_user_id=row.createdByUserId,
            created_date=_to_date(row.createdDate),
            created_by_user_name=row.createdByUserName,
            comments=row.comments,
            reversed=bool(row.reversed),
            reference_number=row.referenceNumber,
            currency=CurrencyView(
                code=row.currencyCode,
                name=row.currencyName,
                decimal_places=row.currencyDigits,
                in_multiples_of=row.inMultiplesOf,
                display_symbol=row.currencyDisplaySymbol,
                name_code=row.currencyNameCode,
            ),
            unidentified_entry=bool(row.unidentifiedEntry),
            is_profit=bool(row.isProfit),
            profit_transaction_id=row.profitTransactionId,
            used_in_loan=bool(row.usedInLoan),
            is_reversal_entry=bool(row.isReversalEntry),
            is_transaction_reversed=bool(row.isTransactionReversed),
            office_running_balance=office_running_balance,
            organization_running_balance=organization_running_balance,
            running_balance_computed=running_balance_computed,
            transaction_details=transaction_details,
        )

    @staticmethod
    def _map_transaction_details(row, entity_type_id: int | None) -> TransactionDetailView:
        payment_details = None
        if row.paymentTypeId is not None:
            payment_details = PaymentDetailView(
                id=row.id,
                payment_type=CodeValueView(id=row.paymentTypeId, name=row.paymentTypeName),
                account_number=row.accountNumber,
                check_number=row.checkNumber,
                routing_code=row.routingCode,
                receipt_number=row.receiptNumber,
                bank_number=row.bankNumber,
            )

        note = None
        if row.noteId is not None:
            note = NoteView(id=row.noteId, note=row.transactionNote)

        # Transaction ids carry a one-letter product prefix, e.g. "L42".
        transaction_number = None
        if entity_type_id is not None and row.transactionId:
            digits = row.transactionId[1:].strip()
            if digits.isdigit():
                transaction_number = int(digits)

        transaction_type = None
        account_type = PortfolioAccountType.from_int(entity_type_id)
        if account_type is not None and account_type.is_loan_account:
            transaction_type = _transaction_type(
                LoanTransactionType.from_int(row.loanTransactionType)
            )
        elif account_type is not None and account_type.is_savings_account:
            transaction_type = _transaction_type(
                SavingsTransactionType.from_int(row.savingsTransactionType)
            )

        return TransactionDetailView(
            transaction_id=transaction_number,
            payment_details=payment_details,
            note=note,
            transaction_type=transaction_type,
        )


def map_assignment_row(row) -> JournalEntryAssignment:
    return JournalEntryAssignment(
        journal_id=row.journal_id,
        loan_id=row.loan_id,
        loan_status=row.enum_value,
        client_name=row.display_name,
        client_file_number=row.external_id,
        loan_account_number=row.account_no,
    )


def _transaction_type(member) -> TransactionTypeView:
    return TransactionTypeView(id=member.value, code=member.code, value=member.label)


def _to_date(value: date | datetime | str | None) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    return value


__all__ = ["JournalEntryMapper", "map_assignment_row"]
