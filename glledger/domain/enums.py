"""Label-bearing enumerations used by GL accounts and journal entries.

Every member carries its stored integer value, a message code and a display
label. Range checks use the smallest and largest member values, so adding a
member widens the accepted range without touching the validators.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class EnumOption:
    """Serializable enum descriptor returned in read views."""

    id: int
    code: str
    value: str


class CodedEnum(Enum):
    """Base enum whose members are ``(value, code, label)`` triples."""

    def __new__(cls, value: int, code: str, label: str):
        member = object.__new__(cls)
        member._value_ = value
        member.code = code
        member.label = label
        return member

    @classmethod
    def from_int(cls, value: int | None):
        """Return the member for a stored value, or None when unknown."""
        if value is None:
            return None
        try:
            return cls(int(value))
        except ValueError:
            return None

    @classmethod
    def min_value(cls) -> int:
        return min(member.value for member in cls)

    @classmethod
    def max_value(cls) -> int:
        return max(member.value for member in cls)

    def to_option(self) -> EnumOption:
        return EnumOption(id=self.value, code=self.code, value=self.label)


class GLAccountType(CodedEnum):
    ASSET = (1, "accountType.asset", "ASSET")
    LIABILITY = (2, "accountType.liability", "LIABILITY")
    EQUITY = (3, "accountType.equity", "EQUITY")
    INCOME = (4, "accountType.income", "INCOME")
    EXPENSE = (5, "accountType.expense", "EXPENSE")


class GLAccountUsage(CodedEnum):
    DETAIL = (1, "accountUsage.detail", "DETAIL")
    HEADER = (2, "accountUsage.header", "HEADER")


class JournalEntryType(CodedEnum):
    CREDIT = (1, "journalEntryType.credit", "CREDIT")
    DEBIT = (2, "journalEntryType.debit", "DEBIT")


class PortfolioProductType(CodedEnum):
    LOAN = (1, "portfolioProductType.loan", "LOAN")
    SAVING = (2, "portfolioProductType.saving", "SAVING")
    PROVISIONING = (3, "portfolioProductType.provisioning", "PROVISIONING")
    SHARES = (4, "portfolioProductType.shares", "SHARES")
    CLIENT = (5, "portfolioProductType.client", "CLIENT")


class PortfolioAccountType(CodedEnum):
    LOAN = (1, "accountType.loan", "Loan")
    SAVINGS = (2, "accountType.savings", "Savings")

    @property
    def is_loan_account(self) -> bool:
        return self is PortfolioAccountType.LOAN

    @property
    def is_savings_account(self) -> bool:
        return self is PortfolioAccountType.SAVINGS


class LoanTransactionType(CodedEnum):
    INVALID = (0, "loanTransactionType.invalid", "Invalid")
    DISBURSEMENT = (1, "loanTransactionType.disbursement", "Disbursement")
    REPAYMENT = (2, "loanTransactionType.repayment", "Repayment")
    CONTRA = (3, "loanTransactionType.contra", "Reversal")
    WAIVE_INTEREST = (4, "loanTransactionType.waiver", "Waive interest")
    REPAYMENT_AT_DISBURSEMENT = (
        5,
        "loanTransactionType.repaymentAtDisbursement",
        "Repayment (at time of disbursement)",
    )
    WRITEOFF = (6, "loanTransactionType.writeOff", "Write-Off")
    MARKED_FOR_RESCHEDULING = (
        7,
        "loanTransactionType.marked.for.rescheduling",
        "Close (as written-off)",
    )
    RECOVERY_REPAYMENT = (
        8,
        "loanTransactionType.recoveryRepayment",
        "Recovery Repayment",
    )
    WAIVE_CHARGES = (9, "loanTransactionType.waiveCharges", "Waive loan charges")
    ACCRUAL = (10, "loanTransactionType.accrual", "Accrual")
    INITIATE_TRANSFER = (
        12,
        "loanTransactionType.initiateTransfer",
        "Initiate Transfer",
    )
    APPROVE_TRANSFER = (
        13,
        "loanTransactionType.approveTransfer",
        "Transfer Approved",
    )
    WITHDRAW_TRANSFER = (
        14,
        "loanTransactionType.withdrawTransfer",
        "Withdraw Transfer",
    )
    REJECT_TRANSFER = (15, "loanTransactionType.rejectTransfer", "Transfer Rejected")
    CHARGE_PAYMENT = (16, "loanTransactionType.chargePayment", "Charge Payment")
    REFUND = (17, "loanTransactionType.refund", "Refund")
    REFUND_FOR_ACTIVE_LOAN = (
        18,
        "loanTransactionType.refund",
        "Refund for active loan",
    )
    INCOME_POSTING = (19, "loanTransactionType.incomePosting", "Income Posting")

    @classmethod
    def from_int(cls, value: int | None):
        return super().from_int(value) or cls.INVALID


class SavingsTransactionType(CodedEnum):
    INVALID = (0, "savingsAccountTransactionType.invalid", "Invalid")
    DEPOSIT = (1, "savingsAccountTransactionType.deposit", "Deposit")
    WITHDRAWAL = (2, "savingsAccountTransactionType.withdrawal", "Withdrawal")
    INTEREST_POSTING = (
        3,
        "savingsAccountTransactionType.interestPosting",
        "Interest Posting",
    )
    WITHDRAWAL_FEE = (
        4,
        "savingsAccountTransactionType.withdrawalFee",
        "Withdrawal Fee",
    )
    ANNUAL_FEE = (5, "savingsAccountTransactionType.annualFee", "Annual Fee")
    WAIVE_CHARGES = (
        6,
        "savingsAccountTransactionType.waiveCharge",
        "Waive Charge",
    )
    PAY_CHARGE = (7, "savingsAccountTransactionType.payCharge", "Pay Charge")
    DIVIDEND_PAYOUT = (
        8,
        "savingsAccountTransactionType.dividendPayout",
        "Dividend Payout",
    )
    INITIATE_TRANSFER = (
        12,
        "savingsAccountTransactionType.initiateTransfer",
        "Initiate Transfer",
    )
    APPROVE_TRANSFER = (
        13,
        "savingsAccountTransactionType.approveTransfer",
        "Approve Transfer",
    )
    WITHDRAW_TRANSFER = (
        14,
        "savingsAccountTransactionType.withdrawTransfer",
        "Withdraw Transfer",
    )
    REJECT_TRANSFER = (
        15,
        "savingsAccountTransactionType.rejectTransfer",
        "Reject Transfer",
    )
    WRITTEN_OFF = (16, "savingsAccountTransactionType.writtenoff", "Written-off")
    OVERDRAFT_INTEREST = (
        17,
        "savingsAccountTransactionType.overdraftInterest",
        "Overdraft Interest",
    )
    WITHHOLD_TAX = (18, "savingsAccountTransactionType.withholdTax", "Withhold Tax")

    @classmethod
    def from_int(cls, value: int | None):
        return super().from_int(value) or cls.INVALID


def enum_option(enum_cls: type[CodedEnum], value: int | None) -> EnumOption | None:
    """Resolve a stored integer into an ``EnumOption`` via its lookup table.

    Returns None for NULL columns. Unknown values on closed enums raise
    ValueError; transaction type enums resolve them to ``INVALID``.
    """
    if value is None:
        return None
    member = enum_cls.from_int(value)
    if member is None:
        raise ValueError(f"Unknown {enum_cls.__name__} value: {value}")
    return member.to_option()


__all__ = [
    "EnumOption",
    "CodedEnum",
    "GLAccountType",
    "GLAccountUsage",
    "JournalEntryType",
    "PortfolioProductType",
    "PortfolioAccountType",
    "LoanTransactionType",
    "SavingsTransactionType",
    "enum_option",
]
