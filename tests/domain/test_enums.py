"""Tests for label-bearing enumerations."""

import pytest

from glledger.domain.enums import (
    EnumOption,
    GLAccountType,
    GLAccountUsage,
    JournalEntryType,
    LoanTransactionType,
    PortfolioAccountType,
    SavingsTransactionType,
    enum_option,
)


def test_ranges_follow_members() -> None:
    """Min/max values should be derived from the declared members."""
    assert (GLAccountType.min_value(), GLAccountType.max_value()) == (1, 5)
    assert (GLAccountUsage.min_value(), GLAccountUsage.max_value()) == (1, 2)


def test_enum_option_resolves_label_metadata() -> None:
    assert enum_option(GLAccountType, 4) == EnumOption(
        id=4,
        code="accountType.income",
        value="INCOME",
    )
    assert enum_option(JournalEntryType, 2).value == "DEBIT"


def test_enum_option_keeps_null_columns_null() -> None:
    assert enum_option(GLAccountType, None) is None


def test_enum_option_rejects_unknown_values_on_closed_enums() -> None:
    with pytest.raises(ValueError):
        enum_option(JournalEntryType, 9)


def test_transaction_types_fall_back_to_invalid() -> None:
    """Unknown transaction type codes should resolve to INVALID."""
    assert LoanTransactionType.from_int(99) is LoanTransactionType.INVALID
    assert LoanTransactionType.from_int(None) is LoanTransactionType.INVALID
    assert SavingsTransactionType.from_int(1) is SavingsTransactionType.DEPOSIT


def test_portfolio_account_type_flags() -> None:
    assert PortfolioAccountType.from_int(1).is_loan_account is True
    assert PortfolioAccountType.from_int(2).is_savings_account is True
    assert PortfolioAccountType.from_int(5) is None
