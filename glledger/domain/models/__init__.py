"""Domain models package."""

from .gl_account import GLAccountCommand
from .journal_entries import (
    CodeValueView,
    CurrencyView,
    JournalEntryAssignment,
    JournalEntryAssociationParameters,
    JournalEntryFilter,
    JournalEntryView,
    NoteView,
    Page,
    PaymentDetailView,
    SearchParameters,
    TransactionDetailView,
    TransactionTypeView,
)

__all__ = [
    "GLAccountCommand",
    "CodeValueView",
    "CurrencyView",
    "JournalEntryAssignment",
    "JournalEntryAssociationParameters",
    "JournalEntryFilter",
    "JournalEntryView",
    "NoteView",
    "Page",
    "PaymentDetailView",
    "SearchParameters",
    "TransactionDetailView",
    "TransactionTypeView",
]
