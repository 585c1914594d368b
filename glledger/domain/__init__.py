"""Domain package for business rules and core models."""

from .constants import GLAccountJsonInputParams, JournalEntryCategory
from .enums import (
    EnumOption,
    GLAccountType,
    GLAccountUsage,
    JournalEntryType,
    LoanTransactionType,
    PortfolioAccountType,
    PortfolioProductType,
    SavingsTransactionType,
)
from .errors import (
    ApiParameterError,
    JournalEntryNotFoundError,
    PlatformApiDataValidationError,
    PlatformError,
    PlatformResourceNotFoundError,
)
from .models import (
    GLAccountCommand,
    JournalEntryAssignment,
    JournalEntryAssociationParameters,
    JournalEntryFilter,
    JournalEntryView,
    Page,
    SearchParameters,
)
from .services import DataValidatorBuilder

__all__ = [
    "GLAccountJsonInputParams",
    "JournalEntryCategory",
    "EnumOption",
    "GLAccountType",
    "GLAccountUsage",
    "JournalEntryType",
    "LoanTransactionType",
    "PortfolioAccountType",
    "PortfolioProductType",
    "SavingsTransactionType",
    "ApiParameterError",
    "JournalEntryNotFoundError",
    "PlatformApiDataValidationError",
    "PlatformError",
    "PlatformResourceNotFoundError",
    "GLAccountCommand",
    "JournalEntryAssignment",
    "JournalEntryAssociationParameters",
    "JournalEntryFilter",
    "JournalEntryView",
    "Page",
    "SearchParameters",
    "DataValidatorBuilder",
]
