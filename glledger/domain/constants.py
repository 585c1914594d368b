"""Domain constants for GL accounts and journal entries."""

from enum import Enum

GL_ACCOUNT_RESOURCE = "GLAccount"
JOURNAL_ENTRY_RESOURCE = "journalentry"

NAME_MAX_LENGTH = 200
CURRENCY_CODE_MAX_LENGTH = 3
GL_CODE_MAX_LENGTH = 45
DESCRIPTION_MAX_LENGTH = 500

# Bound date parameters are literal yyyy-MM-dd strings.
SQL_DATE_FORMAT = "%Y-%m-%d"

DEFAULT_MAX_PAGE_LIMIT = 200


class GLAccountJsonInputParams(str, Enum):
    """Request parameter names for GL account commands."""

    ID = "id"
    NAME = "name"
    PARENT_ID = "parentId"
    CURRENCY_CODE = "currencyCode"
    GL_CODE = "glCode"
    DISABLED = "disabled"
    MANUAL_ENTRIES_ALLOWED = "manualEntriesAllowed"
    TYPE = "type"
    USAGE = "usage"
    DESCRIPTION = "description"
    TAG_ID = "tagId"
    AFFECTS_LOAN = "affectsLoan"


class JournalEntryCategory(str, Enum):
    """Mutually exclusive categories accepted by the journal entry count."""

    REVERSED = "reversed"
    UNIDENTIFIED_PROFIT = "unidentified_profit"
    UNIDENTIFIED_DEPOSITS = "unidentified_deposits"


__all__ = [
    "GL_ACCOUNT_RESOURCE",
    "JOURNAL_ENTRY_RESOURCE",
    "NAME_MAX_LENGTH",
    "CURRENCY_CODE_MAX_LENGTH",
    "GL_CODE_MAX_LENGTH",
    "DESCRIPTION_MAX_LENGTH",
    "SQL_DATE_FORMAT",
    "DEFAULT_MAX_PAGE_LIMIT",
    "GLAccountJsonInputParams",
    "JournalEntryCategory",
]
