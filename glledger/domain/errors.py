"""Error types raised by ledger commands and read services."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ApiParameterError:
    """A single failing parameter inside an aggregated validation error.

    Attributes:
        message_code: Globalisation code, e.g.
            ``validation.msg.GLAccount.name.cannot.be.blank``.
        default_message: Human readable message.
        parameter_name: JSON name of the failing parameter.
        value: Offending value, when one was supplied.
        args: Extra rule arguments (bounds, lengths).
    """

    message_code: str
    default_message: str
    parameter_name: str
    value: Any = None
    args: tuple = field(default_factory=tuple)


class PlatformError(Exception):
    """Base class for errors surfaced to callers of this module."""

    def __init__(self, global_code: str, default_message: str) -> None:
        super().__init__(default_message)
        self.global_code = global_code
        self.default_message = default_message


class PlatformApiDataValidationError(PlatformError):
    """Raised once with every field-level failure of a request."""

    def __init__(
        self,
        errors: list[ApiParameterError],
        global_code: str = "validation.msg.validation.errors.exist",
        default_message: str = "Validation errors exist.",
    ) -> None:
        super().__init__(global_code, default_message)
        self.errors = list(errors)

    @property
    def parameter_names(self) -> list[str]:
        return [error.parameter_name for error in self.errors]


class PlatformResourceNotFoundError(PlatformError):
    """Raised when a lookup by identifier matches nothing."""

    def __init__(
        self,
        global_code: str,
        default_message: str,
        resource_id: Any,
    ) -> None:
        super().__init__(global_code, default_message)
        self.resource_id = resource_id


class JournalEntryNotFoundError(PlatformResourceNotFoundError):
    def __init__(self, journal_entry_id: int) -> None:
        super().__init__(
            "error.msg.journalentry.id.invalid",
            f"Journal entry with identifier {journal_entry_id} does not exist",
            journal_entry_id,
        )


__all__ = [
    "ApiParameterError",
    "PlatformError",
    "PlatformApiDataValidationError",
    "PlatformResourceNotFoundError",
    "JournalEntryNotFoundError",
]
