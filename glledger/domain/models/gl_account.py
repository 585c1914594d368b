"""Immutable command for creating or updating a general ledger account."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from glledger.domain.constants import (
    CURRENCY_CODE_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    GL_ACCOUNT_RESOURCE,
    GL_CODE_MAX_LENGTH,
    NAME_MAX_LENGTH,
    GLAccountJsonInputParams as Params,
)
from glledger.domain.enums import GLAccountType, GLAccountUsage
from glledger.domain.errors import ApiParameterError
from glledger.domain.services.validation import DataValidatorBuilder


@dataclass(frozen=True)
class GLAccountCommand:
    """Create/update request for a ledger account.

    Attributes:
        id: Identifier of the account being updated, if any.
        name: Account name.
        parent_id: Optional parent (header) account id.
        currency_code: ISO currency code.
        gl_code: Chart-of-accounts code.
        disabled: Whether the account is disabled.
        manual_entries_allowed: Whether manual journal entries may post here.
        type: ``GLAccountType`` value.
        usage: ``GLAccountUsage`` value.
        description: Optional free text.
        tag_id: Optional code-value tag id.
        affects_loan: Whether postings on the account affect loans.
    """

    id: int | None = None
    name: str | None = None
    parent_id: int | None = None
    currency_code: str | None = None
    gl_code: str | None = None
    disabled: bool | None = None
    manual_entries_allowed: bool | None = None
    type: int | None = None
    usage: int | None = None
    description: str | None = None
    tag_id: int | None = None
    affects_loan: bool | None = None

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, Any],
        account_id: int | None = None,
    ) -> "GLAccountCommand":
        """Build a command from a JSON-like mapping keyed by request names."""
        return cls(
            id=account_id if account_id is not None else payload.get(Params.ID.value),
            name=payload.get(Params.NAME.value),
            parent_id=_int_or_raw(payload.get(Params.PARENT_ID.value)),
            currency_code=payload.get(Params.CURRENCY_CODE.value),
            gl_code=payload.get(Params.GL_CODE.value),
            disabled=payload.get(Params.DISABLED.value),
            manual_entries_allowed=payload.get(Params.MANUAL_ENTRIES_ALLOWED.value),
            type=_int_or_raw(payload.get(Params.TYPE.value)),
            usage=_int_or_raw(payload.get(Params.USAGE.value)),
            description=payload.get(Params.DESCRIPTION.value),
            tag_id=_int_or_raw(payload.get(Params.TAG_ID.value)),
            affects_loan=payload.get(Params.AFFECTS_LOAN.value),
        )

    def validate_for_create(self) -> None:
        """Validate a creation request.

        Raises:
            PlatformApiDataValidationError: Listing every failing parameter.
        """
        errors: list[ApiParameterError] = []
        validator = DataValidatorBuilder(errors).resource(GL_ACCOUNT_RESOURCE)

        validator.reset().parameter(Params.NAME.value).value(
            self.name
        ).not_blank().not_exceeding_length_of(NAME_MAX_LENGTH)
        validator.reset().parameter(Params.CURRENCY_CODE.value).value(
            self.currency_code
        ).not_blank().not_exceeding_length_of(CURRENCY_CODE_MAX_LENGTH)
        validator.reset().parameter(Params.GL_CODE.value).value(
            self.gl_code
        ).not_blank().not_exceeding_length_of(GL_CODE_MAX_LENGTH)
        validator.reset().parameter(Params.PARENT_ID.value).value(
            self.parent_id
        ).ignore_if_null().integer_greater_than_zero()
        validator.reset().parameter(Params.TYPE.value).value(
            self.type
        ).not_null().in_min_max_range(
            GLAccountType.min_value(), GLAccountType.max_value()
        )
        validator.reset().parameter(Params.USAGE.value).value(
            self.usage
        ).in_min_max_range(GLAccountUsage.min_value(), GLAccountUsage.max_value())
        validator.reset().parameter(Params.DESCRIPTION.value).value(
            self.description
        ).ignore_if_null().not_exceeding_length_of(DESCRIPTION_MAX_LENGTH)
        validator.reset().parameter(Params.MANUAL_ENTRIES_ALLOWED.value).value(
            self.manual_entries_allowed
        ).not_blank()
        validator.reset().parameter(Params.TAG_ID.value).value(
            self.tag_id
        ).ignore_if_null().long_greater_than_zero()
        validator.reset().parameter(Params.AFFECTS_LOAN.value).value(
            self.affects_loan
        ).not_blank()

        validator.throw_if_errors()

    def validate_for_update(self) -> None:
        """Validate an update request where every field is optional.

        Raises:
            PlatformApiDataValidationError: Listing every failing parameter,
                including the no-op update rule.
        """
        errors: list[ApiParameterError] = []
        validator = DataValidatorBuilder(errors).resource(GL_ACCOUNT_RESOURCE)

        validator.reset().parameter(Params.NAME.value).value(
            self.name
        ).ignore_if_null().not_blank().not_exceeding_length_of(NAME_MAX_LENGTH)
        validator.reset().parameter(Params.CURRENCY_CODE.value).value(
            self.currency_code
        ).ignore_if_null().not_blank().not_exceeding_length_of(
            CURRENCY_CODE_MAX_LENGTH
        )
        validator.reset().parameter(Params.GL_CODE.value).value(
            self.gl_code
        ).ignore_if_null().not_blank().not_exceeding_length_of(GL_CODE_MAX_LENGTH)
        validator.reset().parameter(Params.PARENT_ID.value).value(
            self.parent_id
        ).ignore_if_null().integer_greater_than_zero()
        validator.reset().parameter(Params.TYPE.value).value(
            self.type
        ).ignore_if_null().in_min_max_range(
            GLAccountType.min_value(), GLAccountType.max_value()
        )
        validator.reset().parameter(Params.USAGE.value).value(
            self.usage
        ).ignore_if_null().in_min_max_range(
            GLAccountUsage.min_value(), GLAccountUsage.max_value()
        )
        validator.reset().parameter(Params.DESCRIPTION.value).value(
            self.description
        ).ignore_if_null().not_blank().not_exceeding_length_of(
            DESCRIPTION_MAX_LENGTH
        )
        validator.reset().parameter(Params.TAG_ID.value).value(
            self.tag_id
        ).ignore_if_null().long_greater_than_zero()
        validator.reset().any_of_not_null(
            self.name,
            self.currency_code,
            self.gl_code,
            self.parent_id,
            self.type,
            self.description,
            self.disabled,
            self.affects_loan,
        )

        validator.throw_if_errors()

    def is_header_account(self) -> bool:
        return _int_or_raw(self.usage) == GLAccountUsage.HEADER.value


def _int_or_raw(value: Any) -> Any:
    """Return numeric strings as ints; anything else is left for the validator."""
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    return value


__all__ = ["GLAccountCommand"]
