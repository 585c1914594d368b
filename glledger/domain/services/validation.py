"""Fluent validator accumulating parameter errors for a resource."""

from typing import Any

from glledger.domain.errors import ApiParameterError, PlatformApiDataValidationError


class DataValidatorBuilder:
    """Collect ``ApiParameterError`` entries without short-circuiting.

    Every ``reset()`` starts a new parameter chain writing into the same
    error list, so one request can report all of its failures at once::

        errors = []
        validator = DataValidatorBuilder(errors).resource("GLAccount")
        validator.reset().parameter("name").value(name).not_blank()
        validator.reset().parameter("type").value(type_).not_null()
    """

    def __init__(
        self,
        errors: list[ApiParameterError],
        resource: str | None = None,
    ) -> None:
        self._errors = errors
        self._resource = resource
        self._parameter: str | None = None
        self._value: Any = None
        self._ignore_null = False

    @property
    def errors(self) -> list[ApiParameterError]:
        return self._errors

    def resource(self, name: str) -> "DataValidatorBuilder":
        self._resource = name
        return self

    def reset(self) -> "DataValidatorBuilder":
        return DataValidatorBuilder(self._errors, self._resource)

    def parameter(self, name: str) -> "DataValidatorBuilder":
        self._parameter = name
        return self

    def value(self, value: Any) -> "DataValidatorBuilder":
        self._value = value
        return self

    def ignore_if_null(self) -> "DataValidatorBuilder":
        self._ignore_null = True
        return self

    def not_null(self) -> "DataValidatorBuilder":
        if self._value is None and not self._ignore_null:
            self._add(
                "cannot.be.blank",
                f"The parameter {self._parameter} is mandatory.",
            )
        return self

    def not_blank(self) -> "DataValidatorBuilder":
        if self._skip():
            return self
        if self._value is None or not str(self._value).strip():
            self._add(
                "cannot.be.blank",
                f"The parameter {self._parameter} is mandatory.",
            )
        return self

    def not_exceeding_length_of(self, max_length: int) -> "DataValidatorBuilder":
        if self._value is None:
            return self
        if len(str(self._value).strip()) > max_length:
            self._add(
                "exceeds.max.length",
                f"The parameter {self._parameter} exceeds max length of "
                f"{max_length}.",
                max_length,
            )
        return self

    def integer_greater_than_zero(self) -> "DataValidatorBuilder":
        return self._greater_than_zero()

    def long_greater_than_zero(self) -> "DataValidatorBuilder":
        return self._greater_than_zero()

    def in_min_max_range(self, min_value: int, max_value: int) -> "DataValidatorBuilder":
        if self._value is None:
            return self
        number = self._as_int(self._value)
        if number is None or number < min_value or number > max_value:
            self._add(
                "is.not.within.expected.range",
                f"The parameter {self._parameter} must be between "
                f"{min_value} and {max_value}.",
                min_value,
                max_value,
            )
        return self

    def any_of_not_null(self, *values: Any) -> "DataValidatorBuilder":
        if all(value is None for value in values):
            self._errors.append(
                ApiParameterError(
                    message_code=(
                        f"validation.msg.{self._resource}.no.parameters.for.update"
                    ),
                    default_message="No parameters passed for update.",
                    parameter_name="id",
                )
            )
        return self

    def throw_if_errors(self) -> None:
        """Raise one aggregated validation error when anything failed."""
        if self._errors:
            raise PlatformApiDataValidationError(self._errors)

    def _greater_than_zero(self) -> "DataValidatorBuilder":
        if self._value is None:
            return self
        number = self._as_int(self._value)
        if number is None or number < 1:
            self._add(
                "not.greater.than.zero",
                f"The parameter {self._parameter} must be greater than 0.",
                0,
            )
        return self

    def _skip(self) -> bool:
        return self._value is None and self._ignore_null

    def _add(self, rule: str, message: str, *args: Any) -> None:
        self._errors.append(
            ApiParameterError(
                message_code=(
                    f"validation.msg.{self._resource}.{self._parameter}.{rule}"
                ),
                default_message=message,
                parameter_name=self._parameter or "",
                value=self._value,
                args=args,
            )
        )

    @staticmethod
    def _as_int(value: Any) -> int | None:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        try:
            return int(str(value).strip())
        except ValueError:
            return None


__all__ = ["DataValidatorBuilder"]
