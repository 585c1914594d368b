"""Domain services package."""

from .validation import DataValidatorBuilder

__all__ = ["DataValidatorBuilder"]
