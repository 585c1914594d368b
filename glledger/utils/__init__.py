"""Shared utility helpers."""

from .decimal_utils import coerce_decimal, coerce_optional_decimal
from .utils import get_project_root

__all__ = ["coerce_decimal", "coerce_optional_decimal", "get_project_root"]
