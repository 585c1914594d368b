"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from glledger.domain.constants import DEFAULT_MAX_PAGE_LIMIT
from glledger.infrastructure.logging.logger import get_app_logger

FOUND_ROWS_MODES = ("auto", "found_rows", "count")


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for journal entry reads.

    Attributes:
        found_rows_mode: How page totals are computed: ``found_rows`` uses
            SQL_CALC_FOUND_ROWS/FOUND_ROWS(), ``count`` wraps the filtered
            query in COUNT(*), ``auto`` picks by database dialect.
        max_page_limit: Largest page size a caller may request.
    """

    found_rows_mode: str = "auto"
    max_page_limit: int = DEFAULT_MAX_PAGE_LIMIT

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        mode = os.getenv("LEDGER_FOUND_ROWS_MODE", "auto").strip().lower()
        if mode not in FOUND_ROWS_MODES:
            logger.warning(
                f"Unsupported LEDGER_FOUND_ROWS_MODE '{mode}', using auto"
            )
            mode = "auto"
        max_page_limit = cls._parse_limit(
            os.getenv("LEDGER_MAX_PAGE_LIMIT"),
            logger=logger,
        )
        return cls(found_rows_mode=mode, max_page_limit=max_page_limit)

    @staticmethod
    def _parse_limit(raw_value: str | None, logger) -> int:
        """Parse the maximum page size, falling back to the default.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: A positive page size.
        """
        if not raw_value:
            return DEFAULT_MAX_PAGE_LIMIT
        try:
            value = int(raw_value)
        except ValueError:
            value = 0
        if value <= 0:
            logger.warning(
                f"Invalid LEDGER_MAX_PAGE_LIMIT '{raw_value}', "
                f"using {DEFAULT_MAX_PAGE_LIMIT}"
            )
            return DEFAULT_MAX_PAGE_LIMIT
        return value


__all__ = ["LedgerSettings", "FOUND_ROWS_MODES"]
