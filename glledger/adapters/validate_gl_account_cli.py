"""CLI adapter validating a GL account create/update payload.

The payload is a JSON object keyed by request parameter names
(``name``, ``glCode``, ``currencyCode``, ...).
"""

import argparse
import json
from pathlib import Path

from glledger.domain.errors import PlatformApiDataValidationError
from glledger.domain.models import GLAccountCommand
from glledger.infrastructure.logging.logger import get_app_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glledger-validate-account",
        description="Validate a GL account request payload.",
    )
    parser.add_argument("payload", type=Path, help="Path to a JSON payload")
    parser.add_argument(
        "--update",
        action="store_true",
        help="Validate as an update (every field optional)",
    )
    parser.add_argument("--account-id", type=int, default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Validate the payload and print every failing parameter.

    Returns:
        int: 0 when the payload is valid, 1 otherwise.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    try:
        payload = json.loads(args.payload.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning(f"GL account payload {args.payload} unreadable: {exc}")
        print(f"Payload could not be read: {exc}")
        return 1
    if not isinstance(payload, dict):
        logger.warning(f"GL account payload {args.payload} is not a JSON object")
        print("Payload must be a JSON object.")
        return 1
    command = GLAccountCommand.from_payload(payload, account_id=args.account_id)

    try:
        if args.update:
            command.validate_for_update()
        else:
            command.validate_for_create()
    except PlatformApiDataValidationError as exc:
        logger.warning(
            f"GL account payload {args.payload} rejected with "
            f"{len(exc.errors)} error(s)"
        )
        print(exc.default_message)
        for error in exc.errors:
            print(f"  {error.parameter_name}: {error.default_message}")
        return 1

    kind = "header" if command.is_header_account() else "detail"
    print(f"Payload is valid ({kind} account).")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
