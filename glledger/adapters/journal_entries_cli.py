"""CLI adapter for journal entry reads.

Sub-commands: ``list`` (filtered, paginated), ``show`` (one entry by id),
``assignments`` (loans an entry is assigned to) and ``count`` (grouped count
by category and search text).
"""

import argparse
from datetime import date

from glledger.domain.errors import PlatformError
from glledger.domain.models import (
    JournalEntryAssociationParameters,
    JournalEntryFilter,
    JournalEntryView,
    SearchParameters,
)
from glledger.infrastructure.container import (
    build_journal_entries_count_use_case,
    build_journal_entry_assignments_use_case,
    build_retrieve_journal_entries_use_case,
    build_retrieve_journal_entry_use_case,
)
from glledger.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _parse_date(value: str) -> date:
    """Parse an ISO date argument.

    Args:
        value: Date string in YYYY-MM-DD format.

    Returns:
        date: Parsed date.

    Raises:
        argparse.ArgumentTypeError: When the value is not an ISO date.
    """
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid date '{value}', expected format YYYY-MM-DD"
        ) from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glledger-journal-entries",
        description="Read journal entries from the ledger database.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List journal entries")
    list_parser.add_argument("--transaction-id")
    list_parser.add_argument("--entity-type", type=int)
    list_parser.add_argument("--office-id", type=int)
    list_parser.add_argument("--gl-account-id", type=int)
    list_parser.add_argument("--from-date", type=_parse_date)
    list_parser.add_argument("--to-date", type=_parse_date)
    list_parser.add_argument("--manual-only", action="store_true")
    list_parser.add_argument("--unidentified-only", action="store_true")
    list_parser.add_argument("--order-by")
    list_parser.add_argument("--sort-order")
    list_parser.add_argument("--limit", type=int)
    list_parser.add_argument("--offset", type=int)
    _add_association_flags(list_parser)

    show_parser = subparsers.add_parser("show", help="Show one journal entry")
    show_parser.add_argument("journal_entry_id", type=int)
    _add_association_flags(show_parser)

    assignments_parser = subparsers.add_parser(
        "assignments",
        help="List loans a journal entry is assigned to",
    )
    assignments_parser.add_argument("journal_entry_id", type=int)

    count_parser = subparsers.add_parser("count", help="Count journal entries")
    count_parser.add_argument(
        "--filter",
        dest="category",
        help="reversed, unidentified_profit or unidentified_deposits",
    )
    count_parser.add_argument("--search")
    return parser


def _add_association_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--running-balance", action="store_true")
    parser.add_argument("--transaction-details", action="store_true")


def _associations(args) -> JournalEntryAssociationParameters:
    return JournalEntryAssociationParameters(
        running_balance_required=args.running_balance,
        transaction_details_required=args.transaction_details,
    )


def _build_filter(args) -> JournalEntryFilter:
    return JournalEntryFilter(
        search=SearchParameters(
            office_id=args.office_id,
            order_by=args.order_by,
            sort_order=args.sort_order,
            limit=args.limit,
            offset=args.offset,
        ),
        transaction_id=args.transaction_id,
        entity_type=args.entity_type,
        gl_account_id=args.gl_account_id,
        from_date=args.from_date,
        to_date=args.to_date,
        only_manual_entries=True if args.manual_only else None,
        only_unidentified_entries=True if args.unidentified_only else None,
    )


def _format_entry(entry: JournalEntryView) -> str:
    entry_type = entry.entry_type.value if entry.entry_type else "-"
    line = (
        f"{entry.id}\t{entry.transaction_date}\t{entry.transaction_id}\t"
        f"{entry.gl_code}\t{entry_type}\t{entry.amount} {entry.currency.code}"
    )
    if entry.office_running_balance is not None:
        line += f"\toffice_balance={entry.office_running_balance}"
    return line


def main(argv: list[str] | None = None) -> int:
    """Run the requested journal entry read and print the result.

    Returns:
        int: 0 on success, 1 when the request was rejected.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    get_usage_logger().info(f"journal-entries {args.command} {vars(args)}")

    try:
        if args.command == "list":
            page = build_retrieve_journal_entries_use_case().execute(
                _build_filter(args),
                _associations(args),
            )
            for entry in page.page_items:
                print(_format_entry(entry))
            print(
                f"Showing {len(page.page_items)} of "
                f"{page.total_filtered_records} journal entries."
            )
        elif args.command == "show":
            entry = build_retrieve_journal_entry_use_case().execute(
                args.journal_entry_id,
                _associations(args),
            )
            print(_format_entry(entry))
        elif args.command == "assignments":
            assignments = build_journal_entry_assignments_use_case().execute(
                args.journal_entry_id
            )
            for assignment in assignments:
                print(
                    f"loan={assignment.loan_id}\t"
                    f"account={assignment.loan_account_number}\t"
                    f"client={assignment.client_name}\t"
                    f"status={assignment.loan_status}"
                )
        else:
            count = build_journal_entries_count_use_case().execute(
                args.category,
                args.search,
            )
            print(count)
    except PlatformError as exc:
        logger.error(f"{exc.global_code}: {exc.default_message}")
        print(exc.default_message)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
