"""CLI entrypoint for remitwatch."""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from remitwatch.api.summary_api import get_summary
from remitwatch.config.loader import get_transactions_path, load_config
from remitwatch.ingestion.json_loader import RecordLoadError
from remitwatch.output.summary import render_json, render_markdown
from remitwatch.query.dedupe import first_seen_by_transaction_id
from remitwatch.query.engine import TransactionQueryEngine
from remitwatch.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _load_engine(args: argparse.Namespace, config: Dict[str, Any]) -> TransactionQueryEngine:
    data_path = Path(args.data) if getattr(args, "data", None) else get_transactions_path(config)
    return TransactionQueryEngine.from_path(data_path)


def cmd_summary(args: argparse.Namespace, config: Dict[str, Any]) -> None:
    """Print the full transaction summary."""
    engine = _load_engine(args, config)
    report_config = config.get("report", {})
    senders = args.sender or report_config.get("senders", [])
    clients = args.client or report_config.get("clients", [])
    output_format = args.format or report_config.get("format", "md")

    source = str(args.data) if args.data else str(get_transactions_path(config))
    summary = get_summary(engine, senders=senders, clients=clients, source=source)

    if output_format == "json":
        print(render_json(summary))
    else:
        print(render_markdown(summary))


def cmd_issues(args: argparse.Namespace, config: Dict[str, Any]) -> None:
    """Print compliance issue lookups."""
    engine = _load_engine(args, config)

    unsolved = sorted(engine.unsolved_issue_ids())
    print(f"Unsolved issue IDs: {', '.join(str(i) for i in unsolved) if unsolved else 'None'}")

    messages = engine.solved_issue_messages()
    print(f"Solved issue messages ({len(messages)}):")
    for message in messages:
        print(f"  - {message if message is not None else '(no message)'}")

    if args.client:
        status = "yes" if engine.has_open_compliance_issue(args.client) else "no"
        print(f"Open compliance issue for {args.client}: {status}")


def cmd_top(args: argparse.Namespace, config: Dict[str, Any]) -> None:
    """Print the largest transactions and the top sender."""
    engine = _load_engine(args, config)

    print(f"{'Rank':<6} {'Amount':>12} {'Transaction':<14} {'Sender':<25} {'Beneficiary':<25}")
    print("-" * 86)
    for rank, record in enumerate(engine.top3_by_amount(), start=1):
        print(
            f"{rank:<6} {str(record.amount):>12} {record.transaction_id:<14} "
            f"{record.sender_full_name:<25} {record.beneficiary_full_name:<25}"
        )

    top_sender = engine.top_sender()
    print(f"Top sender: {top_sender if top_sender else 'None'}")


def cmd_validate(args: argparse.Namespace, config: Dict[str, Any]) -> None:
    """Load the transactions document and report what was found."""
    engine = _load_engine(args, config)
    distinct = len(first_seen_by_transaction_id(engine.records))
    print(f"OK: {len(engine)} records, {distinct} distinct transactions")


def _add_data_argument(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--data",
        type=str,
        help="Path to transactions JSON (default: data.transactions_path from config)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="remitwatch",
        description="Read-only analytics over remittance transaction records",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to config YAML (default: remitwatch.config.yaml if present)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # summary command
    summary_parser = subparsers.add_parser("summary", help="Print the full transaction summary")
    _add_data_argument(summary_parser)
    summary_parser.add_argument(
        "--format",
        type=str,
        choices=["md", "json"],
        help="Output format: md or json (default: report.format from config)",
    )
    summary_parser.add_argument(
        "--sender",
        action="append",
        help="Report total sent by this client (repeatable)",
    )
    summary_parser.add_argument(
        "--client",
        action="append",
        help="Report open compliance issues for this client (repeatable)",
    )
    summary_parser.set_defaults(func=cmd_summary)

    # issues command
    issues_parser = subparsers.add_parser("issues", help="Show compliance issue lookups")
    _add_data_argument(issues_parser)
    issues_parser.add_argument(
        "--client",
        type=str,
        help="Also check whether this client has an open compliance issue",
    )
    issues_parser.set_defaults(func=cmd_issues)

    # top command
    top_parser = subparsers.add_parser("top", help="Show the three largest transactions and the top sender")
    _add_data_argument(top_parser)
    top_parser.set_defaults(func=cmd_top)

    # validate command
    validate_parser = subparsers.add_parser("validate", help="Load and validate a transactions document")
    _add_data_argument(validate_parser)
    validate_parser.set_defaults(func=cmd_validate)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    config = load_config(Path(args.config) if args.config else None)
    configure_logging(config.get("logging", {}).get("level", "INFO"))

    try:
        args.func(args, config)
    except RecordLoadError as e:
        logger.error(f"Could not load transactions: {e}")
        for issue in e.errors:
            logger.error(f"  - {issue}")
        sys.exit(2)
    except Exception as e:
        logger.error(f"Error running command '{args.command}': {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
