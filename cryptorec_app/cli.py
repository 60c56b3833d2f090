"""
Command line front-end for the recommendation service.

Each sub-command maps to one service operation and prints either one report
line per summary or JSON. Errors print their message and exit with status 1,
invalid configuration exits with status 2.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import AssetCode, Summary
from .errors import RecommendationError, SystemFailureError
from .logging.config import configure_logging
from .service import RecommendationService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cryptorec",
        description="Crypto prices summaries ranked by normalized range",
    )
    parser.add_argument("--config-dir", type=Path, default=None,
                        help="Directory containing settings.yaml")
    parser.add_argument("--prices-folder", default=None, help="Override the prices folder")
    parser.add_argument("--db-path", default=None, help="Override the SQLite database path")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of report lines")

    commands = parser.add_subparsers(dest="command", required=True)

    all_cmd = commands.add_parser("all", help="All cryptos, highest normalized range first")
    all_cmd.add_argument("--day", default=None, help="Restrict to a day (dd-MM-yyyy)")

    code_cmd = commands.add_parser("code", help="One crypto")
    code_cmd.add_argument("code")
    code_cmd.add_argument("--day", default=None, help="Restrict to a day (dd-MM-yyyy)")

    day_cmd = commands.add_parser("day", help="Crypto with the highest normalized range on a day")
    day_cmd.add_argument("day", help="dd-MM-yyyy")

    commands.add_parser("codes", help="Supported crypto codes")

    add_cmd = commands.add_parser("add-code", help="Register a crypto code")
    add_cmd.add_argument("code")

    history_all_cmd = commands.add_parser("history-all", help="Merged history of all cryptos")
    history_all_cmd.add_argument("months")

    history_code_cmd = commands.add_parser("history-code", help="Merged history of one crypto")
    history_code_cmd.add_argument("code")
    history_code_cmd.add_argument("months")

    return parser


def run_command(service: RecommendationService, args: argparse.Namespace) -> Any:
    """Dispatch a parsed command to the service."""
    if args.command == "all":
        return service.get_all(args.day)
    if args.command == "code":
        return service.get_by_code(args.code, args.day)
    if args.command == "day":
        return service.get_highest_for_day(args.day)
    if args.command == "codes":
        return service.get_codes()
    if args.command == "add-code":
        return service.add_code(args.code)
    if args.command == "history-all":
        return service.get_history_all(args.months)
    if args.command == "history-code":
        return service.get_history_by_code(args.code, args.months)
    raise ValueError(f"Unknown command: {args.command}")


def render(service: RecommendationService, result: Any, as_json: bool) -> str:
    """Render a command result for printing."""
    items = result if isinstance(result, list) else [result] if result is not None else []

    if as_json:
        payload = [item.to_dict() for item in items]
        return json.dumps(payload if isinstance(result, list) else (payload[0] if payload else None))

    if items and isinstance(items[0], Summary):
        return service.format_summaries(items)
    if items and isinstance(items[0], AssetCode):
        return "\n".join(str(item) for item in items)
    return ""


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides: dict[str, Any] = {}
    if args.prices_folder:
        overrides.setdefault("source", {})["prices_folder"] = args.prices_folder
    if args.db_path:
        overrides.setdefault("storage", {})["db_path"] = args.db_path

    config = ConfigLoader.create(args.config_dir).merge_config(overrides)
    errors = ConfigValidator.validate_config(config)
    if errors:
        for err in errors:
            print(f"Invalid configuration: {err.field}: {err.message} (got: {err.value})", file=sys.stderr)
        return 2

    configure_logging(
        level=config["logging"]["level"],
        format_json=config["logging"]["format_json"],
    )

    try:
        service = RecommendationService(config)
        result = run_command(service, args)
    except (RecommendationError, SystemFailureError) as e:
        print(e.message, file=sys.stderr)
        return 1

    output = render(service, result, args.json)
    if result is None and not args.json:
        # Only a day-restricted code lookup can come back empty
        output = f"There is no {args.code.strip().upper()} price data for {args.day}"
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
