"""Command line interface for describing battle actions.

Usage:
    battleargs describe PhysicalAttackElementAction 500 2 1 100 -o target_range=SINGLE
    battleargs describe HealHpAction 2 1 0 -o counter_enable=1 --show-args
    battleargs coverage data/gl/battleArgs.json
"""

from __future__ import annotations

import argparse
import sys
from typing import Dict, Optional, Sequence

from .args import Number
from .battle_data import BattleData, default_battle_data, load_battle_data
from .describe import describe
from .exceptions import BattleArgsError
from .logging_config import get_logger, setup_logging
from .registry import DEFAULT_REGISTRY
from .tables import load_arg_tables

logger = get_logger(__name__)

EXIT_UNKNOWN_ACTION = 2
EXIT_BAD_DATA = 3


def parse_number(text: str) -> Number:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None


def parse_option(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="battleargs",
        description="Decode battle action argument vectors into effect descriptions.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument("--log-json", action="store_true", help="Emit log lines as JSON")

    subparsers = parser.add_subparsers(dest="command", required=True)

    describe_parser = subparsers.add_parser("describe", help="Describe one action instance")
    describe_parser.add_argument("action", help="Action type name, e.g. PhysicalAttackMultiAction")
    describe_parser.add_argument("args", nargs="*", type=parse_number, help="Raw argument vector")
    describe_parser.add_argument(
        "-o",
        "--option",
        action="append",
        type=parse_option,
        default=[],
        metavar="KEY=VALUE",
        help="Contextual option (repeatable), e.g. target_range=1",
    )
    describe_parser.add_argument("--data", default=None, help="Battle data YAML file (default: bundled)")
    describe_parser.add_argument("--show-args", action="store_true", help="Also print the decoded arguments")

    coverage_parser = subparsers.add_parser(
        "coverage", help="List action types in a locale table that have no schema"
    )
    coverage_parser.add_argument("table", help="Path to a battleArgs.json table")

    return parser


def _load_data(path: Optional[str]) -> BattleData:
    if path is None:
        return default_battle_data()
    return load_battle_data(path)


def run_describe(args: argparse.Namespace) -> int:
    battle_data = _load_data(args.data)
    options: Dict[str, str] = dict(args.option)

    result = describe(args.action, args.args, options, battle_data=battle_data)
    if result is None:
        print(f"No schema registered for action type: {args.action}", file=sys.stderr)
        return EXIT_UNKNOWN_ACTION

    print(result.text)
    if args.show_args:
        for name, value in result.args.populated().items():
            marker = " (pending)" if name in result.schema.pending else ""
            print(f"  {name} = {value}{marker}")
        for position, value in sorted(result.args.unknown.items()):
            print(f"  [{position}] = {value} (unknown)")
    return 0


def run_coverage(args: argparse.Namespace) -> int:
    tables = load_arg_tables(args.table)
    missing = DEFAULT_REGISTRY.undocumented(tables)
    for action in missing:
        print(action)
    logger.info("%d of %d action types have no schema", len(missing), len(tables))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, format_json=args.log_json)

    handlers = {
        "describe": run_describe,
        "coverage": run_coverage,
    }
    try:
        return handlers[args.command](args)
    except (BattleArgsError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BAD_DATA


__all__ = ["build_parser", "main", "parse_number", "parse_option"]


if __name__ == "__main__":
    sys.exit(main())
