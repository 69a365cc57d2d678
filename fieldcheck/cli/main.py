# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Entry point for the ``fieldcheck`` command."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .commands import check_command, show_rules_command


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fieldcheck",
        description="Validate single values against configurable rules.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Validate one or more values")
    check.add_argument("values", nargs="+", metavar="VALUE", help="Value(s) to validate")
    check.add_argument("--rules", help="Rule file to load (.yaml, .yml or .json)")
    check.add_argument("--rule", help="Name of the rule to use from the rule file")
    check.add_argument("--min", type=float, help="Inclusive minimum length or value")
    check.add_argument("--max", type=float, help="Inclusive maximum length or value")
    check.add_argument("--pattern", help="Pattern in /body/flags or shorthand form")
    check.add_argument("--format", help="Named format, e.g. email")
    check.add_argument("--type", help="Expected primitive type (string, int, numeric, date ...)")
    check.add_argument("--date-format", dest="date_format", help="Expected date format, e.g. Y-m-d")
    check.add_argument("--allow-null", dest="allow_null", action="store_true", help="Accept null values")
    check.add_argument("--allow-empty", dest="allow_empty", action="store_true", help="Accept empty values")
    check.add_argument("--json", action="store_true", help="Parse each VALUE as JSON")
    check.add_argument("--dev", action="store_true", help="Create rule sets in developer mode")
    check.set_defaults(func=check_command)

    show = subparsers.add_parser("show-rules", help="List the rules defined in a rule file")
    show.add_argument("path", help="Rule file to read")
    show.set_defaults(func=show_rules_command)

    return parser


def run_command(args: argparse.Namespace) -> int:
    result = args.func(args)
    return int(result or 0)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_command(args)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
