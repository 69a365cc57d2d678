# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Command implementations for the ``fieldcheck`` CLI."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, List

import yaml

from ..exceptions import ConfigurationError, FieldCheckError
from ..rulebook import load_rules
from ..validation import RuleSet

logger = logging.getLogger("fieldcheck.cli")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_CONFIG = 2


def _build_rule_set(args: argparse.Namespace) -> RuleSet:
    if args.rules or args.rule:
        if not args.rule:
            raise ConfigurationError("--rules needs --rule NAME to pick a rule from the file")
        rules = load_rules(args.rules).get(args.rule, developer_mode=args.dev)
    else:
        rules = RuleSet(developer_mode=args.dev)

    # Command line settings override the rule file.
    if args.allow_null:
        rules.set_allow_null()
    if args.allow_empty:
        rules.set_allow_empty()
    if args.format is not None:
        rules.set_format_type(args.format)
    if args.date_format is not None:
        rules.set_date_format(args.date_format)
    if args.type is not None:
        rules.set_primitive_type(args.type)
    if args.min is not None:
        rules.set_min_bound(args.min)
    if args.max is not None:
        rules.set_max_bound(args.max)
    if args.pattern is not None:
        rules.set_pattern(args.pattern)
    return rules


def _parse_values(raw_values: List[str], as_json: bool) -> List[Any]:
    if not as_json:
        return list(raw_values)
    values = []
    for raw in raw_values:
        try:
            values.append(json.loads(raw))
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Value {raw!r} is not valid JSON: {exc}") from exc
    return values


def check_command(args: argparse.Namespace) -> int:
    """Validate each VALUE and print one result block per value."""

    try:
        rules = _build_rule_set(args)
        values = _parse_values(args.values, args.json)
    except FieldCheckError as exc:
        logger.error("%s", exc)
        return EXIT_CONFIG

    logger.debug("Checking %d value(s) with %r", len(values), rules)

    exit_code = EXIT_OK
    for raw, value in zip(args.values, values):
        rules.clear_errors()
        if rules.validate(value):
            print(f"OK    {raw}")
            continue
        exit_code = EXIT_INVALID
        print(f"FAIL  {raw}")
        for violation in rules.errors:
            print(f"      [{violation.code}] {violation.message}")
    return exit_code


def show_rules_command(args: argparse.Namespace) -> int:
    """Print the rules of a rule file as YAML."""

    try:
        bundle = load_rules(args.path)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return EXIT_CONFIG

    if not bundle.rule_names:
        logger.warning("Rule file %s defines no rules", bundle.source)
        return EXIT_OK

    rendered = {name: bundle.get(name).to_mapping() for name in bundle.rule_names}
    print(yaml.safe_dump(rendered, sort_keys=False).rstrip())
    return EXIT_OK


__all__ = [
    "EXIT_CONFIG",
    "EXIT_INVALID",
    "EXIT_OK",
    "check_command",
    "show_rules_command",
]
