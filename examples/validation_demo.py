# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""
Field Validation Demo
=====================

Walks through the main ways of checking a single value with fieldcheck:

1. A RuleSet configured through chained setters
2. Several errors reported for one value, in check order
3. Named rules loaded from a YAML rule file
4. The process-wide facade for one-off checks

Run with:
    python examples/validation_demo.py
"""

from __future__ import annotations

import os
import sys
import tempfile

# Set up path for local development
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fieldcheck import ConfigurationError, RuleSet, facade, load_rules


def _show(rules: RuleSet, value, label=None):
    ok = rules.validate(value, label)
    print(f"  {value!r:<24} -> {'OK' if ok else 'FAIL'}")
    if not ok:
        for violation in rules.errors:
            print(f"      [{violation.code}] {violation.message}")
    rules.clear_errors()


def demo_chained_rules():
    print("\n" + "=" * 70)
    print("DEMO 1: Chained Configuration")
    print("=" * 70)

    age = RuleSet().set_primitive_type("int").set_min_bound(18).set_max_bound(130)
    print(f"\n  {age!r}")
    for value in (30, 12, 150, "30"):
        _show(age, value)


def demo_multiple_errors():
    print("\n" + "=" * 70)
    print("DEMO 2: Several Errors For One Value")
    print("=" * 70)

    code = RuleSet().set_max_bound(3).set_pattern("^[0-9]+$")
    _show(code, "abcdef", "Order code")

    email = RuleSet().set_format_type("email")
    _show(email, "a")
    _show(email, None)


def demo_rule_file():
    print("\n" + "=" * 70)
    print("DEMO 3: Named Rules From A Rule File")
    print("=" * 70)

    rule_file = """
metadata:
  name: signup
rules:
  email:
    format: email
  birthday:
    date_format: d/m/Y
  nickname:
    allow_null: true
    max: 20
    pattern: "^[a-z]+$"
"""

    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(rule_file)
        temp_path = f.name

    try:
        bundle = load_rules(temp_path)
        print(f"\n  Loaded '{bundle.name}' with rules: {', '.join(bundle.rule_names)}")
        _show(bundle.get("email"), "user@example.com")
        _show(bundle.get("birthday"), "31/02/2024")
        _show(bundle.get("nickname"), None)
        _show(bundle.get("nickname"), "Bob")
    finally:
        os.unlink(temp_path)

    print("\n  A typo in a setting name is rejected at load time:")
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write("rules:\n  age:\n    maximum: 10\n")
        temp_path = f.name
    try:
        load_rules(temp_path)
    except ConfigurationError as e:
        print(f"    {e}")
    finally:
        os.unlink(temp_path)


def demo_facade():
    print("\n" + "=" * 70)
    print("DEMO 4: Process-Wide Facade")
    print("=" * 70)

    facade.set_primitive_type("numeric").validate("12.5")
    print(f"\n  numeric '12.5'  -> last error code {facade.get_last_error_code()}")

    facade.validate("")
    print(f"  unconfigured '' -> {facade.get_last_error()}")


def main():
    demo_chained_rules()
    demo_multiple_errors()
    demo_rule_file()
    demo_facade()


if __name__ == "__main__":
    main()
