# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for RuleSet configuration, clearing and the mapping form."""

from __future__ import annotations

import pytest

from fieldcheck.exceptions import ConfigurationError
from fieldcheck.validation import RuleSet
from fieldcheck.validation.ruleset import EMAIL_PATTERN, MAPPING_KEYS


def test_defaults():
    rules = RuleSet()

    assert rules.allow_null is False
    assert rules.allow_empty is False
    assert rules.min_bound is None
    assert rules.max_bound is None
    assert rules.pattern is None
    assert rules.format_type is None
    assert rules.primitive_type is None
    assert rules.date_format == "Y-m-d"
    assert rules.developer_mode is False
    assert rules.success is False
    assert rules.last_error_code == 0
    assert rules.last_error_message == ""
    assert rules.errors == []


def test_developer_mode_is_stored():
    assert RuleSet(developer_mode=True).developer_mode is True


def test_setters_chain_on_the_same_instance():
    rules = RuleSet()
    chained = (
        rules.set_allow_null()
        .set_allow_empty()
        .set_min_bound(1)
        .set_max_bound(10)
        .set_pattern("^a")
        .set_format_type("custom")
        .set_primitive_type("str")
        .set_date_format("d/m/Y")
        .clear_allow_null()
        .clear_allow_empty()
        .clear_min_bound()
        .clear_max_bound()
        .clear_pattern()
        .clear_format_type()
        .clear_primitive_type()
        .clear_date_format()
    )
    assert chained is rules


def test_bounds_are_stored_as_floats():
    rules = RuleSet().set_min_bound(2).set_max_bound(7)
    assert rules.min_bound == 2.0
    assert isinstance(rules.min_bound, float)
    assert rules.max_bound == 7.0


def test_negative_one_is_a_real_bound():
    rules = RuleSet().set_min_bound(-1).set_max_bound(-1)
    assert rules.min_bound == -1.0
    assert rules.max_bound == -1.0


@pytest.mark.parametrize(
    "name,canonical",
    [
        ("int", "integer"),
        ("bool", "boolean"),
        ("str", "string"),
        ("number", "numeric"),
        ("float", "double"),
        ("null", "NULL"),
        ("NULL", "NULL"),
        ("INT", "integer"),
        ("String", "string"),
        ("array", "array"),
        ("DateTime", "datetime"),
        ("whatever", "whatever"),
    ],
)
def test_primitive_type_aliases(name, canonical):
    assert RuleSet().set_primitive_type(name).primitive_type == canonical


def test_empty_primitive_type_means_unset():
    assert RuleSet().set_primitive_type("").primitive_type is None


def test_set_pattern_normalizes():
    rules = RuleSet().set_pattern("^[a-z]+$")
    assert rules.pattern == "/^[a-z]+$/"
    assert rules.compiled_pattern is not None


def test_empty_pattern_means_unset():
    rules = RuleSet().set_pattern("^a").set_pattern("")
    assert rules.pattern is None
    assert rules.compiled_pattern is None


def test_invalid_pattern_is_kept_but_not_compiled(caplog):
    rules = RuleSet().set_pattern("[unclosed(")

    assert rules.pattern == "/[unclosed(/"
    assert rules.compiled_pattern is None
    assert any("does not compile" in message for message in caplog.messages)


def test_email_format_expands_to_pattern_and_bounds():
    rules = RuleSet().set_format_type("email")

    assert rules.format_type == "email"
    assert rules.pattern == EMAIL_PATTERN
    assert rules.min_bound == 3
    assert rules.max_bound == 254


def test_format_type_is_lowercased():
    rules = RuleSet().set_format_type("EMAIL")
    assert rules.format_type == "email"
    assert rules.pattern == EMAIL_PATTERN


def test_manual_overrides_after_email_format():
    rules = RuleSet().set_format_type("email").set_max_bound(64)
    assert rules.max_bound == 64
    assert rules.min_bound == 3


def test_clear_email_format_restores_unset_pattern_and_bounds():
    rules = RuleSet().set_format_type("email").clear_format_type()

    assert rules.format_type is None
    assert rules.pattern is None
    assert rules.min_bound is None
    assert rules.max_bound is None


def test_clear_other_format_keeps_pattern_and_bounds():
    rules = RuleSet().set_pattern("^a").set_max_bound(5).set_format_type("slug").clear_format_type()

    assert rules.format_type is None
    assert rules.pattern == "/^a/"
    assert rules.max_bound == 5


def test_date_format_sets_primitive_type():
    rules = RuleSet().set_primitive_type("string").set_date_format("d/m/Y")
    assert rules.date_format == "d/m/Y"
    assert rules.primitive_type == "date"


def test_clear_date_format_uses_its_own_default():
    rules = RuleSet().set_date_format("d/m/Y").clear_date_format()

    assert rules.date_format == "d-M-Y"
    # the primitive type set by set_date_format is left alone
    assert rules.primitive_type == "date"


def test_clear_errors():
    rules = RuleSet()
    rules.validate(None)
    assert rules.errors

    assert rules.clear_errors() is None
    assert rules.errors == []
    assert rules.last_error_code == 0
    assert rules.last_error_message == ""


def test_clear_all_resets_configuration_and_errors():
    rules = RuleSet().set_allow_null().set_allow_empty().set_format_type("email").set_primitive_type("int")
    rules.set_date_format("d/m/Y")
    rules.validate([1])

    rules.clear_all()

    assert rules.allow_null is False
    assert rules.allow_empty is False
    assert rules.min_bound is None
    assert rules.max_bound is None
    assert rules.pattern is None
    assert rules.format_type is None
    assert rules.primitive_type is None
    assert rules.date_format == "d-M-Y"
    assert rules.errors == []
    assert rules.last_error_code == 0


def test_clear_non_error_state_keeps_errors():
    rules = RuleSet().set_max_bound(2)
    rules.validate("abcdef")
    errors = rules.errors

    rules.clear_non_error_state()

    assert rules.max_bound is None
    assert rules.errors == errors
    assert rules.last_error_code == 1
    assert rules.last_error_message == "'abcdef' exceeds maximum value of 2."


def test_errors_property_returns_a_copy():
    rules = RuleSet()
    rules.validate(None)
    rules.errors.clear()
    assert len(rules.errors) == 2


def test_add_error_never_deduplicates():
    rules = RuleSet()
    rules.add_error(4, "x")
    rules.add_error(4, "x")

    assert [v.code for v in rules.errors] == [4, 4]
    assert rules.last_error_code == 4
    assert rules.last_error_message == "x"


def test_result_snapshot():
    rules = RuleSet().set_max_bound(1)
    rules.validate("abc")
    result = rules.result

    assert result.success is False
    assert result.codes == [1]
    assert str(result).startswith("FAIL")

    rules.clear_errors()
    assert result.codes == [1]


# ------------------------------------------------------------------
# Mapping form
# ------------------------------------------------------------------


def test_from_mapping_applies_all_settings():
    rules = RuleSet.from_mapping(
        {
            "allow_null": True,
            "allow_empty": True,
            "format": "email",
            "max": 64,
            "type": "str",
        }
    )

    assert rules.allow_null is True
    assert rules.allow_empty is True
    assert rules.format_type == "email"
    assert rules.min_bound == 3
    assert rules.max_bound == 64
    assert rules.primitive_type == "string"


def test_from_mapping_explicit_type_wins_over_date_format():
    rules = RuleSet.from_mapping({"date_format": "d/m/Y", "type": "string"})
    assert rules.date_format == "d/m/Y"
    assert rules.primitive_type == "string"


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(ConfigurationError) as exc_info:
        RuleSet.from_mapping({"maximum": 10, "max": 5}, name="limit")

    message = str(exc_info.value)
    assert "maximum" in message
    assert "limit" in message
    assert "Valid settings" in message


@pytest.mark.parametrize(
    "mapping",
    [
        {"min": "three"},
        {"max": True},
        {"allow_null": "yes"},
        {"pattern": 12},
        {"type": None},
    ],
)
def test_from_mapping_rejects_wrong_value_types(mapping):
    with pytest.raises(ConfigurationError):
        RuleSet.from_mapping(mapping)


def test_from_mapping_rejects_non_mapping():
    with pytest.raises(ConfigurationError):
        RuleSet.from_mapping(["max", 3])  # type: ignore[arg-type]


def test_to_mapping_round_trip():
    original = RuleSet().set_allow_null().set_format_type("email").set_max_bound(64)
    mapping = original.to_mapping()

    assert mapping == {
        "allow_null": True,
        "format": "email",
        "min": 3.0,
        "max": 64.0,
        "pattern": EMAIL_PATTERN,
    }
    assert RuleSet.from_mapping(mapping).to_mapping() == mapping


def test_to_mapping_includes_date_format_for_date_rules():
    mapping = RuleSet().set_date_format("d/m/Y").to_mapping()
    assert mapping == {"date_format": "d/m/Y", "type": "date"}
    assert set(mapping) <= set(MAPPING_KEYS)
