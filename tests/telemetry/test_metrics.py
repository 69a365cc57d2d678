# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

import pytest

from fieldcheck.telemetry import metrics
from fieldcheck.validation import RuleSet


def test_instruments_are_defined():
    assert metrics.validate_total is not None
    assert metrics.violation_total is not None
    assert metrics.config_degraded_total is not None


def test_passing_validation_records_outcome(recorded_metrics):
    RuleSet().validate("hello")

    assert recorded_metrics["validate_total"].calls == [(1, {"result": "pass"})]
    assert recorded_metrics["violation_total"].calls == []


def test_failing_validation_records_each_code(recorded_metrics):
    RuleSet().set_max_bound(3).set_pattern("^[0-9]+$").validate("abcdef")

    assert recorded_metrics["validate_total"].calls == [(1, {"result": "fail"})]
    assert recorded_metrics["violation_total"].calls == [(1, {"code": 1}), (1, {"code": 4})]


def test_early_accept_is_recorded_separately(recorded_metrics):
    RuleSet().set_allow_null().validate(None)
    RuleSet().set_allow_empty().validate("")

    assert recorded_metrics["validate_total"].calls == [
        (1, {"result": "accepted"}),
        (1, {"result": "accepted"}),
    ]


def test_invalid_pattern_is_counted_as_degraded(recorded_metrics):
    RuleSet().set_pattern("[unclosed(")
    assert recorded_metrics["config_degraded_total"].calls == [(1, {"reason": "pattern"})]


def test_unsupported_date_format_is_counted_as_degraded(recorded_metrics):
    RuleSet().set_date_format("Y-m-d Q").validate("2024-01-15 x")
    assert (1, {"reason": "date_format"}) in recorded_metrics["config_degraded_total"].calls


class _Broken:
    def add(self, *args, **kwargs):
        raise RuntimeError("exporter down")


@pytest.mark.parametrize("name", ["validate_total", "violation_total", "config_degraded_total"])
def test_broken_instrument_never_breaks_validation(monkeypatch, name):
    monkeypatch.setattr(metrics, name, _Broken())

    rules = RuleSet().set_pattern("[unclosed(").set_max_bound(1)
    assert rules.validate("abc") is False
    assert [v.code for v in rules.errors] == [1, 4]
