# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for fieldcheck."""

from __future__ import annotations

from typing import Iterable

from .runtime import meter

validate_total = meter.create_counter(
    name="fieldcheck.validate.total",
    description="Counts validate() calls partitioned by outcome (pass, fail, accepted).",
    unit="1",
)

violation_total = meter.create_counter(
    name="fieldcheck.violation.total",
    description="Counts recorded violations partitioned by error code.",
    unit="1",
)

config_degraded_total = meter.create_counter(
    name="fieldcheck.config.degraded.total",
    description="Counts rule configuration that could not be applied as written (invalid pattern, unsupported date token).",
    unit="1",
)


def record_validation(outcome: str, codes: Iterable[int] = ()) -> None:
    """Record the outcome of one validate() call and the codes it produced.

    Args:
        outcome: "pass", "fail" or "accepted" (early accept of null/empty values)
        codes: Error codes recorded during the call, in order
    """
    try:
        validate_total.add(1, {"result": outcome})
        for code in codes:
            violation_total.add(1, {"code": int(code)})
    except Exception:
        # Telemetry must never interfere with validation
        pass


def record_config_degraded(reason: str) -> None:
    try:
        config_degraded_total.add(1, {"reason": reason})
    except Exception:
        pass


__all__ = [
    "validate_total",
    "violation_total",
    "config_degraded_total",
    "record_validation",
    "record_config_degraded",
]
