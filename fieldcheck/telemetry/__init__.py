"""Telemetry package - metric instruments for validation outcomes."""

from .metrics import (
    config_degraded_total,
    record_config_degraded,
    record_validation,
    validate_total,
    violation_total,
)
from .runtime import METER_NAME, meter

__all__ = [
    "METER_NAME",
    "meter",
    "validate_total",
    "violation_total",
    "config_degraded_total",
    "record_validation",
    "record_config_degraded",
]
