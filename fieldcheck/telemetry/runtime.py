# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry handles shared by the fieldcheck instruments.

Only the OpenTelemetry API is used. Without a configured SDK meter provider
every instrument is a no-op, so the library never exports anything on its own.
"""

from __future__ import annotations

from opentelemetry import metrics

METER_NAME = "fieldcheck"

meter = metrics.get_meter(METER_NAME)

__all__ = ["METER_NAME", "meter"]
