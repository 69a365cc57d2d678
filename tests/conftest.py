"""Pytest fixtures for the fieldcheck test-suite."""
from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

import pytest

from fieldcheck.runtime import facade


@pytest.fixture(autouse=True)
def _reset_facade():  # noqa: D401
    """Every test starts without a process-wide RuleSet."""
    facade.reset()
    yield
    facade.reset()


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture()
def write_rules(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a rule file into *tmp_path*."""

    def _write(text: str, name: str = "rules.yaml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def signup_rules(write_rules) -> Path:
    return write_rules(
        """
        metadata:
          name: signup
        rules:
          email:
            format: email
          age:
            type: int
            min: 18
            max: 130
          nickname:
            allow_null: true
            max: 20
            pattern: "^[a-z]+$"
          birthday:
            date_format: d/m/Y
        """
    )


class _Recorder:
    """Stand-in for an OpenTelemetry counter that remembers every add()."""

    def __init__(self):
        self.calls: List[Tuple[Any, Dict[str, Any]]] = []

    def add(self, amount: Any, attributes: Dict[str, Any] | None = None) -> None:
        self.calls.append((amount, dict(attributes or {})))


@pytest.fixture()
def recorded_metrics(monkeypatch) -> Dict[str, _Recorder]:
    """Swap the metric counters for recorders and return them by name."""
    from fieldcheck.telemetry import metrics

    recorders = {
        "validate_total": _Recorder(),
        "violation_total": _Recorder(),
        "config_degraded_total": _Recorder(),
    }
    for name, recorder in recorders.items():
        monkeypatch.setattr(metrics, name, recorder)
    return recorders
