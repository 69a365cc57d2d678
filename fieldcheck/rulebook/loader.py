# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Load rule bundles from YAML or JSON files."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..exceptions import ConfigurationError
from .bundle import RuleBundle

logger = logging.getLogger(__name__)

RULES_FILE_ENV = "FIELDCHECK_RULES_FILE"

_YAML_SUFFIXES = {".yaml", ".yml"}
_JSON_SUFFIXES = {".json"}


class FileRuleLoader:
    """Reads a rule bundle from a local file.

    The path defaults to the ``FIELDCHECK_RULES_FILE`` environment variable.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        if path is None:
            env_path = os.getenv(RULES_FILE_ENV)
            if not env_path:
                raise ConfigurationError(
                    f"No rule file given. Pass a path or set {RULES_FILE_ENV}."
                )
            path = env_path
        self.path = Path(path).expanduser()

    def load(self) -> RuleBundle:
        """Read and parse the rule file.

        Raises:
            ConfigurationError: If the file is missing, has an unsupported
                extension, cannot be parsed, or holds invalid rules.
        """
        if not self.path.is_file():
            raise ConfigurationError(f"Rule file not found: {self.path}")

        suffix = self.path.suffix.lower()
        if suffix not in _YAML_SUFFIXES | _JSON_SUFFIXES:
            raise ConfigurationError(
                f"Unsupported rule file extension '{suffix}' for {self.path}; use .yaml, .yml or .json"
            )

        text = self.path.read_text(encoding="utf-8")
        data = self._parse(text, suffix)
        logger.info("Loaded rule file %s", self.path)
        return RuleBundle(raw_bundle=data if data is not None else {}, source=str(self.path))

    def _parse(self, text: str, suffix: str) -> Any:
        try:
            if suffix in _JSON_SUFFIXES:
                return json.loads(text)
            return yaml.safe_load(text)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Could not parse rule file {self.path}: {exc}") from exc


def load_rules(path: Optional[Union[str, Path]] = None) -> RuleBundle:
    """Load a rule bundle from *path* (or ``FIELDCHECK_RULES_FILE``)."""

    return FileRuleLoader(path).load()


__all__ = [
    "FileRuleLoader",
    "RULES_FILE_ENV",
    "load_rules",
]
