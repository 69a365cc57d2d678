# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Rule bundle data structures."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from ..exceptions import ConfigurationError, UnknownRuleError
from ..validation import RuleSet

logger = logging.getLogger(__name__)


@dataclass
class RuleBundle:
    """A set of independently named RuleSets parsed from a rule file.

    Each named rule is checked when the bundle is built, so configuration
    mistakes surface at load time rather than on the first validation.
    """

    raw_bundle: Dict[str, Any]
    source: str = "<memory>"
    loaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    rules: Dict[str, Dict[str, Any]] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        if not isinstance(self.raw_bundle, Mapping):
            raise ConfigurationError(f"Rule file {self.source} must contain a mapping at the top level")

        raw_rules = self.raw_bundle.get("rules", {})
        if raw_rules is None:
            raw_rules = {}
        if not isinstance(raw_rules, Mapping):
            raise ConfigurationError(f"'rules' in {self.source} must be a mapping of rule names to settings")

        logger.debug("Processing %d rules from %s", len(raw_rules), self.source)

        for name, settings in raw_rules.items():
            rule_name = str(name)
            if settings is None:
                settings = {}
            # Builds and discards a RuleSet so bad settings fail here.
            RuleSet.from_mapping(settings, name=rule_name)
            self.rules[rule_name] = dict(settings)
            logger.debug("Loaded rule '%s': %s", rule_name, settings)

    @property
    def metadata(self) -> Dict[str, Any]:
        metadata = self.raw_bundle.get("metadata") or {}
        return dict(metadata) if isinstance(metadata, Mapping) else {}

    @property
    def name(self) -> Optional[str]:
        value = self.metadata.get("name")
        return str(value) if value is not None else None

    @property
    def rule_names(self) -> List[str]:
        return list(self.rules)

    def __contains__(self, name: object) -> bool:
        return name in self.rules

    def get(self, name: str, *, developer_mode: bool = False) -> RuleSet:
        """Return a new RuleSet for rule *name*.

        Every call builds a separate instance, so error state is never shared
        between callers.

        Raises:
            UnknownRuleError: If the bundle has no rule called *name*.
        """
        try:
            settings = self.rules[name]
        except KeyError:
            raise UnknownRuleError(name, self.rules) from None
        return RuleSet.from_mapping(settings, developer_mode=developer_mode, name=name)


__all__ = ["RuleBundle"]
