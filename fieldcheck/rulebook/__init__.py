"""Rule book package - named RuleSets loaded from rule files."""

from .bundle import RuleBundle
from .loader import RULES_FILE_ENV, FileRuleLoader, load_rules

__all__ = [
    "RuleBundle",
    "FileRuleLoader",
    "RULES_FILE_ENV",
    "load_rules",
]
