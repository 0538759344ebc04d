"""
The rule catalog: every SEORule, in declaration order, built once at import.
"""
from __future__ import annotations

from typing import Optional

from models import SEORule
from rules import content, keywords, meta, readability, technical

_RULES: tuple[SEORule, ...] = (
    meta.RULES
    + content.RULES
    + technical.RULES
    + readability.RULES
    + keywords.RULES
)

_BY_ID: dict[str, SEORule] = {rule.id: rule for rule in _RULES}


def get_all_rules() -> list[SEORule]:
    return list(_RULES)


def get_rules_by_category(category: str) -> list[SEORule]:
    return [rule for rule in _RULES if rule.category == category]


def get_rule_by_id(rule_id: str) -> Optional[SEORule]:
    return _BY_ID.get(rule_id)


def get_rules_by_severity(severity: str) -> list[SEORule]:
    return [rule for rule in _RULES if rule.severity == severity]
