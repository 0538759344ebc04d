"""
Runs SEO rules against one piece of content and aggregates a weighted score.

Rules run category by category (meta, content, technical, readability,
keywords, then any other category in first-seen order), each in declaration
order. A rule whose check raises is logged, recorded on rule_errors and
left out of the score entirely; the remaining rules still run.
"""
from __future__ import annotations

import logging

from config import SEVERITY_ORDER
from errors import RuleExecutionError
from models import (
    AnalysisIssue,
    AnalysisResults,
    Category,
    CategoryScore,
    RuleRecommendation,
    SEOContent,
    SEORule,
)
from scoring.scorer import compute_percentage, grade_for

logger = logging.getLogger(__name__)


def group_by_category(rules: list[SEORule]) -> dict[str, list[SEORule]]:
    groups: dict[str, list[SEORule]] = {category: [] for category in Category.ALL}
    for rule in rules:
        groups.setdefault(rule.category, []).append(rule)
    return {category: members for category, members in groups.items() if members}


def evaluate(content: SEOContent, rules: list[SEORule]) -> AnalysisResults:
    results = AnalysisResults()

    for category, members in group_by_category(rules).items():
        for rule in members:
            try:
                outcome = rule.check(content)
            except Exception as exc:
                error = RuleExecutionError(rule.id, exc)
                logger.warning("%s; rule excluded from score", error, exc_info=True)
                results.rule_errors.append(error)
                continue

            bucket = results.category_scores.setdefault(category, CategoryScore())
            results.max_score += rule.weight
            bucket.max_score += rule.weight

            if outcome.warning:
                results.warnings += 1

            if outcome.passed:
                results.score += rule.weight
                results.passed_rules += 1
                bucket.score += rule.weight
                bucket.passed += 1
                continue

            results.failed_rules += 1
            bucket.failed += 1
            results.issues.append(AnalysisIssue(
                id=rule.id,
                category=rule.category,
                severity=rule.severity,
                title=rule.title,
                description=outcome.message or rule.description,
                impact=rule.weight,
            ))
            results.recommendations.extend(
                RuleRecommendation(rule_id=rule.id, category=rule.category, recommendation=text)
                for text in rule.recommendations
            )

    results.issues.sort(key=lambda i: (SEVERITY_ORDER.get(i.severity, len(SEVERITY_ORDER)), -i.impact))
    results.percentage = compute_percentage(results.score, results.max_score)
    results.grade = grade_for(results.percentage)

    logger.debug(
        "Evaluated %d rules: %d passed, %d failed, %d errored",
        len(rules), results.passed_rules, results.failed_rules, len(results.rule_errors),
    )
    return results
