"""
RecommendationEngine: turns each issue from the rule engine into one
prioritised recommendation with concrete steps, effort, timing and an
estimate of what fixing it is worth.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Optional, Union

from config import (
    DESCRIPTION_MAX_CHARS,
    DESCRIPTION_MIN_CHARS,
    KEYWORD_DENSITY_MAX,
    KEYWORD_DENSITY_MIN,
    MIN_WORD_COUNT,
    TITLE_MAX_CHARS,
    TITLE_MIN_CHARS,
)
from models import (
    ActionType,
    AnalysisIssue,
    AnalysisResults,
    Effort,
    ImpactEstimate,
    Priority,
    Recommendation,
    RecommendationAction,
    RecommendationReport,
    RecommendationSummary,
    SEORule,
)
from recommendations.tables import (
    effort_for,
    estimated_time_for,
    example_for,
    ranking_impact_for,
    resources_for,
    why_for,
)
from recommendations.translations import DEFAULT_LANGUAGE, TRANSLATIONS
from scoring.scorer import compute_percentage, grade_for

logger = logging.getLogger(__name__)

QUICK_WIN_LIMIT = 5

_PRIORITY_ORDER = {p: i for i, p in enumerate(Priority.ALL)}

# First match wins, so "add" beats "update" in "Add and update ..."
_ACTION_KEYWORDS = [
    (ActionType.ADD, ("add", "create")),
    (ActionType.REMOVE, ("remove", "delete")),
    (ActionType.UPDATE, ("update", "change", "modify")),
    (ActionType.OPTIMIZE, ("optimize", "improve")),
    (ActionType.VERIFY, ("check", "verify")),
]


def categorize_action(text: str) -> str:
    lowered = text.lower()
    for action_type, words in _ACTION_KEYWORDS:
        if any(word in lowered for word in words):
            return action_type
    return ActionType.GENERAL


def priority_for(severity: str) -> str:
    return severity if severity in Priority.ALL else Priority.MEDIUM


class RecommendationEngine:
    """Holds only the active display language; analysis itself is stateless."""

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        self.translations = TRANSLATIONS.get(language, TRANSLATIONS[DEFAULT_LANGUAGE])

    def generate_recommendations(
        self,
        results: AnalysisResults,
        rules: list[SEORule],
    ) -> RecommendationReport:
        rules_by_id = {rule.id: rule for rule in rules}
        recommendations: list[Recommendation] = []

        for issue in results.issues:
            rule = rules_by_id.get(issue.id)
            if rule is None:
                logger.warning("No rule found for issue %r; skipping recommendation", issue.id)
                continue
            recommendations.append(self._create_recommendation(issue, rule, results))

        recommendations.sort(key=lambda r: (
            _PRIORITY_ORDER.get(r.priority, len(_PRIORITY_ORDER)),
            -r.impact_estimate.score_increase,
        ))

        return RecommendationReport(
            recommendations=recommendations,
            summary=self._summary(recommendations, results),
            by_priority={p: [r for r in recommendations if r.priority == p] for p in Priority.ALL},
            by_category=_group_by_category(recommendations),
            by_effort={e: [r for r in recommendations if r.effort == e] for e in Effort.ALL},
            quick_wins=identify_quick_wins(recommendations),
        )

    # ── Per recommendation ────────────────────────────────────────────────────

    def _create_recommendation(
        self,
        issue: AnalysisIssue,
        rule: SEORule,
        results: AnalysisResults,
    ) -> Recommendation:
        return Recommendation(
            id=f"rec-{issue.id}",
            rule_id=issue.id,
            title=rule.title,
            priority=priority_for(issue.severity),
            category=issue.category,
            description=issue.description,
            actions=self._actions(rule, results),
            effort=effort_for(rule.id, issue.severity, issue.impact),
            estimated_time=estimated_time_for(rule.id),
            impact_estimate=estimate_impact(rule, results),
            example=example_for(rule.id, results.metadata),
            why=why_for(rule.id, rule.description),
            resources=resources_for(rule.id, rule.category),
            weight=issue.impact,
            severity=issue.severity,
        )

    def _actions(self, rule: SEORule, results: AnalysisResults) -> list[RecommendationAction]:
        actions = [
            RecommendationAction(step=i, action=text, type=categorize_action(text))
            for i, text in enumerate(rule.recommendations, start=1)
        ]
        for text, action_type in specific_actions(rule.id, results):
            actions.append(RecommendationAction(
                step=len(actions) + 1,
                action=text,
                type=action_type,
                specific=True,
            ))
        return actions

    def _summary(
        self,
        recommendations: list[Recommendation],
        results: AnalysisResults,
    ) -> RecommendationSummary:
        total_increase = sum(r.impact_estimate.score_increase for r in recommendations)
        potential_score = results.score + total_increase
        potential_percentage = compute_percentage(potential_score, results.max_score)

        return RecommendationSummary(
            total_recommendations=len(recommendations),
            priority_counts={p: sum(1 for r in recommendations if r.priority == p) for p in Priority.ALL},
            effort_counts={e: sum(1 for r in recommendations if r.effort == e) for e in Effort.ALL},
            current_score=results.score,
            current_percentage=results.percentage,
            current_grade=results.grade or grade_for(results.percentage),
            potential_score=potential_score,
            potential_percentage=potential_percentage,
            potential_grade=grade_for(potential_percentage),
            total_potential_increase=total_increase,
        )

    # ── Translations ──────────────────────────────────────────────────────────

    def set_language(self, language: str) -> None:
        self.translations = TRANSLATIONS.get(language, TRANSLATIONS[DEFAULT_LANGUAGE])

    def translate(self, key: str, subkey: Optional[str] = None) -> Union[str, dict[str, str]]:
        """translate("priorities", "high") -> "High Priority"; unknown keys echo back."""
        group = self.translations.get(key)
        if subkey is not None:
            if isinstance(group, dict):
                return group.get(subkey, subkey)
            return subkey
        return group if group is not None else key

    def priority_label(self, priority: str) -> str:
        return self.translate("priorities", priority)

    def effort_label(self, effort: str) -> str:
        return self.translate("effort", effort)

    def category_label(self, category: str) -> str:
        return self.translate("categories", category)


# ── Helpers ───────────────────────────────────────────────────────────────────

def estimate_impact(rule: SEORule, results: AnalysisResults) -> ImpactEstimate:
    projected = results.score + rule.weight
    projected_percentage = compute_percentage(projected, results.max_score)
    return ImpactEstimate(
        score_increase=rule.weight,
        current_score=results.score,
        projected_score=projected,
        current_percentage=results.percentage,
        projected_percentage=projected_percentage,
        percentage_increase=projected_percentage - results.percentage,
        ranking_impact=ranking_impact_for(rule.severity),
    )


def identify_quick_wins(recommendations: list[Recommendation]) -> list[Recommendation]:
    """Cheap, important fixes, in the already-sorted order."""
    wins = [
        r for r in recommendations
        if r.effort == Effort.QUICK and r.priority in (Priority.CRITICAL, Priority.HIGH)
    ]
    return wins[:QUICK_WIN_LIMIT]


def specific_actions(rule_id: str, results: AnalysisResults) -> list[tuple[str, str]]:
    """Extra steps worked out from the page itself, as (text, action type)."""
    metadata: dict[str, Any] = results.metadata
    actions: list[tuple[str, str]] = []

    if rule_id == "meta-title-length":
        title = metadata.get("title") or ""
        if title:
            length = len(title)
            if length < TITLE_MIN_CHARS:
                actions.append((
                    f"Current title is {length} characters. "
                    f"Add {TITLE_MIN_CHARS - length} more characters to reach minimum.",
                    ActionType.UPDATE,
                ))
            elif length > TITLE_MAX_CHARS:
                actions.append((
                    f"Current title is {length} characters. "
                    f"Reduce by {length - TITLE_MAX_CHARS} characters to avoid truncation.",
                    ActionType.UPDATE,
                ))

    elif rule_id == "meta-description-length":
        description = metadata.get("description") or ""
        if description:
            length = len(description)
            if length < DESCRIPTION_MIN_CHARS:
                actions.append((
                    f"Current description is {length} characters. "
                    f"Add {DESCRIPTION_MIN_CHARS - length} more to reach minimum.",
                    ActionType.UPDATE,
                ))
            elif length > DESCRIPTION_MAX_CHARS:
                actions.append((
                    f"Current description is {length} characters. "
                    f"Reduce by {length - DESCRIPTION_MAX_CHARS} to avoid truncation.",
                    ActionType.UPDATE,
                ))

    elif rule_id == "content-word-count":
        words = metadata.get("word_count") or 0
        if words:
            actions.append((
                f"Current content: {words} words. Add {max(0, MIN_WORD_COUNT - words)} more words.",
                ActionType.ADD,
            ))

    elif rule_id == "viewport-meta":
        actions.append((
            'Add this tag in <head>: <meta name="viewport" content="width=device-width, initial-scale=1.0">',
            ActionType.ADD,
        ))

    elif rule_id == "https-protocol":
        actions.append(("Install SSL certificate and configure HTTPS redirects", ActionType.UPDATE))

    elif rule_id == "canonical-url":
        url = metadata.get("url")
        if url:
            actions.append((f'Add canonical tag: <link rel="canonical" href="{url}">', ActionType.ADD))

    elif rule_id == "image-alt-text":
        missing = [img.src for img in metadata.get("images", []) if not img.alt.strip()]
        if missing:
            shown = ", ".join(missing[:3])
            more = f" and {len(missing) - 3} more" if len(missing) > 3 else ""
            actions.append((f"Add alt text to {len(missing)} image(s): {shown}{more}", ActionType.ADD))

    elif rule_id == "h1-exists":
        title = metadata.get("title")
        if title:
            actions.append((f"Use the page title as a starting point: <h1>{title}</h1>", ActionType.ADD))

    elif rule_id == "keyword-density" and results.keyword_densities:
        actions.extend(_density_actions(results))

    return actions


def _density_actions(results: AnalysisResults) -> list[tuple[str, str]]:
    primary = results.keyword_densities[0]
    if primary.word_count == 0:
        return []

    keyword_words = max(1, len(primary.keyword.split()))
    if primary.density < KEYWORD_DENSITY_MIN:
        target = math.ceil(primary.word_count * KEYWORD_DENSITY_MIN / 100 / keyword_words)
        return [(
            f'Use "{primary.keyword}" about {target - primary.count} more time(s) '
            f"to reach {KEYWORD_DENSITY_MIN:g}% density.",
            ActionType.ADD,
        )]
    if primary.density > KEYWORD_DENSITY_MAX:
        ceiling = math.floor(primary.word_count * KEYWORD_DENSITY_MAX / 100 / keyword_words)
        return [(
            f'Remove about {primary.count - ceiling} use(s) of "{primary.keyword}" '
            f"to get under {KEYWORD_DENSITY_MAX:g}% density.",
            ActionType.REMOVE,
        )]
    return []


def _group_by_category(recommendations: list[Recommendation]) -> dict[str, list[Recommendation]]:
    grouped: dict[str, list[Recommendation]] = {}
    for rec in recommendations:
        grouped.setdefault(rec.category, []).append(rec)
    return grouped
