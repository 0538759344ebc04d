"""
Fixed lookup tables behind recommendation effort, timing, examples,
explanations and reading links.

Effort and estimated time are keyed by different id lists on purpose:
effort is a coarse bucket, estimated time a finer display hint, and the two
do not always agree on what counts as quick.
"""
from __future__ import annotations

from typing import Any, Optional

from models import Category, Effort, Example, Resource, Severity

# ── Effort ────────────────────────────────────────────────────────────────────
SIGNIFICANT_EFFORT_MIN_WEIGHT = 8

QUICK_EFFORT_IDS = frozenset({
    "meta-title-exists",
    "meta-description-exists",
    "viewport-meta",
    "canonical-url",
    "html-lang",
    "charset-declaration",
})

SIGNIFICANT_EFFORT_IDS = frozenset({
    "content-word-count",
    "paragraph-length",
    "readability-score",
    "content-freshness",
})

# ── Estimated time ────────────────────────────────────────────────────────────
QUICK_TIME_IDS = frozenset({
    "viewport-meta",
    "canonical-url",
    "html-lang",
    "charset-declaration",
    "meta-title-exists",
    "meta-description-exists",
})

MODERATE_TIME_IDS = frozenset({
    "meta-title-length",
    "meta-description-length",
    "h1-exists",
    "image-alt-text",
    "internal-links",
    "external-links",
})

QUICK_TIME = "5-15 min"
MODERATE_TIME = "30-60 min"
DEFAULT_TIME = "1-3 hours"

# ── Narrative ─────────────────────────────────────────────────────────────────
RANKING_IMPACT = {
    Severity.CRITICAL: "High - Critical for search visibility",
    Severity.HIGH:     "Medium-High - Significant ranking factor",
    Severity.MEDIUM:   "Medium - Notable improvement potential",
}
DEFAULT_RANKING_IMPACT = "Low - Minor optimization"

WHY = {
    "meta-title-exists": "Page titles are the first thing users see in search results and are a critical ranking factor.",
    "meta-title-length": "Titles between 30-60 characters display fully in search results without truncation.",
    "meta-description-exists": "Descriptions influence click-through rates and provide context in search results.",
    "https-protocol": "HTTPS is a confirmed ranking signal and essential for user trust and data security.",
    "viewport-meta": "Mobile-friendliness is a major ranking factor; viewport meta ensures proper mobile display.",
    "h1-exists": "H1 tags signal page topic to search engines and improve content structure.",
    "content-word-count": "Longer, comprehensive content tends to rank better and provides more value to users.",
    "readability-score": "Readable content improves user engagement metrics, which indirectly affects rankings.",
    "canonical-url": "Prevents duplicate content issues that can dilute ranking signals.",
    "image-alt-text": "Alt text improves accessibility and helps images rank in image search.",
}

# ── Resources ─────────────────────────────────────────────────────────────────
META_RESOURCE = Resource(
    title="Google Search Central - Meta Tags",
    url="https://developers.google.com/search/docs/crawling-indexing/special-tags",
)
TECHNICAL_RESOURCE = Resource(
    title="Google Search Central - Technical SEO",
    url="https://developers.google.com/search/docs/fundamentals/seo-starter-guide",
)
READABILITY_RESOURCE = Resource(
    title="Hemingway Editor - Readability Tool",
    url="https://hemingwayapp.com/",
)


def effort_for(rule_id: str, severity: str, impact: float) -> str:
    if severity == Severity.CRITICAL and impact >= SIGNIFICANT_EFFORT_MIN_WEIGHT:
        return Effort.SIGNIFICANT
    if rule_id in QUICK_EFFORT_IDS:
        return Effort.QUICK
    if rule_id in SIGNIFICANT_EFFORT_IDS:
        return Effort.SIGNIFICANT
    return Effort.MODERATE


def estimated_time_for(rule_id: str) -> str:
    if rule_id in QUICK_TIME_IDS:
        return QUICK_TIME
    if rule_id in MODERATE_TIME_IDS:
        return MODERATE_TIME
    return DEFAULT_TIME


def ranking_impact_for(severity: str) -> str:
    return RANKING_IMPACT.get(severity, DEFAULT_RANKING_IMPACT)


def why_for(rule_id: str, fallback: str) -> str:
    return WHY.get(rule_id, fallback)


def resources_for(rule_id: str, category: str) -> list[Resource]:
    resources = []
    if category == Category.META:
        resources.append(META_RESOURCE)
    if category == Category.TECHNICAL:
        resources.append(TECHNICAL_RESOURCE)
    if "readability" in rule_id:
        resources.append(READABILITY_RESOURCE)
    return resources


def example_for(rule_id: str, metadata: dict[str, Any]) -> Optional[Example]:
    """Curated before/after text for a handful of rules; None for the rest."""
    url = metadata.get("url") or "https://example.com/page"
    examples = {
        "meta-title-length": Example(
            before=metadata.get("title") or "Short Title",
            after="Optimized SEO Title with Keywords | Brand Name",
        ),
        "meta-description-length": Example(
            before=metadata.get("description") or "Short description.",
            after=(
                "Comprehensive meta description that includes target keywords, provides clear "
                "value proposition, and stays within 120-160 character limit for optimal display."
            ),
        ),
        "viewport-meta": Example(
            before="<head>\n  <title>Page</title>\n</head>",
            after='<head>\n  <meta name="viewport" content="width=device-width, initial-scale=1.0">\n  <title>Page</title>\n</head>',
        ),
        "h1-exists": Example(
            before='<div class="title">Page Title</div>',
            after="<h1>Page Title</h1>",
        ),
        "canonical-url": Example(
            before="<head>\n  <title>Page</title>\n</head>",
            after=f'<head>\n  <link rel="canonical" href="{url}">\n  <title>Page</title>\n</head>',
        ),
    }
    return examples.get(rule_id)
