"""
Keyword placement rules: opening paragraph, stuffing, image alt text and
spread across the page. All counting goes through analyzers.keyword_density.
"""
from __future__ import annotations

import re
from collections import Counter

from analyzers.keyword_density import (
    calculate_keyword_density,
    count_occurrences,
    normalize_text,
    section_counts,
)
from analyzers.keyword_suggestions import STOPWORDS
from config import (
    KEYWORD_MIN_SECTIONS,
    KEYWORD_STUFFING_DENSITY,
    KEYWORD_STUFFING_MIN_WORDS,
)
from models import Category, RuleCheckResult, SEOContent, SEORule, Severity
from scoring.scorer import round_half_up

_LETTER_WORD_RE = re.compile(r"[^\W\d_]{4,}")
_OPENING_WORDS = 100


def _opening_text(content: SEOContent) -> str:
    if content.paragraphs:
        return content.paragraphs[0]
    return " ".join(content.text.split()[:_OPENING_WORDS])


def check_keyword_in_opening(content: SEOContent) -> RuleCheckResult:
    if not content.keywords:
        return RuleCheckResult(passed=True, message="No target keywords defined")

    opening = _opening_text(content)
    if not opening:
        return RuleCheckResult(passed=False, message="No content to analyze")

    found = [kw for kw in content.keywords if count_occurrences(opening, kw) > 0]
    if found:
        return RuleCheckResult(
            passed=True,
            message=f"Keyword(s) found in opening paragraph: {', '.join(found)}",
        )
    return RuleCheckResult(passed=False, message="No target keywords found in the opening paragraph")


def check_keyword_stuffing(content: SEOContent) -> RuleCheckResult:
    text = content.text
    if content.word_count == 0:
        return RuleCheckResult(passed=True, message="No content to analyze")

    if content.keywords:
        stuffed = [
            d for d in (calculate_keyword_density(text, kw) for kw in content.keywords)
            if d.density > KEYWORD_STUFFING_DENSITY
        ]
        if stuffed:
            detail = ", ".join(f"{d.keyword} ({d.density:.2f}%)" for d in stuffed)
            return RuleCheckResult(
                passed=False,
                message=f"Keyword stuffing detected: {detail}",
                warning=True,
            )
        return RuleCheckResult(passed=True, message="No keyword stuffing detected")

    if content.word_count < KEYWORD_STUFFING_MIN_WORDS:
        return RuleCheckResult(passed=True, message="Not enough content to assess keyword stuffing")

    counts = Counter(
        w for w in _LETTER_WORD_RE.findall(normalize_text(text)) if w not in STOPWORDS
    )
    if counts:
        word, count = counts.most_common(1)[0]
        share = round_half_up(count / content.word_count * 100, 2)
        if share > KEYWORD_STUFFING_DENSITY:
            return RuleCheckResult(
                passed=False,
                message=f'Word "{word}" makes up {share:.2f}% of the content',
                warning=True,
            )
    return RuleCheckResult(passed=True, message="No keyword stuffing detected")


def check_keyword_in_image_alt(content: SEOContent) -> RuleCheckResult:
    if not content.keywords:
        return RuleCheckResult(passed=True, message="No target keywords defined")
    if not content.images:
        return RuleCheckResult(passed=True, message="No images found")

    matching = sum(
        1 for img in content.images
        if any(count_occurrences(img.alt, kw) > 0 for kw in content.keywords)
    )
    if matching:
        return RuleCheckResult(passed=True, message=f"Keyword found in alt text of {matching} image(s)")
    return RuleCheckResult(passed=False, message="No target keywords found in image alt text")


def check_keyword_distribution(content: SEOContent) -> RuleCheckResult:
    keyword = content.primary_keyword
    if not keyword:
        return RuleCheckResult(passed=True, message="No target keywords defined")
    if content.word_count == 0:
        return RuleCheckResult(passed=False, message="No content to analyze")

    sections = sum(1 for n in section_counts(content.text, keyword) if n > 0)
    if sections == 0:
        return RuleCheckResult(passed=False, message="Primary keyword does not appear in the content")
    return RuleCheckResult(
        passed=sections >= KEYWORD_MIN_SECTIONS,
        message=f"Primary keyword appears in {sections} of 4 content sections",
    )


RULES: tuple[SEORule, ...] = (
    SEORule(
        id="keyword-in-first-paragraph",
        category=Category.KEYWORDS,
        severity=Severity.MEDIUM,
        weight=5,
        title="Keyword in Opening Paragraph",
        description="Target keywords should appear early in the content",
        recommendations=(
            "Mention your primary keyword within the first 100 words",
            "Open with a sentence that states the page topic clearly",
        ),
        check=check_keyword_in_opening,
    ),
    SEORule(
        id="keyword-stuffing",
        category=Category.KEYWORDS,
        severity=Severity.HIGH,
        weight=6,
        title="Keyword Stuffing",
        description="No keyword should make up more than 5% of the content",
        recommendations=(
            "Reduce repeated use of the same keyword",
            "Replace some repetitions with synonyms or related terms",
            "Write for readers first, search engines second",
        ),
        check=check_keyword_stuffing,
    ),
    SEORule(
        id="keyword-in-image-alt",
        category=Category.KEYWORDS,
        severity=Severity.LOW,
        weight=3,
        title="Keywords in Image Alt Text",
        description="At least one image alt text should mention a target keyword",
        recommendations=(
            "Describe the main image using the primary keyword where it fits",
            "Keep alt text accurate; do not force keywords into unrelated images",
        ),
        check=check_keyword_in_image_alt,
    ),
    SEORule(
        id="keyword-distribution",
        category=Category.KEYWORDS,
        severity=Severity.LOW,
        weight=3,
        title="Keyword Distribution",
        description="The primary keyword should be spread across the content",
        recommendations=(
            "Use the primary keyword in the introduction, body and conclusion",
            "Avoid clustering all keyword mentions in one section",
        ),
        check=check_keyword_distribution,
    ),
)
