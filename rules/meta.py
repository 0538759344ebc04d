"""
Meta rules: page title and meta description presence, length and keywords.
"""
from __future__ import annotations

from analyzers.keyword_density import count_occurrences
from config import (
    DESCRIPTION_MAX_CHARS,
    DESCRIPTION_MIN_CHARS,
    TITLE_MAX_CHARS,
    TITLE_MIN_CHARS,
)
from models import Category, RuleCheckResult, SEOContent, SEORule, Severity


def _keywords_in(text: str, keywords: list[str]) -> list[str]:
    return [kw for kw in keywords if count_occurrences(text, kw) > 0]


def _length_message(label: str, length: int, low: int, high: int) -> str:
    if length == 0:
        return f"{label} is missing"
    if length < low:
        return f"{label} is too short ({length} chars). Recommended: {low}-{high} chars"
    if length > high:
        return f"{label} is too long ({length} chars). Recommended: {low}-{high} chars"
    return f"{label} length is optimal"


# ── Title ─────────────────────────────────────────────────────────────────────

def check_title_exists(content: SEOContent) -> RuleCheckResult:
    passed = bool(content.title and content.title.strip())
    return RuleCheckResult(
        passed=passed,
        message="Page title is present" if passed else "Page title is missing",
    )


def check_title_length(content: SEOContent) -> RuleCheckResult:
    length = len(content.title or "")
    in_range = TITLE_MIN_CHARS <= length <= TITLE_MAX_CHARS
    return RuleCheckResult(
        passed=in_range,
        message=_length_message("Title", length, TITLE_MIN_CHARS, TITLE_MAX_CHARS),
        warning=not in_range,
    )


def check_title_keywords(content: SEOContent) -> RuleCheckResult:
    if not content.keywords:
        return RuleCheckResult(passed=True, message="No target keywords defined")

    found = _keywords_in(content.title or "", content.keywords)
    if found:
        return RuleCheckResult(
            passed=True,
            message=f"Found {len(found)} keyword(s) in title: {', '.join(found)}",
        )
    return RuleCheckResult(passed=False, message="No target keywords found in title")


# ── Description ───────────────────────────────────────────────────────────────

def check_description_exists(content: SEOContent) -> RuleCheckResult:
    passed = bool(content.description and content.description.strip())
    return RuleCheckResult(
        passed=passed,
        message="Meta description is present" if passed else "Meta description is missing",
    )


def check_description_length(content: SEOContent) -> RuleCheckResult:
    length = len(content.description or "")
    in_range = DESCRIPTION_MIN_CHARS <= length <= DESCRIPTION_MAX_CHARS
    return RuleCheckResult(
        passed=in_range,
        message=_length_message("Description", length, DESCRIPTION_MIN_CHARS, DESCRIPTION_MAX_CHARS),
        warning=not in_range,
    )


def check_description_keywords(content: SEOContent) -> RuleCheckResult:
    if not content.keywords:
        return RuleCheckResult(passed=True, message="No target keywords defined")

    found = _keywords_in(content.description or "", content.keywords)
    if found:
        return RuleCheckResult(passed=True, message=f"Found {len(found)} keyword(s) in description")
    return RuleCheckResult(passed=False, message="No target keywords found in description")


RULES: tuple[SEORule, ...] = (
    SEORule(
        id="meta-title-exists",
        category=Category.META,
        severity=Severity.CRITICAL,
        weight=10,
        title="Page Title Exists",
        description="Every page must have a title tag",
        recommendations=(
            "Add a unique, descriptive title for this page",
            "Include primary keywords in the title",
        ),
        check=check_title_exists,
    ),
    SEORule(
        id="meta-title-length",
        category=Category.META,
        severity=Severity.HIGH,
        weight=8,
        title="Page Title Length",
        description="Title should be between 30-60 characters",
        recommendations=(
            "Keep title between 30-60 characters for optimal display",
            "Titles longer than 60 chars may be truncated in search results",
        ),
        check=check_title_length,
    ),
    SEORule(
        id="meta-title-keywords",
        category=Category.META,
        severity=Severity.HIGH,
        weight=7,
        title="Keywords in Title",
        description="Title should contain target keywords",
        recommendations=(
            "Include your primary keyword near the beginning of the title",
            "Make sure keywords appear naturally in the title",
        ),
        check=check_title_keywords,
    ),
    SEORule(
        id="meta-description-exists",
        category=Category.META,
        severity=Severity.CRITICAL,
        weight=10,
        title="Meta Description Exists",
        description="Every page should have a meta description",
        recommendations=(
            "Add a compelling meta description that summarizes the page content",
            "Include a call-to-action to improve click-through rates",
        ),
        check=check_description_exists,
    ),
    SEORule(
        id="meta-description-length",
        category=Category.META,
        severity=Severity.HIGH,
        weight=8,
        title="Meta Description Length",
        description="Description should be between 120-160 characters",
        recommendations=(
            "Keep description between 120-160 characters",
            "Descriptions longer than 160 chars may be truncated in search results",
        ),
        check=check_description_length,
    ),
    SEORule(
        id="meta-description-keywords",
        category=Category.META,
        severity=Severity.MEDIUM,
        weight=6,
        title="Keywords in Description",
        description="Description should contain target keywords",
        recommendations=(
            "Include target keywords naturally in the meta description",
            "Avoid keyword stuffing - write for users, not just search engines",
        ),
        check=check_description_keywords,
    ),
)
