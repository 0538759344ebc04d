"""
Content rules: length, headings, keyword density, images and duplication.
"""
from __future__ import annotations

import math

from analyzers.keyword_density import calculate_keyword_density, count_occurrences
from config import (
    GOOD_WORD_COUNT,
    KEYWORD_DENSITY_LOW_WARNING,
    KEYWORD_DENSITY_MAX,
    KEYWORD_DENSITY_MIN,
    MIN_WORD_COUNT,
    TEMPORAL_WORDS,
    WORDS_PER_IMAGE,
)
from models import Category, RuleCheckResult, SEOContent, SEORule, Severity


def check_word_count(content: SEOContent) -> RuleCheckResult:
    words = content.word_count
    message = f"Content has {words} words"
    if words < MIN_WORD_COUNT:
        message += f". Recommended minimum: {MIN_WORD_COUNT} words"
    return RuleCheckResult(
        passed=words >= MIN_WORD_COUNT,
        message=message,
        warning=words < GOOD_WORD_COUNT,
    )


def check_keyword_density(content: SEOContent) -> RuleCheckResult:
    if not content.keywords:
        return RuleCheckResult(passed=True, message="No target keywords defined")
    if content.word_count == 0:
        return RuleCheckResult(passed=False, message="No content to analyze")

    result = calculate_keyword_density(content.text, content.primary_keyword)
    density = result.density
    return RuleCheckResult(
        passed=KEYWORD_DENSITY_MIN <= density <= KEYWORD_DENSITY_MAX,
        message=f"Primary keyword density: {density:.2f}% ({result.count} occurrences)",
        warning=density > KEYWORD_DENSITY_MAX or density < KEYWORD_DENSITY_LOW_WARNING,
    )


def check_h1_exists(content: SEOContent) -> RuleCheckResult:
    passed = len(content.headings.get(1, [])) > 0
    return RuleCheckResult(
        passed=passed,
        message="H1 heading is present" if passed else "H1 heading is missing",
    )


def check_heading_structure(content: SEOContent) -> RuleCheckResult:
    h1 = len(content.headings.get(1, []))
    h2 = len(content.headings.get(2, []))

    if h1 == 0:
        message = "Missing H1 heading"
    elif h1 > 1:
        message = f"Multiple H1 headings found ({h1}). Should have exactly one"
    elif h2 == 0:
        message = "No H2 headings found. Add subheadings to structure content"
    else:
        message = f"Proper heading structure: 1 H1, {h2} H2 headings"

    return RuleCheckResult(passed=h1 == 1 and h2 > 0, message=message)


def check_heading_keywords(content: SEOContent) -> RuleCheckResult:
    if not content.keywords:
        return RuleCheckResult(passed=True, message="No target keywords defined")

    headings = [text for level in sorted(content.headings) for text in content.headings[level]]
    found = [
        kw for kw in content.keywords
        if any(count_occurrences(heading, kw) > 0 for heading in headings)
    ]

    if found:
        return RuleCheckResult(passed=True, message=f"Found keywords in headings: {', '.join(found)}")
    return RuleCheckResult(passed=False, message="No target keywords found in headings")


def check_image_alt_text(content: SEOContent) -> RuleCheckResult:
    images = content.images
    if not images:
        return RuleCheckResult(passed=True, message="No images found")

    missing = sum(1 for img in images if not img.alt.strip())
    if missing == 0:
        return RuleCheckResult(passed=True, message=f"All {len(images)} images have alt text")
    return RuleCheckResult(
        passed=False,
        message=f"{missing} of {len(images)} images missing alt text",
    )


def check_heading_hierarchy(content: SEOContent) -> RuleCheckResult:
    counts = {level: len(content.headings.get(level, [])) for level in range(1, 5)}

    issues = []
    if counts[3] > 0 and counts[2] == 0:
        issues.append("H3 used without H2")
    if counts[4] > 0 and counts[3] == 0:
        issues.append("H4 used without H3")

    message = (
        f"Heading hierarchy issues: {', '.join(issues)}"
        if issues else "Proper heading hierarchy maintained"
    )
    return RuleCheckResult(passed=not issues and counts[1] == 1, message=message)


def check_content_freshness(content: SEOContent) -> RuleCheckResult:
    # Informational only: always passes, warns when the copy will date
    text = content.text.lower()
    time_sensitive = any(word in text for word in TEMPORAL_WORDS)
    message = (
        "Content contains time-sensitive information - ensure regular updates"
        if time_sensitive else "No time-sensitive indicators found"
    )
    return RuleCheckResult(passed=True, message=message, warning=time_sensitive)


def check_content_uniqueness(content: SEOContent) -> RuleCheckResult:
    paragraphs = content.paragraphs
    if len(paragraphs) < 2:
        return RuleCheckResult(passed=True, message="Not enough paragraphs to analyze")

    duplicates = len(paragraphs) - len({p.lower().strip() for p in paragraphs})
    if duplicates == 0:
        return RuleCheckResult(passed=True, message="No duplicate content detected")
    return RuleCheckResult(
        passed=False,
        message=f"{duplicates} duplicate paragraph(s) found",
        warning=True,
    )


def check_multimedia(content: SEOContent) -> RuleCheckResult:
    words = content.word_count
    if words == 0:
        return RuleCheckResult(passed=True, message="No content to analyze")

    images = len(content.images)
    recommended = math.ceil(words / WORDS_PER_IMAGE)
    message = (
        "No images found. Consider adding visual content"
        if images == 0 else f"{images} image(s) found"
    )
    return RuleCheckResult(
        passed=images >= min(recommended, 1),
        message=message,
        warning=images == 0 and words > WORDS_PER_IMAGE,
    )


RULES: tuple[SEORule, ...] = (
    SEORule(
        id="content-word-count",
        category=Category.CONTENT,
        severity=Severity.HIGH,
        weight=8,
        title="Content Length",
        description="Content should have at least 300 words",
        recommendations=(
            "Aim for at least 300 words of quality content",
            "Longer content (500-1000+ words) often ranks better",
            "Focus on providing comprehensive, valuable information",
        ),
        check=check_word_count,
    ),
    SEORule(
        id="keyword-density",
        category=Category.CONTENT,
        severity=Severity.MEDIUM,
        weight=6,
        title="Keyword Density",
        description="Keywords should appear 1-3% of total words",
        recommendations=(
            "Maintain keyword density between 1-3%",
            "Use keywords naturally throughout the content",
            "Include keyword variations and synonyms",
        ),
        check=check_keyword_density,
    ),
    SEORule(
        id="h1-exists",
        category=Category.CONTENT,
        severity=Severity.HIGH,
        weight=8,
        title="H1 Heading Exists",
        description="Every page should have a main H1 heading",
        recommendations=(
            "Add a single H1 heading that states the page topic",
            "Include the primary keyword in the H1",
        ),
        check=check_h1_exists,
    ),
    SEORule(
        id="headings-structure",
        category=Category.CONTENT,
        severity=Severity.MEDIUM,
        weight=7,
        title="Heading Structure",
        description="Content should use proper heading hierarchy (H1, H2, H3)",
        recommendations=(
            "Use exactly one H1 heading per page",
            "Include H2 headings to structure your content",
            "Use heading hierarchy properly (H1 > H2 > H3)",
        ),
        check=check_heading_structure,
    ),
    SEORule(
        id="headings-keywords",
        category=Category.CONTENT,
        severity=Severity.MEDIUM,
        weight=5,
        title="Keywords in Headings",
        description="Headings should contain target keywords",
        recommendations=(
            "Include target keywords in your H1 and H2 headings",
            "Use keywords naturally in heading text",
        ),
        check=check_heading_keywords,
    ),
    SEORule(
        id="image-alt-text",
        category=Category.CONTENT,
        severity=Severity.MEDIUM,
        weight=6,
        title="Image Alt Text",
        description="All images should have descriptive alt text",
        recommendations=(
            "Add descriptive alt text to all images",
            "Include keywords in alt text when relevant",
            "Keep alt text concise and descriptive",
        ),
        check=check_image_alt_text,
    ),
    SEORule(
        id="heading-hierarchy",
        category=Category.CONTENT,
        severity=Severity.MEDIUM,
        weight=5,
        title="Heading Hierarchy",
        description="Headings should follow proper hierarchy without skipping levels",
        recommendations=(
            "Use headings in sequential order (H1 → H2 → H3)",
            "Do not skip heading levels",
            "Maintain logical document structure",
        ),
        check=check_heading_hierarchy,
    ),
    SEORule(
        id="content-freshness",
        category=Category.CONTENT,
        severity=Severity.LOW,
        weight=2,
        title="Content Structure Indicators",
        description="Check for time-sensitive content structure",
        recommendations=(
            "Update time-sensitive content regularly",
            "Add publication/update dates to content",
            "Review and refresh old content periodically",
        ),
        check=check_content_freshness,
    ),
    SEORule(
        id="content-uniqueness",
        category=Category.CONTENT,
        severity=Severity.HIGH,
        weight=7,
        title="Content Uniqueness Check",
        description="Check for repetitive or duplicate content patterns",
        recommendations=(
            "Ensure all content is unique and original",
            "Avoid copying and pasting duplicate text",
            "Use plagiarism checkers for verification",
            "Rewrite similar sections with unique content",
        ),
        check=check_content_uniqueness,
    ),
    SEORule(
        id="multimedia-content",
        category=Category.CONTENT,
        severity=Severity.LOW,
        weight=3,
        title="Multimedia Content",
        description="Content should include images or other media",
        recommendations=(
            "Include relevant images to break up text",
            "Add at least one image per 300 words of content",
            "Use charts, infographics, or screenshots when relevant",
            "Ensure all media files are optimized for web",
        ),
        check=check_multimedia,
    ),
)
