"""
Readability rules: paragraph and sentence length, Flesch score, list usage.
"""
from __future__ import annotations

import re

from config import (
    FLESCH_TARGET_MAX,
    FLESCH_TARGET_MIN,
    FLESCH_WARNING_MAX,
    FLESCH_WARNING_MIN,
    LIST_USAGE_WORD_COUNT,
    MAX_AVG_SENTENCE_WORDS,
    MAX_PARAGRAPH_WORDS,
    WARN_AVG_SENTENCE_WORDS,
)
from models import Category, RuleCheckResult, SEOContent, SEORule, Severity

_SENTENCE_END_RE = re.compile(r"[.!?]+")
_LIST_RE = re.compile(r"<(ul|ol)\b", re.IGNORECASE)


def check_paragraph_length(content: SEOContent) -> RuleCheckResult:
    paragraphs = content.paragraphs
    if not paragraphs:
        return RuleCheckResult(passed=True, message="No paragraphs to analyze")

    long_ones = sum(1 for p in paragraphs if len(p.split()) > MAX_PARAGRAPH_WORDS)
    if long_ones == 0:
        return RuleCheckResult(passed=True, message="All paragraphs are reasonably sized")
    return RuleCheckResult(
        passed=False,
        message=f"{long_ones} paragraph(s) exceed {MAX_PARAGRAPH_WORDS} words",
        warning=True,
    )


def check_readability_score(content: SEOContent) -> RuleCheckResult:
    score = content.readability_score or 0
    level = content.readability_level or "N/A"

    message = f"Readability score: {score:g} ({level})"
    if score < FLESCH_TARGET_MIN:
        message += " - Content may be too complex"
    elif score > FLESCH_TARGET_MAX:
        message += " - Content may be too simple"

    return RuleCheckResult(
        passed=FLESCH_TARGET_MIN <= score <= FLESCH_TARGET_MAX,
        message=message,
        warning=score < FLESCH_WARNING_MIN or score > FLESCH_WARNING_MAX,
    )


def check_sentence_length(content: SEOContent) -> RuleCheckResult:
    text = content.text
    if not text:
        return RuleCheckResult(passed=True, message="No content to analyze")

    sentences = [s for s in _SENTENCE_END_RE.split(text) if s.strip()]
    if not sentences:
        return RuleCheckResult(passed=True, message="No sentences found")

    average = len(text.split()) / len(sentences)
    return RuleCheckResult(
        passed=average <= MAX_AVG_SENTENCE_WORDS,
        message=f"Average sentence length: {average:.1f} words",
        warning=average > WARN_AVG_SENTENCE_WORDS,
    )


def check_list_usage(content: SEOContent) -> RuleCheckResult:
    has_lists = bool(_LIST_RE.search(content.html or ""))
    needs_lists = content.word_count > LIST_USAGE_WORD_COUNT

    if has_lists:
        message = "Lists used for better content structure"
    elif needs_lists:
        message = "Consider using lists to organize information"
    else:
        message = "No lists needed for short content"

    return RuleCheckResult(
        passed=not needs_lists or has_lists,
        message=message,
        warning=needs_lists and not has_lists,
    )


RULES: tuple[SEORule, ...] = (
    SEORule(
        id="paragraph-length",
        category=Category.READABILITY,
        severity=Severity.LOW,
        weight=3,
        title="Paragraph Length",
        description="Paragraphs should be reasonably sized for readability",
        recommendations=(
            "Keep paragraphs under 150 words for better readability",
            "Break long paragraphs into smaller chunks",
            "Use bullet points or lists for long content",
        ),
        check=check_paragraph_length,
    ),
    SEORule(
        id="readability-score",
        category=Category.READABILITY,
        severity=Severity.MEDIUM,
        weight=5,
        title="Content Readability",
        description="Content should be easily readable (Flesch Reading Ease)",
        recommendations=(
            "Aim for a Flesch Reading Ease score of 60-80",
            "Use shorter sentences for better readability",
            "Avoid complex vocabulary when simpler words work",
            "Write for your target audience level",
        ),
        check=check_readability_score,
    ),
    SEORule(
        id="sentence-length",
        category=Category.READABILITY,
        severity=Severity.LOW,
        weight=3,
        title="Sentence Length",
        description="Sentences should be concise and easy to read",
        recommendations=(
            "Keep average sentence length under 20 words",
            "Mix short and long sentences for better flow",
            "Break complex sentences into simpler ones",
        ),
        check=check_sentence_length,
    ),
    SEORule(
        id="list-usage",
        category=Category.READABILITY,
        severity=Severity.LOW,
        weight=2,
        title="List Elements Usage",
        description="Check for proper use of lists for better readability",
        recommendations=(
            "Use bullet points or numbered lists for sequential information",
            "Break down complex information into lists",
            "Lists improve scannability and readability",
        ),
        check=check_list_usage,
    ),
)
