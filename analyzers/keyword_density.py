"""
Keyword density helpers.

keyword_pattern() is the single definition of "a keyword occurs in text";
density, distribution, the keyword rules and keyword suggestions all count
through it so their numbers agree.
"""
from __future__ import annotations

import logging
import re
from typing import Union

from config import KEYWORD_DENSITY_MAX, KEYWORD_DENSITY_MIN
from errors import ValidationError
from models import (
    DensityAnalysis,
    DensityRecommendation,
    DensityResult,
    KeywordDensity,
    KeywordPosition,
    SectionDistribution,
)
from parsing.html_parser import parse
from scoring.scorer import round_half_up

logger = logging.getLogger(__name__)

_SEPARATORS_RE = re.compile(r"[-_/]+")
_REGEX_SPECIALS_RE = re.compile(r"[.*+?^${}()|\[\]\\]")

_SECTIONS = ["Introduction", "Early Content", "Middle Content", "Conclusion"]


def normalize_text(text: str) -> str:
    return _SEPARATORS_RE.sub(" ", text.lower())


def normalize_keyword(keyword: str) -> str:
    return " ".join(normalize_text(keyword).split())


def keyword_pattern(keyword: str) -> re.Pattern:
    """
    Phrases match with flexible whitespace between their words, single words
    with plain word boundaries. Word boundaries are Unicode-aware, so Greek
    keywords match the same way Latin ones do.
    """
    normalized = normalize_keyword(keyword)
    escaped = _REGEX_SPECIALS_RE.sub(lambda m: "\\" + m.group(0), normalized)
    if " " in normalized:
        escaped = re.sub(r"\s+", r"\\s+", escaped)
    return re.compile(rf"\b{escaped}\b", re.IGNORECASE)


def count_occurrences(text: str, keyword: str) -> int:
    if not text or not normalize_keyword(keyword):
        return 0
    return len(keyword_pattern(keyword).findall(normalize_text(text)))


def calculate_keyword_density(text: str, keyword: str) -> KeywordDensity:
    if not text or not keyword or not normalize_keyword(keyword):
        return KeywordDensity(keyword=keyword or "")

    word_count = len(text.split())
    count = count_occurrences(text, keyword)
    keyword_words = len(normalize_keyword(keyword).split())
    density = count * keyword_words / word_count * 100 if word_count else 0.0

    return KeywordDensity(
        keyword=keyword,
        count=count,
        density=round_half_up(density, 2),
        word_count=word_count,
    )


def calculate_all_keyword_densities(text: str, keywords: list[str]) -> list[KeywordDensity]:
    return [calculate_keyword_density(text, kw) for kw in keywords]


def density_status(density: float) -> str:
    if KEYWORD_DENSITY_MIN <= density <= KEYWORD_DENSITY_MAX:
        return "optimal"
    if density < KEYWORD_DENSITY_MIN:
        return "underused"
    return "overused"


def section_counts(text: str, keyword: str) -> list[int]:
    """Occurrences of keyword in each quarter of text (by character offset)."""
    size = len(text) // 4
    bounds = [(0, size), (size, size * 2), (size * 2, size * 3), (size * 3, len(text))]
    return [count_occurrences(text[start:end], keyword) for start, end in bounds]


# ── Detailed analysis ─────────────────────────────────────────────────────────

def analyze_keyword_density(
    content: str,
    keywords: Union[list[str], str],
) -> DensityAnalysis:
    """
    Per-keyword density with status, positions, a four-section distribution
    and increase/decrease/maintain advice.
    Raises ValidationError when there are no keywords or no content.
    """
    parsed = parse(content)
    text = parsed.text or content or ""

    if isinstance(keywords, str):
        keyword_list = [k.strip() for k in keywords.split(",") if k.strip()]
    else:
        keyword_list = [k.strip() for k in keywords if k and k.strip()]

    if not keyword_list:
        raise ValidationError("No keywords provided for density analysis")

    word_count = parsed.word_count
    if word_count == 0:
        raise ValidationError("No content to analyze")

    results = [_density_result(text, kw, word_count) for kw in keyword_list]
    distribution = _distribution(text, keyword_list)
    recommendations = [_density_recommendation(r) for r in results]

    summary = {
        "optimal": sum(1 for r in results if r.is_optimal),
        "underused": sum(1 for r in results if r.status == "underused"),
        "overused": sum(1 for r in results if r.status == "overused"),
    }
    logger.debug(
        "Density analysis: %d optimal, %d underused, %d overused",
        summary["optimal"], summary["underused"], summary["overused"],
    )

    return DensityAnalysis(
        total_words=word_count,
        total_keywords=len(keyword_list),
        density_results=results,
        distribution=distribution,
        recommendations=recommendations,
        summary=summary,
    )


def _density_result(text: str, keyword: str, total_words: int) -> DensityResult:
    normalized_text = normalize_text(text)
    pattern = keyword_pattern(keyword)
    matches = list(pattern.finditer(normalized_text))
    keyword_words = len(normalize_keyword(keyword).split())

    density = len(matches) * keyword_words / total_words * 100 if total_words else 0.0
    density = round_half_up(density, 2)
    status = density_status(density)

    positions = [
        KeywordPosition(index=m.start(), percentage=m.start() / len(text) * 100)
        for m in matches
    ]

    return DensityResult(
        keyword=keyword,
        count=len(matches),
        density=density,
        status=status,
        is_optimal=status == "optimal",
        positions=positions,
        type="phrase" if keyword_words > 1 else "word",
    )


def _distribution(text: str, keywords: list[str]) -> list[SectionDistribution]:
    per_keyword = {kw: section_counts(text, kw) for kw in keywords}
    out = []
    for idx, name in enumerate(_SECTIONS):
        counts = {kw: per_keyword[kw][idx] for kw in keywords}
        out.append(SectionDistribution(
            section=name,
            total_keywords=sum(counts.values()),
            keyword_counts=counts,
        ))
    return out


def _density_recommendation(result: DensityResult) -> DensityRecommendation:
    if result.status == "underused":
        return DensityRecommendation(
            type="warning",
            keyword=result.keyword,
            message=f'"{result.keyword}" is underused ({result.density}%). Try to use it more naturally in your content.',
            action="increase",
        )
    if result.status == "overused":
        return DensityRecommendation(
            type="critical",
            keyword=result.keyword,
            message=f'"{result.keyword}" is overused ({result.density}%). This may be considered keyword stuffing.',
            action="decrease",
        )
    return DensityRecommendation(
        type="success",
        keyword=result.keyword,
        message=f'"{result.keyword}" has optimal density ({result.density}%).',
        action="maintain",
    )
