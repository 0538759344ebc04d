"""
SEOAnalyzer: validates input, parses the page, runs readability, the rule
catalog and the recommendation engine, and returns one AnalysisResults.

Each call builds its own results; the only shared state is the read-only
rule catalog, so one analyzer can serve concurrent analyses.
"""
from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Union

from analyzers.keyword_density import calculate_all_keyword_densities
from analyzers.rule_engine import evaluate
from config import DEFAULT_LANGUAGE
from errors import ValidationError
from models import AnalysisResults, ParsedContent, SEOContent, SEORule
from parsing.html_parser import parse
from readability.engine import ReadabilityEngine
from readability.formulas import EASE_ID
from recommendations.engine import RecommendationEngine
from rules.catalog import get_all_rules

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[dict], None]


def validate_input(html: str, title: str, description: str) -> None:
    if not (html or title or description):
        raise ValidationError("At least one content field (html, title, or description) is required")


def parse_keywords(keywords: Union[str, list[str], None]) -> list[str]:
    """Comma-separated string or list -> trimmed, lower-cased, non-empty keywords."""
    if not keywords:
        return []
    items = keywords.split(",") if isinstance(keywords, str) else keywords
    return [k.strip().lower() for k in items if isinstance(k, str) and k.strip()]


def build_metadata(content: SEOContent) -> dict:
    parsed = content.parsed
    return {
        "title": content.title,
        "description": content.description,
        "keywords": content.keywords,
        "language": content.language,
        "url": content.url,
        "word_count": parsed.word_count,
        "character_count": parsed.character_count,
        "headings": parsed.headings,
        "images": parsed.images,
        "links": parsed.links,
        "meta_tags": parsed.meta_tags,
        "structural_elements": parsed.structural_elements,
    }


class SEOAnalyzer:

    def __init__(self, language: str = DEFAULT_LANGUAGE, rules: Optional[list[SEORule]] = None):
        self.language = language
        self.rules = list(rules) if rules is not None else get_all_rules()
        self.readability_engine = ReadabilityEngine()
        self.recommendation_engine = RecommendationEngine(language)

    def set_language(self, language: str) -> None:
        self.language = language
        self.recommendation_engine.set_language(language)

    def get_language(self) -> str:
        return self.language

    def analyze(
        self,
        html: str = "",
        title: str = "",
        description: str = "",
        keywords: Union[str, list[str], None] = "",
        language: Optional[str] = None,
        url: str = "",
        progress_callback: Optional[ProgressCallback] = None,
    ) -> AnalysisResults:
        """
        Score one page. Raises ValidationError when html, title and
        description are all empty; every other problem is reported in-band.
        """
        started = datetime.now(timezone.utc)
        html, title, description, url = (v if isinstance(v, str) else "" for v in (html, title, description, url))
        validate_input(html, title, description)
        language = language or self.language

        _emit(progress_callback, "Parsing content…", 10)
        parsed = parse(html, url) if html else ParsedContent.empty()
        logger.debug(
            "Parsed %d words, %d headings, %d images, %d links",
            parsed.word_count,
            sum(len(v) for v in parsed.headings.values()),
            len(parsed.images),
            len(parsed.links),
        )

        content = SEOContent(
            html=html,
            title=title,
            description=description,
            keywords=parse_keywords(keywords),
            language=language,
            url=url,
            parsed=parsed,
        )

        _emit(progress_callback, "Measuring readability…", 30)
        readable = html if html.strip() else "\n\n".join(part for part in (title, description) if part)
        readability = self.readability_engine.analyze(readable, language)
        ease = readability.formula(EASE_ID)
        if ease is not None:
            content.readability_score = ease.score
            content.readability_level = ease.interpretation

        _emit(progress_callback, "Running SEO rules…", 50)
        results = evaluate(content, self.rules)
        results.started_at = started
        results.metadata = build_metadata(content)
        results.keyword_densities = calculate_all_keyword_densities(content.text, content.keywords)
        results.readability = readability

        _emit(progress_callback, "Building recommendations…", 85)
        results.enhanced_recommendations = self.recommendation_engine.generate_recommendations(
            results, self.rules,
        )
        results.finished_at = datetime.now(timezone.utc)

        _emit(progress_callback, "Analysis complete.", 100)
        logger.info(
            "SEO analysis complete: %d%% (%s), %d passed, %d failed, %d rule error(s)",
            results.percentage, results.grade, results.passed_rules,
            results.failed_rules, len(results.rule_errors),
        )
        return results

    async def analyze_async(self, **kwargs) -> AnalysisResults:
        """analyze() on a worker thread, for callers already inside an event loop."""
        return await asyncio.to_thread(self.analyze, **kwargs)


def _emit(callback: Optional[ProgressCallback], message: str, pct: int) -> None:
    if callback:
        try:
            callback({"message": message, "pct": pct})
        except Exception:
            logger.debug("Progress callback failed", exc_info=True)
