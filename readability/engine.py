"""
ReadabilityEngine: six readability formulas, structure stats and guidance
for English or Greek text.

analyze() never raises on content. Empty or unusable input returns the same
fully-shaped result with zero values, is_insufficient=True and the reason in
meta.warnings.
"""
from __future__ import annotations

import logging
import time
from dataclasses import asdict
from typing import Any

from config import MIN_SENTENCES
from models import (
    CompositeScore,
    LanguageGuidance,
    ReadabilityMeta,
    ReadabilityResult,
    ReadabilitySummary,
    ReadabilityTotals,
    ReadingLevels,
    StructureAnalysis,
)
from readability.formulas import build_composite_score, calculate_formulas, score_color
from readability.guidance import (
    EDUCATION_STAGES,
    build_summary,
    collect_warnings,
    determine_reading_levels,
    generate_dynamic_guidance,
    generate_recommendations,
    language_notes,
)
from readability.structure import analyze_structure
from readability.text import (
    collect_paragraphs,
    count_syllables,
    extract_text,
    get_language_config,
    split_sentences,
    tokenize_words,
    vocabulary_richness,
)
from scoring.scorer import round_half_up

logger = logging.getLogger(__name__)


class ReadabilityEngine:
    """Stateless; one instance can serve any number of concurrent analyses."""

    def analyze(self, content: str, language: str = "en") -> ReadabilityResult:
        started = time.perf_counter()
        lang = get_language_config(language)

        raw = content if isinstance(content, str) else ""
        if not raw.strip():
            return self._empty_result(lang, started, "No content provided")

        parsed, text = extract_text(raw)
        if not text:
            return self._empty_result(lang, started, "Unable to extract text from content")

        words = tokenize_words(text, lang["code"])
        sentences = split_sentences(text)
        paragraphs = collect_paragraphs(parsed, raw)

        if not words or not sentences:
            return self._empty_result(lang, started, "Insufficient textual content")

        characters = len("".join(text.split()))
        syllables, complex_words = count_syllables(words, lang)

        totals = ReadabilityTotals(
            words=len(words),
            sentences=len(sentences),
            paragraphs=len(paragraphs),
            characters=characters,
            syllables=syllables,
            complex_words=complex_words,
            average_sentence_length=round_half_up(len(words) / len(sentences), 2),
            average_syllables_per_word=round_half_up(syllables / len(words), 2),
            complex_word_ratio=round_half_up(complex_words / len(words), 3),
            vocabulary_richness=round_half_up(vocabulary_richness(words), 3),
        )

        formulas = calculate_formulas(
            words=len(words),
            sentences=len(sentences),
            syllables=syllables,
            complex_words=complex_words,
            characters=characters,
            language=lang,
        )
        composite = build_composite_score(formulas, totals.words, lang)
        structure = analyze_structure(sentences, paragraphs, lang)
        recommendations = generate_recommendations(totals, formulas, structure, lang)
        levels = determine_reading_levels(formulas, lang)
        summary = build_summary(totals, composite, levels, lang)
        warnings = collect_warnings(totals, structure, formulas, lang)

        meta = ReadabilityMeta(
            language=lang["code"],
            language_name=lang["name"],
            processing_time_ms=_elapsed_ms(started),
            is_insufficient=totals.words < lang["min_words"] or totals.sentences < MIN_SENTENCES,
            warnings=warnings,
        )
        logger.debug(
            "Readability (%s): %d words, composite %.1f in %.1f ms",
            lang["code"], totals.words, composite.score, meta.processing_time_ms,
        )

        return ReadabilityResult(
            meta=meta,
            totals=totals,
            composite_score=composite,
            formulas=formulas,
            structure=structure,
            recommendations=recommendations,
            language_guidance=_static_guidance(lang),
            reading_levels=levels,
            summary=summary,
        )

    # ── Narrow views ──────────────────────────────────────────────────────────

    def analyze_overview(self, content: str, language: str = "en") -> dict[str, Any]:
        full = asdict(self.analyze(content, language))
        return _pick(full, "meta", "composite_score", "formulas", "totals", "summary")

    def analyze_structure(self, content: str, language: str = "en") -> dict[str, Any]:
        full = asdict(self.analyze(content, language))
        return {
            "meta": full["meta"],
            "structure": full["structure"],
            "totals": _pick(full["totals"], "words", "sentences", "paragraphs", "average_sentence_length"),
        }

    def analyze_reading_levels(self, content: str, language: str = "en") -> dict[str, Any]:
        full = asdict(self.analyze(content, language))
        return {
            "meta": full["meta"],
            "reading_levels": full["reading_levels"],
            "composite_score": _pick(full["composite_score"], "grade_level", "label"),
            "formulas": [_pick(f, "id", "label", "grade_level", "grade_value") for f in full["formulas"]],
        }

    def analyze_improvements(self, content: str, language: str = "en") -> dict[str, Any]:
        full = asdict(self.analyze(content, language))
        return {
            "meta": full["meta"],
            "recommendations": full["recommendations"],
            "composite_score": _pick(full["composite_score"], "score", "label"),
            "totals": _pick(full["totals"], "words", "complex_word_ratio", "average_sentence_length"),
            "structure": {
                "sentences": _pick(full["structure"]["sentences"], "long_sentences"),
                "paragraphs": _pick(full["structure"]["paragraphs"], "long_paragraphs"),
            },
        }

    def analyze_language_guidance(self, content: str, language: str = "en") -> dict[str, Any]:
        result = self.analyze(content, language)
        guidance = generate_dynamic_guidance(
            result.totals, result.structure, result.composite_score, result.meta.language,
        )
        full = asdict(result)
        sentences = full["structure"]["sentences"]
        paragraphs = full["structure"]["paragraphs"]
        return {
            "meta": full["meta"],
            "composite_score": _pick(full["composite_score"], "score", "label", "grade_level"),
            "totals": _pick(
                full["totals"], "words", "sentences", "paragraphs",
                "average_sentence_length", "complex_word_ratio", "vocabulary_richness",
            ),
            "language_guidance": {"language": result.meta.language_name, **asdict(guidance)},
            "structure": {
                "sentences": {
                    "count": sentences["count"],
                    "average_length": sentences["average_length"],
                    "long_sentences": sentences["long_sentences"][:3],
                },
                "paragraphs": {
                    "count": paragraphs["count"],
                    "average_words": paragraphs["average_words"],
                    "long_paragraphs": paragraphs["long_paragraphs"][:3],
                },
            },
        }

    def analyze_live_score(self, content: str, language: str = "en") -> dict[str, Any]:
        full = asdict(self.analyze(content, language))
        return {
            "meta": _pick(full["meta"], "timestamp", "language", "is_insufficient", "processing_time_ms"),
            "composite_score": full["composite_score"],
            "totals": _pick(full["totals"], "words", "sentences", "average_sentence_length"),
            "summary": full["summary"],
        }

    # ── Empty shape ───────────────────────────────────────────────────────────

    def _empty_result(self, lang: dict, started: float, reason: str) -> ReadabilityResult:
        logger.debug("Readability returned empty result: %s", reason)
        return ReadabilityResult(
            meta=ReadabilityMeta(
                language=lang["code"],
                language_name=lang["name"],
                processing_time_ms=_elapsed_ms(started),
                is_insufficient=True,
                warnings=[reason],
            ),
            totals=ReadabilityTotals(),
            composite_score=CompositeScore(
                score=0.0,
                label="Insufficient Data",
                color=score_color(0),
                grade_level="N/A",
                reading_time_minutes=0,
            ),
            formulas=[],
            structure=StructureAnalysis(),
            recommendations=[],
            language_guidance=_static_guidance(lang),
            reading_levels=ReadingLevels(
                recommended_grade=0.0,
                recommended_label="N/A",
                education_stages=[dict(stage) for stage in EDUCATION_STAGES],
                audience_fit=[],
            ),
            summary=ReadabilitySummary(language=lang["name"]),
        )


def _static_guidance(lang: dict) -> LanguageGuidance:
    return LanguageGuidance(
        language=lang["name"],
        notes=language_notes(lang),
        rules=[dict(rule) for rule in lang["guidance"]],
    )


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def _pick(data: dict, *keys: str) -> dict:
    return {key: data[key] for key in keys}
