"""
The six readability formulas and the composite score built from them.

Flesch Reading Ease is the only "ease" formula (higher is easier); the other
five report a US school grade (higher is harder). Grades are normalised onto
the same 0-100 "higher is easier" scale before being blended.
"""
from __future__ import annotations

import math

from config import EASE_WEIGHT, GRADE_WEIGHT
from models import CompositeScore, FormulaResult
from scoring.scorer import round_half_up

EASE_ID = "fleschReadingEase"
GRADE_IDS = [
    "fleschKincaid",
    "gunningFog",
    "smog",
    "colemanLiau",
    "automatedReadabilityIndex",
]


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


# ── Labels ────────────────────────────────────────────────────────────────────

def reading_ease_label(score: float) -> str:
    if score >= 90:
        return "Very Easy"
    if score >= 80:
        return "Easy"
    if score >= 70:
        return "Fairly Easy"
    if score >= 60:
        return "Standard"
    if score >= 50:
        return "Fairly Difficult"
    if score >= 30:
        return "Difficult"
    return "Very Difficult"


def reading_ease_to_grade(score: float) -> int:
    if score >= 90:
        return 5
    if score >= 80:
        return 6
    if score >= 70:
        return 7
    if score >= 60:
        return 9
    if score >= 50:
        return 10
    if score >= 30:
        return 12
    return 16


def grade_label(grade: float) -> str:
    if grade <= 0:
        return "Early Readers"
    if grade < 1:
        return "Kindergarten"
    if grade < 6:
        return "Elementary"
    if grade < 9:
        return "Middle School"
    if grade < 12:
        return "High School"
    if grade < 16:
        return "College"
    return "Graduate"


def grade_interpretation(grade: float) -> str:
    if grade <= 6:
        return "Accessible to most readers"
    if grade <= 10:
        return "Suitable for secondary education"
    if grade <= 14:
        return "Appropriate for college audiences"
    return "Challenging academic reading"


def normalize_grade(grade: float) -> float:
    """Map a grade (clamped to 0-18) onto 0-100, where 100 is easiest."""
    return clamp(100 - clamp(grade, 0, 18) * 5, 0, 100)


def score_color(score: float) -> str:
    if score >= 70:
        return "#10b981"
    if score >= 55:
        return "#3b82f6"
    if score >= 40:
        return "#f59e0b"
    return "#ef4444"


def composite_label(score: float) -> str:
    if score >= 75:
        return "Excellent"
    if score >= 60:
        return "Good"
    if score >= 45:
        return "Needs Attention"
    return "Critical"


# ── Formulas ──────────────────────────────────────────────────────────────────

def flesch_reading_ease(words: int, sentences: int, syllables: int, language: dict) -> float:
    """Clamped to [-10, 120]; callers pass non-zero words and sentences."""
    constants = language["flesch"]
    score = (
        constants["base"]
        - constants["sentence"] * (words / sentences)
        - constants["syllable"] * (syllables / words)
    )
    return clamp(score, -10, 120)


def calculate_formulas(
    words: int,
    sentences: int,
    syllables: int,
    complex_words: int,
    characters: int,
    language: dict,
) -> list[FormulaResult]:
    safe_sentences = sentences or 1
    safe_words = words or 1

    ease = flesch_reading_ease(safe_words, safe_sentences, syllables, language)

    flesch_kincaid = 0.39 * (words / safe_sentences) + 11.8 * (syllables / safe_words) - 15.59
    gunning_fog = 0.4 * (words / safe_sentences + 100 * (complex_words / safe_words))

    smog_base = complex_words * (30 / safe_sentences)
    smog = 1.043 * math.sqrt(smog_base) + 3.1291 if smog_base > 0 else 0.0

    letters_per_100 = characters / safe_words * 100
    sentences_per_100 = safe_sentences / safe_words * 100
    coleman_liau = 0.0588 * letters_per_100 - 0.296 * sentences_per_100 - 15.8

    ari = 4.71 * (characters / safe_words) + 0.5 * (words / safe_sentences) - 21.43

    ease_grade = reading_ease_to_grade(ease)
    return [
        FormulaResult(
            id=EASE_ID,
            label="Flesch Reading Ease",
            score=round_half_up(ease, 1),
            normalized=clamp(ease, 0, 100),
            grade_level=grade_label(ease_grade),
            grade_value=ease_grade,
            interpretation=reading_ease_label(ease),
            color=score_color(ease),
            type="ease",
        ),
        grade_metric("fleschKincaid", "Flesch-Kincaid Grade", flesch_kincaid),
        grade_metric("gunningFog", "Gunning Fog Index", gunning_fog),
        grade_metric("smog", "SMOG Index", smog),
        grade_metric("colemanLiau", "Coleman-Liau Index", coleman_liau),
        grade_metric("automatedReadabilityIndex", "Automated Readability Index", ari),
    ]


def grade_metric(metric_id: str, label: str, raw: float) -> FormulaResult:
    normalized = normalize_grade(raw)
    return FormulaResult(
        id=metric_id,
        label=label,
        score=round_half_up(raw, 2),
        normalized=normalized,
        grade_level=grade_label(raw),
        grade_value=round_half_up(max(raw, 0), 2),
        interpretation=grade_interpretation(raw),
        color=score_color(100 - normalized),
        type="grade",
    )


def build_composite_score(formulas: list[FormulaResult], word_count: int, language: dict) -> CompositeScore:
    """EASE_WEIGHT x normalised ease + GRADE_WEIGHT x mean normalised grade."""
    ease = next((f for f in formulas if f.type == "ease"), None)
    grades = [normalize_grade(f.score) for f in formulas if f.type == "grade"]
    average_grade = sum(grades) / len(grades) if grades else 0.0

    if ease is not None:
        score = EASE_WEIGHT * ease.normalized + GRADE_WEIGHT * average_grade
    else:
        score = average_grade

    return CompositeScore(
        score=round_half_up(score, 1),
        label=composite_label(score),
        color=score_color(score),
        grade_level=grade_label(reading_ease_to_grade(score)),
        reading_time_minutes=max(1, int(round_half_up(word_count / language["reading_wpm"]))),
    )
