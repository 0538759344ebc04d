"""
Score arithmetic shared by the rule engine and the recommendation engine.

Scoring model:
- Every rule that ran adds its weight to the maximum; passing rules add it to the score.
- percentage = score / max * 100, rounded half-up; a zero maximum gives 0.
- Grades are banded on the percentage by GRADE_BANDS. grade_for() is the only
  place the banding lives.
"""
from __future__ import annotations

import math

from config import FAILING_GRADE, GRADE_BANDS


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round like a person would: 2.5 -> 3, -2.5 -> -2 (no banker's rounding)."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def compute_percentage(score: float, max_score: float) -> int:
    if max_score <= 0:
        return 0
    return int(round_half_up(score / max_score * 100))


def grade_for(percentage: float) -> str:
    for threshold, grade in GRADE_BANDS:
        if percentage >= threshold:
            return grade
    return FAILING_GRADE


def score_label(percentage: float) -> str:
    if percentage >= 90:
        return "Excellent"
    elif percentage >= 75:
        return "Good"
    elif percentage >= 50:
        return "Needs Work"
    else:
        return "Poor"
