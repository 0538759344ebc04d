"""
Sentence and paragraph structure statistics.
"""
from __future__ import annotations

from typing import Optional

from config import (
    LONG_PARAGRAPH_WORDS,
    LONG_SENTENCE_WORDS,
    SHORT_PARAGRAPH_WORDS,
    SHORT_SENTENCE_WORDS,
)
from models import (
    DistributionBucket,
    ParagraphDetail,
    ParagraphStats,
    SentenceSample,
    SentenceStats,
    StructureAnalysis,
)
from readability.formulas import flesch_reading_ease, reading_ease_label
from readability.text import count_syllables, split_sentences, tokenize_words
from scoring.scorer import round_half_up

_SENTENCE_BUCKETS = [("1-10", 10), ("11-20", 20), ("21-30", 30), ("31+", float("inf"))]
_PARAGRAPH_BUCKETS = [("1-60", 60), ("61-120", 120), ("121-200", 200), ("200+", float("inf"))]


def analyze_structure(sentences: list[str], paragraphs: list[str], language: dict) -> StructureAnalysis:
    return StructureAnalysis(
        sentences=analyze_sentences(sentences, language),
        paragraphs=analyze_paragraphs(paragraphs, language),
    )


def analyze_sentences(sentences: list[str], language: dict) -> SentenceStats:
    lengths = [len(tokenize_words(s, language["code"])) for s in sentences]
    samples = [SentenceSample(text=s.strip(), length=n) for s, n in zip(sentences, lengths)]
    average = sum(lengths) / len(lengths) if lengths else 0.0

    return SentenceStats(
        count=len(sentences),
        average_length=round_half_up(average, 1),
        median_length=median(lengths),
        longest_sentence=_extreme(samples, longest=True),
        shortest_sentence=_extreme(samples, longest=False),
        long_sentences=[s for s in samples if s.length > LONG_SENTENCE_WORDS],
        short_sentences=[s for s in samples if s.length <= SHORT_SENTENCE_WORDS],
        distribution=length_distribution(lengths, _SENTENCE_BUCKETS),
    )


def analyze_paragraphs(paragraphs: list[str], language: dict) -> ParagraphStats:
    details = []

    for index, paragraph in enumerate(paragraphs, start=1):
        words = tokenize_words(paragraph, language["code"])
        sentences = split_sentences(paragraph)
        syllables, _ = count_syllables(words, language)
        ease = flesch_reading_ease(len(words) or 1, len(sentences) or 1, syllables or 1, language)

        average = len(words) / len(sentences) if words and sentences else 0.0
        details.append(ParagraphDetail(
            index=index,
            text=paragraph.strip(),
            words=len(words),
            sentences=len(sentences),
            average_sentence_length=round_half_up(average, 1),
            reading_ease=round_half_up(ease, 1),
            label=reading_ease_label(ease),
        ))

    count = len(details)
    return ParagraphStats(
        count=len(paragraphs),
        average_words=round_half_up(sum(d.words for d in details) / count, 1) if count else 0.0,
        average_sentences=round_half_up(sum(d.sentences for d in details) / count, 1) if count else 0.0,
        long_paragraphs=[d for d in details if d.words > LONG_PARAGRAPH_WORDS],
        short_paragraphs=[d for d in details if d.words < SHORT_PARAGRAPH_WORDS],
        items=details,
        distribution=length_distribution([d.words for d in details], _PARAGRAPH_BUCKETS),
    )


def length_distribution(lengths: list[int], buckets: list[tuple[str, float]]) -> list[DistributionBucket]:
    """Each length lands in the first bucket whose upper bound it does not exceed."""
    remaining = list(lengths)
    out = []
    for label, upper in buckets:
        out.append(DistributionBucket(range=label, count=sum(1 for n in remaining if n <= upper)))
        remaining = [n for n in remaining if n > upper]
    return out


def median(values: list[int]) -> float:
    if not values:
        return 0
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return round_half_up((ordered[mid - 1] + ordered[mid]) / 2, 1)
    return ordered[mid]


def _extreme(samples: list[SentenceSample], longest: bool) -> Optional[SentenceSample]:
    if not samples:
        return None
    target = max(s.length for s in samples) if longest else min(s.length for s in samples)
    return next(s for s in samples if s.length == target)
