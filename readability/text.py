"""
Text extraction, tokenizing and syllable estimation for readability scoring.
"""
from __future__ import annotations

import re
from typing import Optional

from config import DEFAULT_LANGUAGE, LANGUAGE_CONFIG
from models import ParsedContent
from parsing.html_parser import parse, strip_html_tags

_WORD_PATTERNS = {
    "en": re.compile(r"[A-Za-zÀ-ÖØ-öø-ÿ]+"),
    "el": re.compile(r"[Α-ΩA-ZΆΈΉΊΌΎΏΪΫα-ωa-zάέήίόύώϊΐϋΰ]+"),
}

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+\s+")
_BLANK_LINE_RE = re.compile(r"\n\s*\n")
_WS_RE = re.compile(r"\s+")

_MIN_LINE_PARAGRAPH_CHARS = 20


def get_language_config(code: Optional[str]) -> dict:
    """Language table entry for code; unknown codes fall back to English."""
    return LANGUAGE_CONFIG.get((code or DEFAULT_LANGUAGE).lower(), LANGUAGE_CONFIG[DEFAULT_LANGUAGE])


def extract_text(raw: str) -> tuple[ParsedContent, str]:
    """Parse raw content and return (parsed, whitespace-collapsed text)."""
    parsed = parse(raw)
    text = parsed.text.strip() if parsed.text.strip() else strip_html_tags(raw)
    return parsed, _WS_RE.sub(" ", text).strip()


def tokenize_words(text: str, language: str) -> list[str]:
    if not text:
        return []
    pattern = _WORD_PATTERNS.get(language, _WORD_PATTERNS["en"])
    return [word.lower() for word in pattern.findall(text)]


def split_sentences(text: str) -> list[str]:
    return [s.strip() for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def collect_paragraphs(parsed: ParsedContent, raw: str) -> list[str]:
    """
    Paragraphs from <p> tags when the markup has them. Otherwise split the raw
    text on blank lines; a single resulting block is split on single newlines
    only when that gives several lines that are all longer than 20 characters.
    """
    if parsed.paragraphs:
        return list(parsed.paragraphs)

    normalized = raw.replace("\r\n", "\n").replace("\r", "\n")
    paragraphs = [p.strip() for p in _BLANK_LINE_RE.split(normalized) if p.strip()]

    if len(paragraphs) == 1:
        lines = [line.strip() for line in normalized.split("\n") if line.strip()]
        if len(lines) > 1 and all(len(line) > _MIN_LINE_PARAGRAPH_CHARS for line in lines):
            paragraphs = lines

    return paragraphs


def syllable_count(word: str, language: dict) -> int:
    if not word:
        return 0

    normalized = word.lower()
    groups = re.findall(language["vowels"], normalized, re.IGNORECASE)
    syllables = len(groups) if groups else 1

    if language["code"] == "en":
        if normalized.endswith("e"):
            syllables -= 1
        if normalized.endswith("le") and len(normalized) > 2:
            syllables += 1
        if normalized.startswith("mc"):
            syllables += 1
        if "ia" in normalized:
            syllables += 1
    elif language["code"] == "el":
        if normalized.endswith(("οι", "ει")):
            syllables -= 1
        if normalized.endswith("ια") and len(normalized) > 3:
            syllables += 1

    return max(1, syllables)


def count_syllables(words: list[str], language: dict) -> tuple[int, int]:
    """Returns (total syllables, complex word count)."""
    total = 0
    complex_words = 0
    for word in words:
        count = syllable_count(word, language)
        total += count
        if count >= language["complex_word_syllables"]:
            complex_words += 1
    return total, complex_words


def vocabulary_richness(words: list[str]) -> float:
    if not words:
        return 0.0
    return len(set(words)) / len(words)
