"""
Keyword suggestions mined from page content.

Words are filtered through English and Greek stopwords, code-looking tokens
and a crude "is this a real word" heuristic, then ranked by frequency,
length and whether they are multi-word phrases.
"""
from __future__ import annotations

import logging
import re
from collections import Counter

from analyzers.keyword_density import count_occurrences
from models import KeywordSuggestion
from parsing.html_parser import parse
from scoring.scorer import round_half_up

logger = logging.getLogger(__name__)

_MIN_TEXT_CHARS = 50
_MIN_WORD_CHARS = 3
_MIN_PHRASE_COUNT = 2

STOPWORDS = frozenset({
    # English
    "a", "about", "above", "after", "again", "against", "all", "am", "an", "and",
    "any", "are", "as", "at", "be", "because", "been", "before", "being", "below",
    "between", "both", "but", "by", "can", "could", "did", "do", "does", "down",
    "during", "each", "few", "for", "from", "further", "had", "has", "have",
    "having", "he", "her", "here", "hers", "herself", "him", "himself", "his",
    "how", "i", "if", "in", "into", "is", "it", "its", "itself", "just", "me",
    "might", "more", "most", "my", "myself", "no", "nor", "not", "of", "off", "on",
    "once", "only", "or", "other", "our", "ours", "ourselves", "out", "over", "own",
    "same", "she", "should", "so", "some", "such", "than", "that", "the", "their",
    "theirs", "them", "themselves", "then", "there", "these", "they", "this",
    "those", "through", "to", "too", "under", "until", "up", "very", "was", "we",
    "were", "what", "when", "where", "which", "while", "who", "whom", "why", "with",
    "would", "you", "your", "yours", "yourself", "yourselves", "will",
    # Greek
    "ο", "η", "το", "οι", "τα", "την", "των", "τον", "του", "της", "και", "που",
    "να", "για", "είναι", "σε", "με", "αν", "από", "μόνο", "αλλά", "δεν", "όχι",
    "ή", "ως", "αυτό", "αυτή", "αυτοί", "αυτές", "αυτά", "πολύ", "πολλά", "λίγο",
    "λίγα", "κάτι", "άλλο", "άλλα", "άλλη", "άλλες", "κάποιος", "κάποια", "κάποιο",
    "κάποιοι", "κάποιες", "ποιος", "ποια", "ποιο", "ποιοι", "ποιες", "πώς", "πού",
    "πότε", "γιατί", "ποσο", "ποσα", "είμαι", "είσαι", "εστε", "ειμαστε", "ειστε",
    "εινε", "ημουν", "ησουν", "ημασταν", "ησασταν", "θα", "ας",
})

CODE_PATTERNS: dict[str, re.Pattern] = {
    "html_attribute": re.compile(r"^(href|src|alt|title|class|id|name|value|data-[\w-]+)$", re.IGNORECASE),
    "camel_case": re.compile(r"^[a-z]+[A-Z][a-zA-Z0-9]*$"),
    "snake_case": re.compile(r"^[a-z]+_[a-z0-9_]+$"),
    "kebab_case": re.compile(r"^[a-z]+(-[a-z0-9]+)+$"),
    "css_unit": re.compile(r"^(px|em|rem|pt|cm|mm|in|pc|ex|ch|vw|vh|vmin|vmax|%)$", re.IGNORECASE),
    "css_property": re.compile(
        r"^(background|color|border|margin|padding|font|width|height|display|position|flex|grid)$",
        re.IGNORECASE,
    ),
    "js_keyword": re.compile(
        r"^(function|const|let|var|return|if|else|for|while|do|switch|case|try|catch|finally"
        r"|async|await|class|extends|constructor)$",
        re.IGNORECASE,
    ),
    "numeric_only": re.compile(r"^\d+$"),
    "single_char": re.compile(r"^.$"),
    "url_like": re.compile(r"^(http|https|www|ftp|\.com|\.org|\.net|\.edu)$", re.IGNORECASE),
    "minified": re.compile(r"^[a-z]{1,2}\d+$|^_[a-zA-Z0-9]+$"),
}

_VOWELS_RE = re.compile(r"[aeiouyαεηιουωάέήίόύώϊϋΐΰ]", re.IGNORECASE)
_HEX_RE = re.compile(r"^#[0-9a-f]+$|^[0-9a-f]{3}$|^[0-9a-f]{6}$", re.IGNORECASE)
_REPEAT_RE = re.compile(r"(.)\1{2,}")
_WORD_RE = re.compile(r"\w+")
_SPLIT_RE = re.compile(r"[\s\-_/]+")


def is_code_word(word: str) -> bool:
    if not word:
        return True
    return any(pattern.search(word) for pattern in CODE_PATTERNS.values())


def is_real_language_word(word: str) -> bool:
    if not word or len(word) < _MIN_WORD_CHARS:
        return False
    if len(_VOWELS_RE.findall(word)) / len(word) < 0.25:
        return False
    if _HEX_RE.search(word):
        return False
    if _REPEAT_RE.search(word):
        return False
    return True


def relevance_score(frequency: int, total_words: int, keyword: str) -> float:
    frequency_score = min(frequency / (total_words * 0.01) * 60, 60)

    length = len(keyword)
    if 6 <= length <= 8:
        length_bonus = 5
    elif length > 8:
        length_bonus = 15
    else:
        length_bonus = 0

    phrase_bonus = 10 if " " in keyword else 0
    return min(frequency_score + length_bonus + phrase_bonus, 100)


def suggest_keywords(html: str, max_suggestions: int = 10) -> list[KeywordSuggestion]:
    """Top keyword and phrase candidates for html, best first."""
    if not isinstance(html, str) or not html.strip():
        return []

    parsed = parse(html)
    clean_text = parsed.text if parsed.text.strip() else html
    if len(clean_text) < _MIN_TEXT_CHARS:
        return []

    words = _candidate_words(clean_text)
    if not words:
        return []

    frequencies: dict[str, int] = dict(Counter(words))
    frequencies.update(_extract_phrases(words))

    suggestions = []
    for keyword, frequency in frequencies.items():
        occurrences = count_occurrences(clean_text, keyword)
        if occurrences == 0:
            # phrase stitched across a dropped word, not present in the text
            logger.debug("Dropping suggestion %r: no occurrences in text", keyword)
            continue
        suggestions.append(KeywordSuggestion(
            keyword=keyword,
            frequency=frequency,
            relevance=round_half_up(relevance_score(frequency, len(words), keyword)),
            is_phrase=" " in keyword,
            occurrences=occurrences,
        ))
    suggestions.sort(key=lambda s: (-s.relevance, -s.frequency))
    return suggestions[:max_suggestions]


def get_suggestion_strings(html: str, max_suggestions: int = 10) -> list[str]:
    return [s.keyword for s in suggest_keywords(html, max_suggestions)]


def _candidate_words(text: str) -> list[str]:
    """Word runs split the way keyword_pattern() sees word boundaries."""
    words = []
    for chunk in _SPLIT_RE.split(text):
        for token in _WORD_RE.findall(chunk):
            # Code patterns are case-sensitive (camelCase), so check before lowering
            if len(token) < _MIN_WORD_CHARS or is_code_word(token):
                continue
            word = token.lower()
            if word in STOPWORDS or not is_real_language_word(word):
                continue
            words.append(word)
    return words


def _extract_phrases(words: list[str]) -> dict[str, int]:
    phrases: Counter = Counter()
    for size in (2, 3):
        for i in range(len(words) - size + 1):
            phrases[" ".join(words[i:i + size])] += 1
    return {phrase: count for phrase, count in phrases.items() if count >= _MIN_PHRASE_COUNT}
