"""
Global configuration constants for the SEO Content Analyzer.
All tunable thresholds live here.
"""

# ── Meta thresholds ───────────────────────────────────────────────────────────
TITLE_MIN_CHARS = 30
TITLE_MAX_CHARS = 60
DESCRIPTION_MIN_CHARS = 120
DESCRIPTION_MAX_CHARS = 160

# ── Content thresholds ────────────────────────────────────────────────────────
MIN_WORD_COUNT = 300
GOOD_WORD_COUNT = 500
MAX_PARAGRAPH_WORDS = 150
WORDS_PER_IMAGE = 300
LIST_USAGE_WORD_COUNT = 500

TEMPORAL_WORDS = [
    "today", "yesterday", "last week", "this month",
    "current", "latest", "recent", "updated",
]

# ── Keyword thresholds (percent) ──────────────────────────────────────────────
KEYWORD_DENSITY_MIN = 1.0
KEYWORD_DENSITY_MAX = 3.0
KEYWORD_DENSITY_LOW_WARNING = 0.5
KEYWORD_STUFFING_DENSITY = 5.0
KEYWORD_STUFFING_MIN_WORDS = 100
KEYWORD_MIN_SECTIONS = 2

# ── Readability rule thresholds ───────────────────────────────────────────────
FLESCH_TARGET_MIN = 60
FLESCH_TARGET_MAX = 80
FLESCH_WARNING_MIN = 50
FLESCH_WARNING_MAX = 90
MAX_AVG_SENTENCE_WORDS = 20
WARN_AVG_SENTENCE_WORDS = 25

# ── Technical thresholds ──────────────────────────────────────────────────────
MAX_URL_PATH_CHARS = 75
WARN_URL_PATH_CHARS = 100
MAX_URL_DEPTH = 3
WARN_URL_DEPTH = 4
MAX_URL_PARAMS = 2
MIN_SEMANTIC_SCORE = 3
MAX_PAGE_SIZE_KB = 100
WARN_PAGE_SIZE_KB = 150
MIN_ANCHOR_CHARS = 3

GENERIC_ANCHORS = {"click here", "read more", "here", "link", "more", "this"}

BROKEN_HREFS = {"", "#", "javascript:void(0)", "javascript:;"}

# ── Scoring ───────────────────────────────────────────────────────────────────
# (minimum percentage, grade), checked top-down; anything lower is an F
GRADE_BANDS: list[tuple[int, str]] = [
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
]
FAILING_GRADE = "F"

SEVERITY_ORDER: dict[str, int] = {
    "critical": 0,
    "high":     1,
    "medium":   2,
    "low":      3,
}

# ── Readability ───────────────────────────────────────────────────────────────
DEFAULT_LANGUAGE = "en"

LONG_SENTENCE_WORDS = 25
SHORT_SENTENCE_WORDS = 8
LONG_PARAGRAPH_WORDS = 120
SHORT_PARAGRAPH_WORDS = 40
MIN_SENTENCES = 3

EASE_WEIGHT = 0.6
GRADE_WEIGHT = 0.4

LANGUAGE_CONFIG: dict[str, dict] = {
    "en": {
        "code": "en",
        "name": "English",
        "vowels": r"[aeiouy]+",
        "complex_word_syllables": 3,
        "flesch": {"base": 206.835, "sentence": 1.015, "syllable": 84.6},
        "min_words": 40,
        "reading_wpm": 200,
        "guidance": [
            {
                "title": "Shorten Long Sentences",
                "description": "Aim for sentences under 20 words to maintain flow. Split complex ideas into separate sentences.",
            },
            {
                "title": "Favor Active Voice",
                "description": "Active voice improves clarity and keeps sentences direct. It also reduces unnecessary words.",
            },
            {
                "title": "Avoid Overly Technical Terms",
                "description": "Replace jargon with simpler alternatives unless your audience expects specialist vocabulary.",
            },
            {
                "title": "Mix Sentence Lengths",
                "description": "Use a blend of short and medium sentences to create a natural rhythm that keeps readers engaged.",
            },
        ],
    },
    "el": {
        "code": "el",
        "name": "Greek",
        "vowels": r"[αεηιουωάέήίόύώϊΐϋΰ]+",
        "complex_word_syllables": 4,
        "flesch": {"base": 206.84, "sentence": 1.3, "syllable": 60.0},
        "min_words": 40,
        "reading_wpm": 180,
        "guidance": [
            {
                "title": "Keep Paragraphs Focused",
                "description": "Large Greek paragraphs can hide key ideas. Break long sections into 3-4 sentence blocks.",
            },
            {
                "title": "Prefer Simple Verb Constructions",
                "description": "Use straightforward verb forms to avoid complex clauses that increase cognitive load.",
            },
            {
                "title": "Balance Ancient and Modern Terms",
                "description": "Combine contemporary vocabulary with formal terms only when necessary to match your readers.",
            },
            {
                "title": "Highlight Key Information Early",
                "description": "Place the main message near the start of each paragraph where readers naturally expect it.",
            },
        ],
    },
}

# Greek paragraphs read long sooner than English ones
GREEK_PARAGRAPH_WORDS = 100
