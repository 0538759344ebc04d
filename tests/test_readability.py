"""
Tests for the readability package
"""

import pytest

from config import LANGUAGE_CONFIG
from models import FormulaResult
from parsing.html_parser import parse
from readability.engine import ReadabilityEngine
from readability.formulas import (
    EASE_ID,
    GRADE_IDS,
    build_composite_score,
    flesch_reading_ease,
    normalize_grade,
)
from readability.structure import length_distribution, median
from readability.text import collect_paragraphs, get_language_config, syllable_count

EN = LANGUAGE_CONFIG["en"]
EL = LANGUAGE_CONFIG["el"]


def _formula(formula_id, score, normalized, kind):
    return FormulaResult(
        id=formula_id,
        label=formula_id,
        score=score,
        normalized=normalized,
        grade_level="",
        grade_value=score,
        interpretation="",
        color="",
        type=kind,
    )


@pytest.fixture
def engine():
    return ReadabilityEngine()


class TestEmptyInput:
    """Unusable input still returns the full result shape"""

    def test_empty_string(self, engine):
        result = engine.analyze("")
        assert result.is_insufficient is True
        assert result.warnings == ["No content provided"]
        assert result.formulas == []
        assert result.composite_score.label == "Insufficient Data"
        assert result.composite_score.score == 0.0
        assert len(result.reading_levels.education_stages) == 5
        assert len(result.language_guidance.rules) == 4

    def test_markup_without_text(self, engine):
        assert engine.analyze("<div></div>").warnings == ["Unable to extract text from content"]

    def test_no_words(self, engine):
        assert engine.analyze("123 456. 789!").warnings == ["Insufficient textual content"]

    def test_non_string(self, engine):
        assert engine.analyze(None).is_insufficient is True


class TestEnglishAnalysis:

    def test_formulas(self, engine, english_text):
        """All six formulas are reported, ease first"""
        result = engine.analyze(english_text, "en")
        assert [f.id for f in result.formulas] == [EASE_ID] + GRADE_IDS
        assert result.formula(EASE_ID).type == "ease"
        assert all(f.type == "grade" for f in result.formulas[1:])
        assert result.formula("unknown") is None

    def test_totals(self, engine, english_text):
        result = engine.analyze(english_text, "en")
        assert result.totals.sentences == 6
        assert result.totals.words == 63
        assert result.is_insufficient is False

    def test_composite_in_range(self, engine, english_text):
        composite = engine.analyze(english_text).composite_score
        assert 0 <= composite.score <= 100
        assert composite.reading_time_minutes == 1

    def test_meta(self, engine, english_text):
        meta = engine.analyze(english_text).meta
        assert meta.language == "en"
        assert meta.language_name == "English"
        assert meta.processing_time_ms >= 0

    def test_html_input(self, engine, rich_page):
        """Markup is parsed and paragraphs come from <p> tags"""
        result = engine.analyze(rich_page)
        assert result.totals.paragraphs == 4
        assert result.totals.words > 0

    def test_recommendations_present(self, engine, english_text):
        assert engine.analyze(english_text).recommendations

    def test_unknown_language_uses_english(self, engine, english_text):
        assert engine.analyze(english_text, "fr").meta.language == "en"


class TestGreekAnalysis:

    def test_short_greek_text(self, engine, greek_text):
        """Greek under 40 words is flagged as insufficient"""
        result = engine.analyze(greek_text, "el")
        assert result.meta.language == "el"
        assert result.meta.language_name == "Greek"
        assert result.is_insufficient is True
        assert any("40 words" in w for w in result.warnings)
        assert result.totals.words == 17

    def test_greek_syllables(self):
        assert syllable_count("καλημέρα", EL) == 4


class TestFormulas:

    def test_composite_blend(self):
        """60% normalised ease plus 40% of the mean normalised grade"""
        formulas = [_formula(EASE_ID, 70.0, 70.0, "ease")]
        formulas += [_formula(fid, 8.0, normalize_grade(8.0), "grade") for fid in GRADE_IDS]
        composite = build_composite_score(formulas, 400, EN)
        assert composite.score == 66.0
        assert composite.label == "Good"
        assert composite.grade_level == "High School"
        assert composite.reading_time_minutes == 2

    def test_reading_time_floor(self):
        formulas = [_formula(EASE_ID, 70.0, 70.0, "ease")]
        assert build_composite_score(formulas, 10, EN).reading_time_minutes == 1

    @pytest.mark.parametrize("grade, normalized", [(8, 60), (-3, 100), (25, 10), (0, 100)])
    def test_normalize_grade(self, grade, normalized):
        assert normalize_grade(grade) == normalized

    def test_flesch_clamped(self):
        assert flesch_reading_ease(1, 1, 100, EN) == -10
        assert flesch_reading_ease(100, 100, 1, EN) <= 120

    def test_english_syllables(self):
        assert syllable_count("table", EN) == 2
        assert syllable_count("cat", EN) == 1
        assert syllable_count("", EN) == 0


class TestParagraphs:

    def test_blank_lines(self):
        raw = "First paragraph here.\n\nSecond paragraph here."
        assert collect_paragraphs(parse(raw), raw) == ["First paragraph here.", "Second paragraph here."]

    def test_single_block_of_long_lines(self):
        """Lines all over 20 characters become separate paragraphs"""
        raw = "This line is longer than twenty.\nThis one is also long enough."
        assert len(collect_paragraphs(parse(raw), raw)) == 2

    def test_single_block_with_short_line(self):
        raw = "Short line\nThis one is long enough to count."
        assert len(collect_paragraphs(parse(raw), raw)) == 1

    def test_markup_paragraphs(self):
        raw = "<p>One</p><p>Two</p>"
        assert collect_paragraphs(parse(raw), raw) == ["One", "Two"]


class TestStructure:

    def test_long_sentences(self, engine):
        long_sentence = " ".join(["word"] * 30) + ". Short one here. Another short one."
        sentences = engine.analyze(long_sentence).structure.sentences
        assert sentences.count == 3
        assert len(sentences.long_sentences) == 1
        assert sentences.longest_sentence.length == 30

    def test_distribution_buckets(self):
        buckets = length_distribution([5, 15, 25, 40], [("1-10", 10), ("11-20", 20), ("21+", float("inf"))])
        assert [b.count for b in buckets] == [1, 1, 2]

    def test_median(self):
        assert median([]) == 0
        assert median([3, 1, 2]) == 2
        assert median([1, 2, 3, 4]) == 2.5


class TestViews:

    def test_overview(self, engine, english_text):
        view = engine.analyze_overview(english_text)
        assert set(view) == {"meta", "composite_score", "formulas", "totals", "summary"}

    def test_structure(self, engine, english_text):
        view = engine.analyze_structure(english_text)
        assert set(view["totals"]) == {"words", "sentences", "paragraphs", "average_sentence_length"}

    def test_reading_levels(self, engine, english_text):
        view = engine.analyze_reading_levels(english_text)
        assert len(view["formulas"]) == 6
        assert set(view["composite_score"]) == {"grade_level", "label"}

    def test_improvements(self, engine, english_text):
        view = engine.analyze_improvements(english_text)
        assert "long_sentences" in view["structure"]["sentences"]

    def test_language_guidance(self, engine, english_text):
        view = engine.analyze_language_guidance(english_text, "en")
        assert view["language_guidance"]["language"] == "English"
        assert "seo_impact" in view["language_guidance"]

    def test_live_score(self, engine, english_text):
        view = engine.analyze_live_score(english_text)
        assert set(view["meta"]) == {"timestamp", "language", "is_insufficient", "processing_time_ms"}

    def test_views_on_empty_input(self, engine):
        assert engine.analyze_overview("")["meta"]["is_insufficient"] is True


class TestLanguageConfig:

    def test_lookup(self):
        assert get_language_config("EL")["code"] == "el"
        assert get_language_config(None)["code"] == "en"
