"""
Tests for analyzers.keyword_density and analyzers.keyword_suggestions
"""

import pytest

from analyzers.keyword_density import (
    analyze_keyword_density,
    calculate_keyword_density,
    count_occurrences,
    density_status,
    normalize_keyword,
    section_counts,
)
from analyzers.keyword_suggestions import (
    get_suggestion_strings,
    is_code_word,
    is_real_language_word,
    suggest_keywords,
)
from errors import ValidationError
from parsing.html_parser import parse

GREEK = (
    "Η βελτιστοποίηση μηχανών αναζήτησης βοηθά κάθε σελίδα. "
    "Η βελτιστοποίηση είναι σημαντική για τις μηχανές αναζήτησης και τις μηχανών αναζήτησης λίστες."
)

SUGGESTION_PAGE = (
    "<h1>Coffee grinders explained</h1>"
    "<p>Coffee grinders shape the taste of every cup. Burr coffee grinders crush beans evenly, "
    "while blade grinders chop them unevenly. Choose coffee grinders with steady burrs and "
    "clean them often so stale coffee oils never build up inside the grinders.</p>"
)

APOSTROPHE_PAGE = (
    "<p>The client's garden looks great. Every client's garden needs water. "
    "A client's garden grows fast in spring.</p>"
)


class TestCounting:

    def test_case_and_separators(self):
        """Matching ignores case and treats hyphens as spaces"""
        assert count_occurrences("SEO tips for seo-friendly pages", "seo") == 2

    def test_whole_words_only(self):
        assert count_occurrences("Seasoned seo writers", "seo") == 1
        assert count_occurrences("seasoning", "seo") == 0

    def test_phrase_flexible_whitespace(self):
        assert count_occurrences("search   engine tips", "search engine") == 1

    def test_greek_word(self):
        assert count_occurrences(GREEK, "βελτιστοποίηση") == 2

    def test_greek_phrase(self):
        assert count_occurrences(GREEK, "μηχανών αναζήτησης") == 2

    def test_regex_characters_are_literal(self):
        assert count_occurrences("node.js and nodexjs", "node.js") == 1

    def test_normalize_keyword(self):
        assert normalize_keyword("  Search-Engine   Tips ") == "search engine tips"


class TestDensity:

    def test_single_word(self):
        result = calculate_keyword_density("coffee " * 2 + "filler " * 98, "coffee")
        assert result.count == 2
        assert result.word_count == 100
        assert result.density == 2.0

    def test_phrase_weighted_by_length(self):
        """A phrase counts once per word it spans"""
        result = calculate_keyword_density("search engine tips for search engine users", "search engine")
        assert result.count == 2
        assert result.density == 57.14

    def test_absent_keyword(self):
        result = calculate_keyword_density("some text here", "coffee")
        assert result.count == 0
        assert result.density == 0.0

    def test_empty_inputs(self):
        assert calculate_keyword_density("", "coffee").density == 0.0
        assert calculate_keyword_density("text", "").count == 0

    def test_idempotent(self):
        text = "coffee and more coffee"
        assert calculate_keyword_density(text, "coffee") == calculate_keyword_density(text, "coffee")

    @pytest.mark.parametrize("density, status", [
        (0.5, "underused"), (1.0, "optimal"), (3.0, "optimal"), (3.5, "overused"),
    ])
    def test_status(self, density, status):
        assert density_status(density) == status

    def test_section_counts(self):
        text = " ".join(["coffee filler filler filler"] * 8)
        counts = section_counts(text, "coffee")
        assert len(counts) == 4
        assert all(n > 0 for n in counts)


class TestAnalyzeKeywordDensity:

    def test_requires_keywords(self):
        with pytest.raises(ValidationError, match="No keywords provided"):
            analyze_keyword_density("<p>Some content</p>", [])

    def test_requires_content(self):
        with pytest.raises(ValidationError, match="No content to analyze"):
            analyze_keyword_density("", "coffee")

    def test_full_analysis(self):
        content = "coffee " * 2 + "word " * 98
        analysis = analyze_keyword_density(content, "coffee, tea")

        assert analysis.total_words == 100
        assert analysis.total_keywords == 2

        coffee, tea = analysis.density_results
        assert coffee.status == "optimal"
        assert coffee.is_optimal is True
        assert len(coffee.positions) == 2
        assert tea.status == "underused"
        assert analysis.summary == {"optimal": 1, "underused": 1, "overused": 0}

        actions = [r.action for r in analysis.recommendations]
        assert actions == ["maintain", "increase"]

    def test_distribution_sections(self):
        analysis = analyze_keyword_density("coffee " * 40, ["coffee"])
        assert [s.section for s in analysis.distribution] == [
            "Introduction", "Early Content", "Middle Content", "Conclusion",
        ]
        assert analysis.density_results[0].status == "overused"
        assert analysis.recommendations[0].type == "critical"

    def test_phrase_type(self):
        analysis = analyze_keyword_density("search engine basics for search engine users", ["search engine"])
        assert analysis.density_results[0].type == "phrase"


class TestSuggestions:

    def test_short_content(self):
        assert suggest_keywords("<p>Too short</p>") == []
        assert suggest_keywords("") == []

    def test_top_suggestion(self):
        suggestions = suggest_keywords(SUGGESTION_PAGE)
        assert suggestions
        keywords = [s.keyword for s in suggestions]
        assert "grinders" in keywords or "coffee grinders" in keywords
        assert all(s.relevance <= 100 for s in suggestions)

    def test_occurrences_match_density_counting(self):
        """Suggestion counts use the same matching as density"""
        text = parse(SUGGESTION_PAGE).text
        for suggestion in suggest_keywords(SUGGESTION_PAGE):
            assert suggestion.occurrences == count_occurrences(text, suggestion.keyword)

    def test_inner_punctuation(self):
        """Apostrophes split words the way the density matcher does"""
        text = parse(APOSTROPHE_PAGE).text
        suggestions = suggest_keywords(APOSTROPHE_PAGE)
        keywords = [s.keyword for s in suggestions]
        assert "client" in keywords
        assert "clients" not in keywords
        assert "client garden" not in keywords
        for suggestion in suggestions:
            assert suggestion.occurrences > 0
            assert suggestion.occurrences == count_occurrences(text, suggestion.keyword)

    def test_phrases_flagged(self):
        for suggestion in suggest_keywords(SUGGESTION_PAGE):
            assert suggestion.is_phrase == (" " in suggestion.keyword)

    def test_limit(self):
        assert len(get_suggestion_strings(SUGGESTION_PAGE, max_suggestions=3)) <= 3

    def test_stopwords_excluded(self):
        assert "with" not in get_suggestion_strings(SUGGESTION_PAGE, max_suggestions=50)


class TestWordFilters:

    @pytest.mark.parametrize("word", ["camelCase", "snake_case", "href", "1234", "padding"])
    def test_code_words(self, word):
        assert is_code_word(word) is True

    def test_plain_word(self):
        assert is_code_word("coffee") is False

    def test_real_language_words(self):
        assert is_real_language_word("coffee") is True
        assert is_real_language_word("καφές") is True
        assert is_real_language_word("xkcdq") is False
        assert is_real_language_word("aaaah") is False
