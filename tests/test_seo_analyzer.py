"""
Tests for analyzers.seo_analyzer
"""

import asyncio

import pytest

from analyzers.seo_analyzer import SEOAnalyzer, build_metadata, parse_keywords, validate_input
from errors import ValidationError
from models import Category, RuleCheckResult, SEOContent, SEORule, Severity
from rules.catalog import get_all_rules

RICH_URL = "https://example.com/guides/coffee-brewing"


def _raise_key_error(content):
    raise KeyError("missing")


class TestValidation:

    def test_all_empty(self):
        with pytest.raises(ValidationError, match="At least one content field"):
            SEOAnalyzer().analyze()

    def test_non_strings_treated_as_empty(self):
        with pytest.raises(ValidationError):
            SEOAnalyzer().analyze(html=None, title=None, description=123)

    def test_validate_input(self):
        validate_input("", "A title", "")
        with pytest.raises(ValidationError):
            validate_input("", "", "")

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_input("", "", "")


class TestKeywords:

    def test_comma_separated(self):
        assert parse_keywords(" SEO, Content ,, ") == ["seo", "content"]

    def test_list(self):
        assert parse_keywords(["Coffee", " ", "Tea "]) == ["coffee", "tea"]

    def test_empty(self):
        assert parse_keywords(None) == []
        assert parse_keywords("") == []


class TestScenario:
    """Short metadata, an image-only page, nothing else"""

    @pytest.fixture
    def results(self, simple_page):
        return SEOAnalyzer().analyze(html=simple_page, title="SEO", description="Short desc")

    def test_failing_grade(self, results):
        assert results.grade == "F"
        assert results.percentage < 60

    def test_expected_issues(self, results):
        ids = {issue.id for issue in results.issues}
        assert {"meta-title-length", "meta-description-length", "image-alt-text"} <= ids
        assert "meta-title-exists" not in ids
        assert "meta-description-exists" not in ids

    def test_issue_messages(self, results):
        by_id = {issue.id: issue for issue in results.issues}
        assert by_id["meta-title-length"].description == "Title is too short (3 chars). Recommended: 30-60 chars"
        assert by_id["image-alt-text"].description == "2 of 2 images missing alt text"

    def test_attached_data(self, results):
        assert results.readability is not None
        assert results.metadata["title"] == "SEO"
        assert results.metadata["word_count"] == 8
        assert len(results.metadata["images"]) == 2
        assert results.keyword_densities == []
        assert results.started_at <= results.finished_at
        assert results.duration_seconds >= 0

    def test_counts(self, results):
        assert results.passed_rules + results.failed_rules == 44
        assert results.rule_errors == []


class TestRichPage:

    def test_head_and_structure_rules_pass(self, rich_page):
        results = SEOAnalyzer().analyze(
            html=rich_page,
            title="Coffee Brewing Guide: Beans, Grinding and Ratios",
            description="A practical guide to coffee brewing at home, from choosing fresh beans "
                        "to grinding and brewing ratios that suit your taste.",
            keywords="coffee, brewing",
            url=RICH_URL,
        )
        ids = {issue.id for issue in results.issues}
        for rule_id in (
            "meta-title-exists", "meta-title-length", "meta-title-keywords",
            "meta-description-exists", "meta-description-length",
            "viewport-meta", "canonical-url", "charset-declaration", "html-lang",
            "h1-exists", "https-protocol", "semantic-html", "schema-markup",
            "image-alt-text", "keyword-in-first-paragraph", "keyword-in-image-alt",
        ):
            assert rule_id not in ids, rule_id

    def test_keyword_densities_follow_keywords(self, rich_page):
        results = SEOAnalyzer().analyze(html=rich_page, keywords=["Coffee", "Tea"])
        assert [d.keyword for d in results.keyword_densities] == ["coffee", "tea"]
        assert results.keyword_densities[0].count > 0
        assert results.keyword_densities[1].count == 0

    def test_readability_feeds_rule(self):
        """The reading ease score and label reach the readability rule"""
        html = (
            "<p>Internationalization considerations necessitate comprehensive organizational documentation. "
            "Telecommunications infrastructure modernization requires extraordinary interdisciplinary "
            "collaboration.</p>"
        )
        results = SEOAnalyzer().analyze(html=html, title="Dense prose")
        issue = next(i for i in results.issues if i.id == "readability-score")
        assert issue.description == "Readability score: -10 (Very Difficult) - Content may be too complex"


class TestMetadataOnly:

    def test_title_and_description_only(self):
        """Without html, readability runs on the title and description"""
        results = SEOAnalyzer().analyze(title="Coffee brewing guide", description="Learn to brew coffee.")
        assert results.metadata["word_count"] == 0
        assert results.readability.totals.words == 7
        assert "h1-exists" in {i.id for i in results.issues}

    def test_whitespace_html_uses_metadata(self):
        results = SEOAnalyzer().analyze(
            html="  \n\t ", title="Coffee brewing guide", description="Learn to brew coffee.",
        )
        assert results.readability.totals.words == 7

    def test_build_metadata(self):
        metadata = build_metadata(SEOContent(title="T", url="https://example.com"))
        assert metadata["title"] == "T"
        assert metadata["url"] == "https://example.com"
        assert metadata["word_count"] == 0
        assert sorted(metadata["headings"]) == [1, 2, 3, 4, 5, 6]


class TestLanguage:

    def test_greek(self, greek_text):
        analyzer = SEOAnalyzer(language="el")
        results = analyzer.analyze(html=greek_text, title="Ανάλυση κειμένου")
        assert results.readability.meta.language == "el"
        assert analyzer.get_language() == "el"

    def test_per_call_language(self, greek_text):
        results = SEOAnalyzer().analyze(html=greek_text, language="el")
        assert results.readability.meta.language == "el"

    def test_set_language(self):
        analyzer = SEOAnalyzer()
        analyzer.set_language("el")
        assert analyzer.get_language() == "el"
        assert analyzer.recommendation_engine.priority_label("low") == "Χαμηλή Προτεραιότητα"


class TestRuleFailures:

    def test_raising_rule_does_not_abort(self, simple_page):
        broken = SEORule(
            id="broken-rule",
            category=Category.CONTENT,
            severity=Severity.HIGH,
            weight=50,
            title="Broken",
            description="Always raises",
            recommendations=("Nothing to do",),
            check=_raise_key_error,
        )
        analyzer = SEOAnalyzer(rules=get_all_rules() + [broken])
        results = analyzer.analyze(html=simple_page, title="SEO")

        assert [e.rule_id for e in results.rule_errors] == ["broken-rule"]
        assert "broken-rule" not in {i.id for i in results.issues}
        assert results.max_score == sum(rule.weight for rule in get_all_rules())
        assert results.enhanced_recommendations.summary.total_recommendations == len(results.issues)

    def test_custom_rule_set(self, simple_page):
        only = SEORule(
            id="always-passes",
            category=Category.META,
            severity=Severity.LOW,
            weight=1,
            title="Always passes",
            description="",
            recommendations=(),
            check=lambda content: RuleCheckResult(passed=True),
        )
        results = SEOAnalyzer(rules=[only]).analyze(html=simple_page)
        assert results.percentage == 100
        assert results.grade == "A"
        assert results.enhanced_recommendations.recommendations == []


class TestProgress:

    def test_callback_sequence(self, simple_page):
        events = []
        SEOAnalyzer().analyze(html=simple_page, progress_callback=events.append)
        percentages = [e["pct"] for e in events]
        assert percentages == sorted(percentages)
        assert percentages[-1] == 100
        assert all("message" in e for e in events)

    def test_failing_callback_ignored(self, simple_page):
        def explode(event):
            raise RuntimeError("ui gone")

        results = SEOAnalyzer().analyze(html=simple_page, progress_callback=explode)
        assert results.max_score > 0


class TestAsync:

    def test_analyze_async(self, simple_page):
        analyzer = SEOAnalyzer()
        sync_results = analyzer.analyze(html=simple_page, title="SEO")
        async_results = asyncio.run(analyzer.analyze_async(html=simple_page, title="SEO"))
        assert async_results.percentage == sync_results.percentage
        assert [i.id for i in async_results.issues] == [i.id for i in sync_results.issues]

    def test_concurrent_analyses_are_independent(self, simple_page, rich_page):
        analyzer = SEOAnalyzer()

        async def run_both():
            return await asyncio.gather(
                analyzer.analyze_async(html=simple_page, title="SEO"),
                analyzer.analyze_async(html=rich_page, title="Coffee", url=RICH_URL),
            )

        simple, rich = asyncio.run(run_both())
        assert simple.metadata["url"] == ""
        assert rich.metadata["url"] == RICH_URL
        assert simple.issues is not rich.issues
        assert simple.percentage < rich.percentage
