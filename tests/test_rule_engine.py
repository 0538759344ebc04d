"""
Tests for analyzers.rule_engine
"""

import logging
from dataclasses import asdict

from analyzers.rule_engine import evaluate, group_by_category
from errors import RuleExecutionError
from models import Category, RuleCheckResult, SEOContent, SEORule, Severity
from rules.catalog import get_all_rules


def _passes(content):
    return RuleCheckResult(passed=True, message="ok")


def _fails(content):
    return RuleCheckResult(passed=False)


def _warns(content):
    return RuleCheckResult(passed=False, message="not quite", warning=True)


def _explodes(content):
    raise RuntimeError("boom")


def _rule(rule_id, check, category=Category.META, severity=Severity.MEDIUM, weight=5):
    return SEORule(
        id=rule_id,
        category=category,
        severity=severity,
        weight=weight,
        title=rule_id.title(),
        description=f"{rule_id} description",
        recommendations=(f"Fix {rule_id}",),
        check=check,
    )


class TestGrouping:

    def test_known_categories_first(self):
        """Known categories keep their fixed order, unknown ones follow"""
        rules = [
            _rule("z", _passes, category="custom"),
            _rule("k", _passes, category=Category.KEYWORDS),
            _rule("m", _passes, category=Category.META),
        ]
        assert list(group_by_category(rules)) == [Category.META, Category.KEYWORDS, "custom"]

    def test_empty_groups_dropped(self):
        assert group_by_category([]) == {}


class TestEvaluate:

    def test_scoring(self):
        """Passing rules add their weight to both score and maximum"""
        results = evaluate(SEOContent(), [_rule("a", _passes, weight=6), _rule("b", _fails, weight=4)])
        assert results.score == 6
        assert results.max_score == 10
        assert results.percentage == 60
        assert results.grade == "D"
        assert results.passed_rules == 1
        assert results.failed_rules == 1

    def test_no_rules(self):
        """An empty run scores zero instead of dividing by zero"""
        results = evaluate(SEOContent(), [])
        assert results.percentage == 0
        assert results.grade == "F"

    def test_issue_uses_rule_description_when_no_message(self):
        results = evaluate(SEOContent(), [_rule("b", _fails, weight=4)])
        issue = results.issues[0]
        assert issue.description == "b description"
        assert issue.impact == 4
        assert [r.recommendation for r in results.recommendations] == ["Fix b"]

    def test_warnings_counted(self):
        results = evaluate(SEOContent(), [_rule("w", _warns), _rule("p", _passes)])
        assert results.warnings == 1
        assert results.issues[0].description == "not quite"

    def test_category_scores(self):
        results = evaluate(SEOContent(), [
            _rule("a", _passes, category=Category.META, weight=3),
            _rule("b", _fails, category=Category.CONTENT, weight=2),
        ])
        assert results.category_scores[Category.META].score == 3
        assert results.category_scores[Category.CONTENT].failed == 1
        assert results.category_scores[Category.CONTENT].max_score == 2

    def test_result_groupings(self):
        results = evaluate(SEOContent(), [
            _rule("a", _fails, category=Category.META, severity=Severity.HIGH),
            _rule("b", _fails, category=Category.CONTENT, severity=Severity.LOW),
        ])
        assert [i.id for i in results.issues_by_severity[Severity.HIGH]] == ["a"]
        assert results.issues_by_severity[Severity.CRITICAL] == []
        assert list(results.recommendations_by_category) == [Category.META, Category.CONTENT]

    def test_issues_sorted_by_severity_then_weight(self):
        results = evaluate(SEOContent(), [
            _rule("low", _fails, severity=Severity.LOW, weight=3),
            _rule("high-light", _fails, severity=Severity.HIGH, weight=6),
            _rule("critical", _fails, severity=Severity.CRITICAL, weight=10),
            _rule("high-heavy", _fails, severity=Severity.HIGH, weight=8),
        ])
        assert [i.id for i in results.issues] == ["critical", "high-heavy", "high-light", "low"]


class TestRuleIsolation:
    """A rule that raises is excluded without stopping the run"""

    def _run(self):
        return evaluate(SEOContent(), [
            _rule("first", _passes, weight=4),
            _rule("broken", _explodes, weight=10),
            _rule("last", _fails, weight=6),
        ])

    def test_excluded_from_score(self):
        results = self._run()
        assert results.max_score == 10
        assert results.score == 4
        assert results.percentage == 40

    def test_not_reported_as_issue(self):
        results = self._run()
        assert [i.id for i in results.issues] == ["last"]

    def test_error_recorded(self):
        results = self._run()
        assert len(results.rule_errors) == 1
        error = results.rule_errors[0]
        assert isinstance(error, RuleExecutionError)
        assert error.rule_id == "broken"
        assert isinstance(error.cause, RuntimeError)
        assert str(error) == "Rule 'broken' failed: boom"

    def test_error_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="analyzers.rule_engine"):
            self._run()
        assert "Rule 'broken' failed: boom" in caplog.text

    def test_results_convert_to_dict(self):
        """Recorded errors survive dataclasses.asdict"""
        data = asdict(self._run())
        assert data["rule_errors"][0].rule_id == "broken"


class TestFullCatalog:

    def test_bounds_on_real_page(self, make_content, rich_page):
        content = make_content(
            rich_page,
            url="https://example.com/guides/coffee-brewing",
            title="Coffee Brewing Guide",
            description="How to brew coffee at home.",
            keywords=["coffee"],
        )
        rules = get_all_rules()
        results = evaluate(content, rules)
        assert 0 <= results.score <= results.max_score
        assert 0 <= results.percentage <= 100
        assert results.passed_rules + results.failed_rules == len(rules)
        assert results.rule_errors == []
        assert results.max_score == sum(rule.weight for rule in rules)
