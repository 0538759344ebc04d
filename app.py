"""
SEO Content Analyzer: command-line entry point.

    python app.py page.html --title "..." --description "..." --keywords "a, b" --lang el

Prints the score, grade, issues and quick wins, and can write a CSV export
or dump the full result as JSON.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional

from analyzers.seo_analyzer import SEOAnalyzer
from config import DEFAULT_LANGUAGE, LANGUAGE_CONFIG
from errors import ValidationError
from models import AnalysisResults
from reporting.exporter import issues_to_df, recommendations_to_df, to_csv_bytes
from scoring.scorer import score_label

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score a page's SEO, readability and fixes.")
    parser.add_argument("path", nargs="?", help="HTML or text file to analyze ('-' reads stdin)")
    parser.add_argument("--title", default="", help="Page title")
    parser.add_argument("--description", default="", help="Meta description")
    parser.add_argument("--keywords", default="", help="Comma-separated target keywords")
    parser.add_argument("--lang", default=DEFAULT_LANGUAGE, choices=sorted(LANGUAGE_CONFIG), help="Content language")
    parser.add_argument("--url", default="", help="Page URL, used by the URL and link rules")
    parser.add_argument("--csv", metavar="FILE", help="Write issues and recommendations as CSV")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def read_source(path: Optional[str]) -> str:
    if not path:
        return ""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def print_report(results: AnalysisResults, analyzer: SEOAnalyzer) -> None:
    engine = analyzer.recommendation_engine
    print(f"Score: {results.score:g}/{results.max_score:g} "
          f"({results.percentage}%, grade {results.grade}, {score_label(results.percentage)})")
    print(f"Rules: {results.passed_rules} passed, {results.failed_rules} failed, {results.warnings} warnings")

    if results.readability is not None:
        composite = results.readability.composite_score
        print(f"Readability: {composite.score:g} ({composite.label}, {composite.grade_level})")
        for warning in results.readability.warnings:
            print(f"  ! {warning}")

    if results.issues:
        print("\nIssues:")
        for issue in results.issues:
            print(f"  [{issue.severity.upper():8}] {engine.category_label(issue.category)}: "
                  f"{issue.title} - {issue.description}")

    report = results.enhanced_recommendations
    if report and report.quick_wins:
        print("\nQuick wins:")
        for rec in report.quick_wins:
            print(f"  {rec.title} ({rec.estimated_time}, +{rec.impact_estimate.percentage_increase}%)")
        print(f"\nPotential: {report.summary.potential_percentage}% (grade {report.summary.potential_grade})")

    for error in results.rule_errors:
        print(f"  rule error: {error}", file=sys.stderr)


def write_csv(results: AnalysisResults, path: str) -> None:
    issues = issues_to_df(results.issues)
    recs = recommendations_to_df(
        results.enhanced_recommendations.recommendations if results.enhanced_recommendations else []
    )
    data = to_csv_bytes(issues) + b"\n" + to_csv_bytes(recs)
    Path(path).write_bytes(data)
    logger.info("Wrote %d issues and %d recommendations to %s", len(issues), len(recs), path)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        html = read_source(args.path)
    except OSError as exc:
        print(f"Error: cannot read {args.path}: {exc}")
        return 2

    analyzer = SEOAnalyzer(language=args.lang)
    try:
        results = analyzer.analyze(
            html=html,
            title=args.title,
            description=args.description,
            keywords=args.keywords,
            language=args.lang,
            url=args.url,
        )
    except ValidationError as exc:
        print(f"Error: {exc}")
        return 2

    if args.json:
        print(json.dumps(asdict(results), default=str, ensure_ascii=False, indent=2))
    else:
        print_report(results, analyzer)

    if args.csv:
        write_csv(results, args.csv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
