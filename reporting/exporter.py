"""
Converts AnalysisResults data to Pandas DataFrames and CSV bytes for export.
"""
from __future__ import annotations

import io

import pandas as pd

from config import SEVERITY_ORDER
from models import AnalysisIssue, AnalysisResults, FormulaResult, Recommendation

_ISSUE_COLUMNS = ["Severity", "Category", "Rule", "Title", "Description", "Impact"]
_RECOMMENDATION_COLUMNS = [
    "Priority", "Category", "Rule", "Title", "Effort", "Estimated Time",
    "Score Increase", "Projected %", "Actions",
]


# ── Issues DataFrame ───────────────────────────────────────────────────────────

def issues_to_df(issues: list[AnalysisIssue]) -> pd.DataFrame:
    if not issues:
        return pd.DataFrame(columns=_ISSUE_COLUMNS)

    rows = []
    for issue in issues:
        rows.append({
            "Severity":    issue.severity.upper(),
            "Category":    _humanize(issue.category),
            "Rule":        issue.id,
            "Title":       issue.title,
            "Description": issue.description,
            "Impact":      issue.impact,
        })

    df = pd.DataFrame(rows)

    # Severity sort order, heaviest rule first within a severity
    df["_sev_order"] = df["Severity"].str.lower().map(SEVERITY_ORDER)
    df = df.sort_values(["_sev_order", "Impact", "Rule"], ascending=[True, False, True])
    df = df.drop(columns=["_sev_order"]).reset_index(drop=True)
    return df


# ── Recommendations DataFrame ─────────────────────────────────────────────────

def recommendations_to_df(recommendations: list[Recommendation]) -> pd.DataFrame:
    """Keeps the engine's priority/impact order."""
    if not recommendations:
        return pd.DataFrame(columns=_RECOMMENDATION_COLUMNS)

    rows = []
    for rec in recommendations:
        rows.append({
            "Priority":       rec.priority.capitalize(),
            "Category":       _humanize(rec.category),
            "Rule":           rec.rule_id,
            "Title":          rec.title,
            "Effort":         rec.effort.capitalize(),
            "Estimated Time": rec.estimated_time,
            "Score Increase": rec.impact_estimate.score_increase,
            "Projected %":    rec.impact_estimate.projected_percentage,
            "Actions":        " | ".join(a.action for a in rec.actions),
        })
    return pd.DataFrame(rows)


# ── Scores ────────────────────────────────────────────────────────────────────

def category_scores_df(results: AnalysisResults) -> pd.DataFrame:
    if not results.category_scores:
        return pd.DataFrame(columns=["Category", "Score", "Max Score", "Percentage", "Passed", "Failed"])

    rows = []
    for category, cs in results.category_scores.items():
        rows.append({
            "Category":   _humanize(category),
            "Score":      cs.score,
            "Max Score":  cs.max_score,
            "Percentage": round(cs.score / cs.max_score * 100, 1) if cs.max_score else 0.0,
            "Passed":     cs.passed,
            "Failed":     cs.failed,
        })
    return pd.DataFrame(rows)


def formulas_to_df(formulas: list[FormulaResult]) -> pd.DataFrame:
    if not formulas:
        return pd.DataFrame(columns=["Formula", "Score", "Normalized", "Grade Level", "Interpretation"])

    return pd.DataFrame([
        {
            "Formula":        f.label,
            "Score":          f.score,
            "Normalized":     round(f.normalized, 1),
            "Grade Level":    f.grade_level,
            "Interpretation": f.interpretation,
        }
        for f in formulas
    ])


# ── Summary table ──────────────────────────────────────────────────────────────

def issues_summary_df(issues: list[AnalysisIssue]) -> pd.DataFrame:
    """Grouped count of issues by category and severity."""
    if not issues:
        return pd.DataFrame()

    rows: dict[tuple, int] = {}
    for issue in issues:
        key = (_humanize(issue.category), issue.severity.capitalize())
        rows[key] = rows.get(key, 0) + 1

    data = [{"Category": k[0], "Severity": k[1], "Count": v} for k, v in rows.items()]
    df = pd.DataFrame(data)
    df["_order"] = df["Severity"].str.lower().map(SEVERITY_ORDER)
    df = df.sort_values(["_order", "Category"]).drop(columns=["_order"]).reset_index(drop=True)
    return df


# ── CSV export ─────────────────────────────────────────────────────────────────

def to_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


# ── Helpers ────────────────────────────────────────────────────────────────────

def _humanize(slug: str) -> str:
    """Convert kebab-case or snake_case to Title Case for display."""
    return slug.replace("_", " ").replace("-", " ").title()
