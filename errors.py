"""
Exceptions raised or recorded by the analyzer.

Only ValidationError ever leaves SEOAnalyzer.analyze(); rule failures are
wrapped in RuleExecutionError and kept on AnalysisResults.rule_errors.
"""
from __future__ import annotations


class ValidationError(ValueError):
    """Top-level input is unusable; analysis does not start."""


class RuleExecutionError(Exception):
    def __init__(self, rule_id: str, cause: BaseException):
        super().__init__(f"Rule '{rule_id}' failed: {cause}")
        self.rule_id = rule_id
        self.cause = cause

    def __reduce__(self):
        # copy, pickle and dataclasses.asdict rebuild through the two-arg constructor
        return (self.__class__, (self.rule_id, self.cause))
