"""Default export name lint rule and runner."""

from defaultname.lint.results import LintRunResult
from defaultname.lint.rules import (
    CandidateNames,
    LintConfidence,
    LintContext,
    LintDomain,
    LintRule,
    MatchDefaultExportNameRule,
    default_lint_rules,
    lookup_default_export_names,
    validate_lint_rules,
)
from defaultname.lint.runner import run_lint, run_lint_paths

__all__ = [
    "CandidateNames",
    "LintConfidence",
    "LintContext",
    "LintDomain",
    "LintRule",
    "LintRunResult",
    "MatchDefaultExportNameRule",
    "default_lint_rules",
    "lookup_default_export_names",
    "run_lint",
    "run_lint_paths",
    "validate_lint_rules",
]
