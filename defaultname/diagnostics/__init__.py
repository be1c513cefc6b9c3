"""Diagnostics."""

from defaultname.diagnostics.codes import (
    LINT_DEFAULT_EXPORT_NAME_MISMATCH,
    LINT_IMPORT_RESOLUTION_ERROR,
    SYNTAX_MISSING_TOKEN,
    SYNTAX_RETURN_OUTSIDE_FUNCTION,
    SYNTAX_UNEXPECTED_TOKEN,
    DiagnosticSpec,
)
from defaultname.diagnostics.diagnostic import Diagnostic, Severity
from defaultname.diagnostics.report import collect_diagnostics, has_errors, sort_diagnostics

__all__ = [
    "LINT_DEFAULT_EXPORT_NAME_MISMATCH",
    "LINT_IMPORT_RESOLUTION_ERROR",
    "SYNTAX_MISSING_TOKEN",
    "SYNTAX_RETURN_OUTSIDE_FUNCTION",
    "SYNTAX_UNEXPECTED_TOKEN",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_errors",
    "sort_diagnostics",
]
