"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


SYNTAX_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_UNEXPECTED_TOKEN",
    message="Unexpected token",
    severity="error",
    category="syntax",
)

SYNTAX_MISSING_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_MISSING_TOKEN",
    message="Missing token",
    severity="error",
    category="syntax",
)

SYNTAX_RETURN_OUTSIDE_FUNCTION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_RETURN_OUTSIDE_FUNCTION",
    message="'return' outside of function",
    severity="error",
    category="syntax",
)

LINT_DEFAULT_EXPORT_NAME_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_DEFAULT_EXPORT_NAME_MISMATCH",
    message="Default import/export name does not match the expected name.",
    severity="warning",
    category="lint/naming",
)

LINT_IMPORT_RESOLUTION_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_IMPORT_RESOLUTION_ERROR",
    message="Imported module could not be resolved cleanly.",
    hint="Fix the errors in the imported module before checking its default export name.",
    severity="error",
    category="lint/resolution",
)
