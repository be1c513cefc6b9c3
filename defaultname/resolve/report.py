"""Diagnostics for imported modules that failed to resolve cleanly."""

from __future__ import annotations

from defaultname.diagnostics import LINT_IMPORT_RESOLUTION_ERROR, Diagnostic
from defaultname.resolve.exports import ExportInfo
from defaultname.syntax import SpecifierOccurrence


def report_resolution_errors(occurrence: SpecifierOccurrence, export_info: ExportInfo) -> list[Diagnostic]:
    """One diagnostic per resolution error, attributed to the occurrence's module specifier."""
    spec = LINT_IMPORT_RESOLUTION_ERROR
    return [
        Diagnostic(
            code=spec.code,
            message=f"Parse errors in imported module '{occurrence.module}': {error}",
            range=occurrence.module_range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
        for error in export_info.errors
    ]
