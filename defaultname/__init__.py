"""Check that default imports and re-exports are named after the module's default export."""

from defaultname.config import MatchDefaultExportNameOptions, OverrideRule, load_options
from defaultname.diagnostics import Diagnostic
from defaultname.errors import ConfigurationError
from defaultname.lint import LintRunResult, MatchDefaultExportNameRule, run_lint, run_lint_paths
from defaultname.resolve import (
    ExportInfo,
    ExportResolver,
    MappingExportResolver,
    NullExportResolver,
    ResolutionError,
    SourceExportResolver,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "ExportInfo",
    "ExportResolver",
    "LintRunResult",
    "MappingExportResolver",
    "MatchDefaultExportNameOptions",
    "MatchDefaultExportNameRule",
    "NullExportResolver",
    "OverrideRule",
    "ResolutionError",
    "SourceExportResolver",
    "load_options",
    "run_lint",
    "run_lint_paths",
]
