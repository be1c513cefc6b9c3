"""Module-level import/export syntax over JS/TS source text."""

from defaultname.syntax.exports import DefaultExportScan, find_default_export, syntax_errors
from defaultname.syntax.occurrences import SpecifierOccurrence, SpecifierRole, scan_specifiers
from defaultname.syntax.parser import (
    DEFAULT_LANGUAGE,
    ParsedSource,
    SourceLanguage,
    language_for_path,
    parse_source,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "DefaultExportScan",
    "ParsedSource",
    "SourceLanguage",
    "SpecifierOccurrence",
    "SpecifierRole",
    "find_default_export",
    "language_for_path",
    "parse_source",
    "scan_specifiers",
    "syntax_errors",
]
