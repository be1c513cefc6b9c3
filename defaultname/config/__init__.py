"""Checker configuration."""

from defaultname.config.load import load_options
from defaultname.config.options import DEFAULT_IGNORE_PATTERNS, MatchDefaultExportNameOptions, OverrideRule

__all__ = ["DEFAULT_IGNORE_PATTERNS", "MatchDefaultExportNameOptions", "OverrideRule", "load_options"]
