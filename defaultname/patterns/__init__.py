"""Module pattern compilation, ignore filtering and override resolution."""

from defaultname.patterns.compile import Captures, PatternMatcher, compile_pattern, is_regex_literal
from defaultname.patterns.ignore import IgnoreFilter
from defaultname.patterns.overrides import CompiledOverride, OverrideResolver, substitute_captures

__all__ = [
    "Captures",
    "CompiledOverride",
    "IgnoreFilter",
    "OverrideResolver",
    "PatternMatcher",
    "compile_pattern",
    "is_regex_literal",
    "substitute_captures",
]
