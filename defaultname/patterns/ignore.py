"""Ignore filter over resolved module paths."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from defaultname.config.options import DEFAULT_IGNORE_PATTERNS
from defaultname.patterns.compile import PatternMatcher, compile_pattern


@dataclass(frozen=True, slots=True)
class IgnoreFilter:
    """Ordered ignore patterns; a path is ignored if any pattern matches it.

    Regex patterns are searched in the path, plain patterns match as substrings.
    """

    matchers: tuple[PatternMatcher, ...] = ()

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> IgnoreFilter:
        return cls(matchers=tuple(compile_pattern(pattern) for pattern in patterns))

    @classmethod
    def default(cls) -> IgnoreFilter:
        return cls.from_patterns(DEFAULT_IGNORE_PATTERNS)

    def is_ignored(self, path: str) -> bool:
        return any(_matches(matcher, path) for matcher in self.matchers)


def _matches(matcher: PatternMatcher, path: str) -> bool:
    if matcher.regex is not None:
        return matcher.regex.search(path) is not None
    return matcher.source in path
