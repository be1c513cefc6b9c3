"""Compile user-supplied module patterns: `/regex/` literals or plain strings."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import TypeAlias

from defaultname.errors import ConfigurationError

_REGEX_LITERAL = re.compile(r"^/(?P<body>.*)/$")
_NAMED_GROUP = re.compile(r"\(\?<(?![=!])")
_NAMED_BACKREFERENCE = re.compile(r"\\k<(?P<name>[A-Za-z_$][\w$]*)>")

Captures: TypeAlias = tuple[str | None, ...]


@dataclass(frozen=True, slots=True)
class PatternMatcher:
    """Matcher for one configured pattern.

    A `/.../` pattern searches the subject (unanchored unless the body anchors itself)
    and exposes its capture groups; any other pattern is a literal with no captures.
    """

    source: str
    regex: re.Pattern[str] | None = None

    @property
    def is_regex(self) -> bool:
        return self.regex is not None

    def match(self, subject: str) -> Captures | None:
        """Captured groups (1-indexed as a 0-based tuple) on match, `None` otherwise."""
        if self.regex is None:
            return () if subject == self.source else None
        found = self.regex.search(subject)
        if found is None:
            return None
        return found.groups()


def is_regex_literal(pattern: str) -> bool:
    return _REGEX_LITERAL.match(pattern) is not None


def compile_pattern(pattern: str) -> PatternMatcher:
    """Compile `pattern`, raising `ConfigurationError` for an invalid regex body."""
    if not isinstance(pattern, str):
        raise ConfigurationError(f"Pattern must be a string, got {type(pattern).__name__}")
    literal = _REGEX_LITERAL.match(pattern)
    if literal is None:
        return PatternMatcher(source=pattern)
    body = _to_python_regex(literal.group("body"))
    try:
        compiled = re.compile(body, re.ASCII)
    except re.error as exc:
        raise ConfigurationError(f"Invalid regular expression {pattern!r}: {exc}") from exc
    return PatternMatcher(source=pattern, regex=compiled)


def _to_python_regex(body: str) -> str:
    # `(?<name>...)` / `\k<name>` are the JavaScript spellings of named groups.
    body = _NAMED_GROUP.sub("(?P<", body)
    return _NAMED_BACKREFERENCE.sub(lambda match: f"(?P={match.group('name')})", body)
