"""Override rules: module pattern -> candidate default-export names."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import logging
import re

from defaultname.config.options import OverrideRule
from defaultname.naming import CaseTransform, apply_case_transform
from defaultname.patterns.compile import Captures, PatternMatcher, compile_pattern

logger = logging.getLogger(__name__)

# `\$` is an escaped dollar sign; `$<n>` (n >= 1) is the n-th captured group.
_TEMPLATE_TOKEN = re.compile(r"\\\$|\$(?P<index>[1-9]\d*)")


@dataclass(frozen=True, slots=True)
class CompiledOverride:
    matcher: PatternMatcher
    names: tuple[str, ...]
    transform: CaseTransform = CaseTransform.NONE

    def resolve(self, module: str) -> tuple[str, ...] | None:
        captures = self.matcher.match(module)
        if captures is None:
            return None
        return tuple(
            apply_case_transform(substitute_captures(template, captures), self.transform)
            for template in self.names
        )


@dataclass(frozen=True, slots=True)
class OverrideResolver:
    """First-match-wins scan over the configured override rules."""

    overrides: tuple[CompiledOverride, ...] = ()

    @classmethod
    def from_rules(cls, rules: Iterable[OverrideRule]) -> OverrideResolver:
        return cls(
            overrides=tuple(
                CompiledOverride(
                    matcher=compile_pattern(rule.module),
                    names=tuple(rule.names),
                    transform=CaseTransform(rule.transform),
                )
                for rule in rules
            )
        )

    def resolve(self, module: str) -> tuple[str, ...] | None:
        for override in self.overrides:
            names = override.resolve(module)
            if names is not None:
                logger.debug("Module %r matched override %r -> %s", module, override.matcher.source, names)
                return names
        return None


def substitute_captures(template: str, captures: Captures) -> str:
    """Replace `$<n>` with the n-th capture (empty when absent) and `\\$` with `$`."""

    def replace(match: re.Match[str]) -> str:
        index = match.group("index")
        if index is None:
            return "$"
        position = int(index) - 1
        if position >= len(captures):
            return ""
        return captures[position] or ""

    return _TEMPLATE_TOKEN.sub(replace, template)
