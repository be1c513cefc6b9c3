"""Lint rules and rule contracts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Literal, Protocol, TypeAlias

from defaultname.config import MatchDefaultExportNameOptions
from defaultname.diagnostics import LINT_DEFAULT_EXPORT_NAME_MISMATCH, Diagnostic
from defaultname.naming import format_name_variants
from defaultname.patterns import IgnoreFilter, OverrideResolver
from defaultname.resolve import ExportResolver, NullExportResolver, report_resolution_errors
from defaultname.syntax import SpecifierOccurrence

logger = logging.getLogger(__name__)

LintDomain: TypeAlias = Literal["naming", "style"]
LintConfidence: TypeAlias = Literal["policy", "heuristic"]
CandidateSource: TypeAlias = Literal["override", "export"]


@dataclass(frozen=True, slots=True)
class LintContext:
    """Per-file state shared by every rule visit."""

    source_path: Path | None = None
    resolver: ExportResolver = field(default_factory=NullExportResolver)


@dataclass(frozen=True, slots=True)
class CandidateNames:
    """Acceptable names for one occurrence and where they came from."""

    names: tuple[str, ...]
    source: CandidateSource

    @property
    def phrase(self) -> str:
        return "to match" if self.source == "override" else "to match the default export"


class LintRule(Protocol):
    """Lint rule contract over the specifier occurrences of one file."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> str: ...

    @property
    def domain(self) -> LintDomain: ...

    @property
    def confidence(self) -> LintConfidence: ...

    def run(self, occurrences: Sequence[SpecifierOccurrence], context: LintContext) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class MatchDefaultExportNameRule:
    """Default imports and `export x from` re-exports must use the expected name.

    Override rules are authoritative when one matches the module specifier; otherwise the
    identifier declaring the imported module's default export is expected. Binding the
    name `default` is always accepted.
    """

    code: str = LINT_DEFAULT_EXPORT_NAME_MISMATCH.code
    name: str = "matchDefaultExportName"
    category: str = "naming"
    domain: LintDomain = "naming"
    confidence: LintConfidence = "policy"
    ignore_filter: IgnoreFilter = field(default_factory=IgnoreFilter.default)
    overrides: OverrideResolver = field(default_factory=OverrideResolver)

    @classmethod
    def from_options(cls, options: MatchDefaultExportNameOptions | None = None) -> MatchDefaultExportNameRule:
        """Compile options once; raises `ConfigurationError` for malformed patterns."""
        resolved = options or MatchDefaultExportNameOptions()
        return cls(
            ignore_filter=IgnoreFilter.from_patterns(resolved.ignore),
            overrides=OverrideResolver.from_rules(resolved.overrides),
        )

    def run(self, occurrences: Sequence[SpecifierOccurrence], context: LintContext) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for occurrence in occurrences:
            if occurrence.role == "import":
                diagnostics.extend(self.visit_import_default(occurrence, context))
            else:
                diagnostics.extend(self.visit_export_default(occurrence, context))
        return diagnostics

    def visit_import_default(self, occurrence: SpecifierOccurrence, context: LintContext) -> list[Diagnostic]:
        return self.check(occurrence, context)

    def visit_export_default(self, occurrence: SpecifierOccurrence, context: LintContext) -> list[Diagnostic]:
        return self.check(occurrence, context)

    def check(self, occurrence: SpecifierOccurrence, context: LintContext) -> list[Diagnostic]:
        if occurrence.name == "default":
            return []

        diagnostics: list[Diagnostic] = []
        candidates = self.candidate_names(occurrence, context, diagnostics)
        if candidates is None or not candidates.names:
            return diagnostics
        if occurrence.name in candidates.names:
            return diagnostics

        spec = LINT_DEFAULT_EXPORT_NAME_MISMATCH
        diagnostics.append(
            Diagnostic(
                code=self.code,
                message=(
                    f"Expected {occurrence.role} '{occurrence.name}' "
                    f"{candidates.phrase} {format_name_variants(candidates.names)}."
                ),
                range=occurrence.range,
                severity=spec.severity,
                hint=f"Rename to `{candidates.names[0]}`.",
                category=spec.category,
            )
        )
        return diagnostics

    def candidate_names(
        self,
        occurrence: SpecifierOccurrence,
        context: LintContext,
        diagnostics: list[Diagnostic],
    ) -> CandidateNames | None:
        custom = self.overrides.resolve(occurrence.module)
        if custom is not None:
            return CandidateNames(names=custom, source="override")
        names = lookup_default_export_names(occurrence, context, self.ignore_filter, diagnostics)
        if names is None:
            return None
        return CandidateNames(names=names, source="export")


def lookup_default_export_names(
    occurrence: SpecifierOccurrence,
    context: LintContext,
    ignore_filter: IgnoreFilter,
    diagnostics: list[Diagnostic],
) -> tuple[str, ...] | None:
    """Name of the identifier declaring the imported module's default export, if known.

    Resolution errors are appended to `diagnostics`; ignored, unresolvable and
    anonymous-default modules yield `None`.
    """
    if ignore_filter.is_ignored(occurrence.module):
        logger.debug("Skipping ignored module %r", occurrence.module)
        return None

    export_info = context.resolver.resolve_exports(occurrence.module, context.source_path)
    if export_info is None:
        return None
    if ignore_filter.is_ignored(export_info.resolved_path):
        logger.debug("Skipping ignored module path %s", export_info.resolved_path)
        return None

    if export_info.errors:
        diagnostics.extend(report_resolution_errors(occurrence, export_info))
        return None

    if not export_info.has_default or not export_info.default_identifier_name:
        return None
    return (export_info.default_identifier_name,)


def default_lint_rules(options: MatchDefaultExportNameOptions | None = None) -> tuple[LintRule, ...]:
    rules: list[LintRule] = [MatchDefaultExportNameRule.from_options(options)]
    return tuple(sorted(rules, key=lambda rule: (rule.category, rule.code, rule.name)))


def validate_lint_rules(rules: Sequence[LintRule]) -> None:
    allowed_domains = {"naming", "style"}
    allowed_confidence = {"policy", "heuristic"}
    for rule in rules:
        if rule.domain not in allowed_domains:
            raise ValueError(f"Lint rule `{rule.name}` has invalid domain `{rule.domain}`; expected naming/style.")
        if rule.confidence not in allowed_confidence:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid confidence `{rule.confidence}`; expected policy/heuristic."
            )
        if not rule.code.startswith("LINT_"):
            raise ValueError(f"Lint rule `{rule.name}` has invalid code `{rule.code}`; expected `LINT_` prefix.")
