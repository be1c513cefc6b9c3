"""Lint runner over JS/TS module sources."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging
from pathlib import Path

from defaultname.config import MatchDefaultExportNameOptions
from defaultname.diagnostics import collect_diagnostics, sort_diagnostics
from defaultname.lint.results import LintRunResult
from defaultname.lint.rules import LintContext, LintRule, default_lint_rules, validate_lint_rules
from defaultname.resolve import ExportResolver, NullExportResolver, SourceExportResolver
from defaultname.syntax import language_for_path, scan_specifiers

logger = logging.getLogger(__name__)


def run_lint(
    text: str,
    options: MatchDefaultExportNameOptions | None = None,
    *,
    path: str | Path | None = None,
    resolver: ExportResolver | None = None,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    """Scan one source text for default import/export specifiers and run the lint rules."""
    resolved_rules = _resolve_rules(options=options, rules=rules)
    source_path = Path(path) if path is not None else None
    context = LintContext(source_path=source_path, resolver=resolver or NullExportResolver())
    return _run(text, source_path=source_path, context=context, rules=resolved_rules)


def run_lint_paths(
    paths: Iterable[str | Path],
    options: MatchDefaultExportNameOptions | None = None,
    *,
    root: str | Path | None = None,
    resolver: ExportResolver | None = None,
    rules: Sequence[LintRule] | None = None,
) -> list[LintRunResult]:
    """Lint files on disk, sharing one rule set and one (caching) resolver across them.

    Unreadable sources raise `OSError`, sources that are not UTF-8 `UnicodeDecodeError`.
    """
    resolved_rules = _resolve_rules(options=options, rules=rules)
    shared_resolver = resolver or SourceExportResolver(root if root is not None else Path.cwd())

    results: list[LintRunResult] = []
    for path_like in paths:
        source_path = Path(path_like)
        text = source_path.read_text(encoding="utf-8")
        context = LintContext(source_path=source_path, resolver=shared_resolver)
        results.append(_run(text, source_path=source_path, context=context, rules=resolved_rules))
    return results


def _run(
    text: str,
    *,
    source_path: Path | None,
    context: LintContext,
    rules: tuple[LintRule, ...],
) -> LintRunResult:
    occurrences = scan_specifiers(text, language=language_for_path(source_path))
    logger.debug("Found %d specifier occurrence(s) in %s", len(occurrences), source_path or "<text>")

    diagnostics = collect_diagnostics(*(rule.run(occurrences, context) for rule in rules))

    return LintRunResult(
        source_text=text,
        diagnostics=sort_diagnostics(diagnostics),
        occurrences=occurrences,
        path=source_path,
    )


def _resolve_rules(
    *,
    options: MatchDefaultExportNameOptions | None,
    rules: Sequence[LintRule] | None,
) -> tuple[LintRule, ...]:
    if rules is not None:
        if options is not None:
            raise ValueError("Pass either rules or options, not both")
        resolved = tuple(rules)
    else:
        resolved = default_lint_rules(options)
    validate_lint_rules(resolved)
    return resolved
