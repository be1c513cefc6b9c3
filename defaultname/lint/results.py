"""Lint run result carriers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from defaultname.diagnostics import Diagnostic, has_errors
from defaultname.syntax import SpecifierOccurrence


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of running lint rules over one source text."""

    source_text: str
    diagnostics: list[Diagnostic]
    occurrences: tuple[SpecifierOccurrence, ...] = ()
    path: Path | None = None

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)
