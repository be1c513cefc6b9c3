"""Export-resolution contracts consumed by the default export name check."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Protocol


@dataclass(frozen=True, slots=True)
class ResolutionError:
    """One problem met while resolving or parsing an imported module."""

    message: str
    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} ({self.line}:{self.column})"


@dataclass(frozen=True, slots=True)
class ExportInfo:
    """Declared default-export surface of one resolved module."""

    resolved_path: str
    has_default: bool = False
    default_identifier_name: str | None = None
    errors: tuple[ResolutionError, ...] = ()


class ExportResolver(Protocol):
    """Resolves a module specifier, as written in the importing file, to its exports."""

    def resolve_exports(self, module: str, importer: Path | None) -> ExportInfo | None: ...


@dataclass(frozen=True, slots=True)
class NullExportResolver:
    """Default resolver when no project is configured: nothing resolves."""

    def resolve_exports(self, module: str, importer: Path | None) -> ExportInfo | None:
        return None


@dataclass(frozen=True, slots=True)
class MappingExportResolver:
    """Simple in-memory resolver keyed by module specifier, for tests and local wiring."""

    exports_by_module: Mapping[str, ExportInfo] = field(default_factory=lambda: MappingProxyType({}))

    def resolve_exports(self, module: str, importer: Path | None) -> ExportInfo | None:
        return self.exports_by_module.get(module)
