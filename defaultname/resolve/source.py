"""File-system export resolver that reads module sources under a project root."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Final

from defaultname.resolve.exports import ExportInfo, ResolutionError
from defaultname.syntax import find_default_export, language_for_path
from defaultname.text import line_col

logger = logging.getLogger(__name__)

MODULE_EXTENSIONS: Final[tuple[str, ...]] = (".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx", ".mts", ".cts")


class SourceExportResolver:
    """Resolves specifiers to files and extracts their default export from source text.

    Relative specifiers resolve against the importing file's directory (or the root when
    there is no importer), bare specifiers against `root/node_modules`. A path resolves to
    the file itself, the file with one of `MODULE_EXTENSIONS` appended, or an `index`
    file in the directory; packages may point elsewhere through `module`/`main` in their
    `package.json`. Files with other extensions (stylesheets, images, ...) do not resolve.
    Results are cached per resolved path.
    """

    def __init__(self, root: str | Path = ".") -> None:
        self._root = Path(root).resolve()
        self._cache: dict[Path, ExportInfo] = {}

    @property
    def root(self) -> Path:
        return self._root

    def resolve_exports(self, module: str, importer: Path | None) -> ExportInfo | None:
        path = self.resolve_path(module, importer)
        if path is None:
            logger.debug("Could not locate module %r imported from %s", module, importer)
            return None
        cached = self._cache.get(path)
        if cached is None:
            cached = self._read_exports(path)
            self._cache[path] = cached
        return cached

    def resolve_path(self, module: str, importer: Path | None) -> Path | None:
        if not module:
            return None
        if module.startswith(("./", "../")) or module in (".", ".."):
            base = importer.resolve().parent if importer is not None else self._root
            return _resolve_file(base / module)
        if module.startswith("/"):
            return _resolve_file(Path(module))
        return _resolve_package(self._root / "node_modules" / module)

    def _read_exports(self, path: Path) -> ExportInfo:
        resolved = path.as_posix()
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read module %s: %s", resolved, exc)
            return ExportInfo(resolved_path=resolved, errors=(ResolutionError(str(exc)),))

        scan = find_default_export(text, language=language_for_path(path))
        errors: list[ResolutionError] = []
        # Only the first syntax error is reported.
        first_error = next((diagnostic for diagnostic in scan.diagnostics if diagnostic.severity == "error"), None)
        if first_error is not None:
            line, column = line_col(text, first_error.range.start)
            errors.append(ResolutionError(first_error.message, line=line, column=column))
        return ExportInfo(
            resolved_path=resolved,
            has_default=scan.has_default,
            default_identifier_name=scan.identifier_name,
            errors=tuple(errors),
        )


def _resolve_file(candidate: Path) -> Path | None:
    if candidate.is_file():
        return candidate.resolve() if candidate.suffix in MODULE_EXTENSIONS else None
    for extension in MODULE_EXTENSIONS:
        with_extension = Path(f"{candidate}{extension}")
        if with_extension.is_file():
            return with_extension.resolve()
    if candidate.is_dir():
        for extension in MODULE_EXTENSIONS:
            index = candidate / f"index{extension}"
            if index.is_file():
                return index.resolve()
    return None


def _resolve_package(candidate: Path) -> Path | None:
    manifest = candidate / "package.json"
    if manifest.is_file():
        try:
            data = json.loads(manifest.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable package manifest %s: %s", manifest, exc)
        else:
            for key in ("module", "main"):
                entry = data.get(key) if isinstance(data, dict) else None
                if isinstance(entry, str) and entry:
                    resolved = _resolve_file(candidate / entry)
                    if resolved is not None:
                        return resolved
    return _resolve_file(candidate)
