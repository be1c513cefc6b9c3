"""Command-line entrypoint: check default import/export names in JS/TS files."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from tqdm import tqdm

from defaultname.config import MatchDefaultExportNameOptions, load_options
from defaultname.diagnostics import Diagnostic
from defaultname.errors import ConfigurationError
from defaultname.lint import LintRunResult, run_lint_paths
from defaultname.resolve import MODULE_EXTENSIONS, SourceExportResolver
from defaultname.text import line_col


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="defaultname",
        description="Check that default imports and re-exports match the default export name.",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Files or directories to check.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help='JSON options file: {"ignore": [...], "overrides": [...]}.',
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Project root used to resolve bare specifiers via node_modules (defaults to .).",
    )
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while checking files.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose > 1 else logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = load_options(args.config) if args.config is not None else MatchDefaultExportNameOptions()
        files = _collect_files(args.paths)
        iterator = tqdm(files, desc="defaultname", unit="file") if args.progress else files
        results = run_lint_paths(iterator, options, resolver=SourceExportResolver(args.root))
    except ConfigurationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Failed to read sources: {exc}", file=sys.stderr)
        return 2

    count = 0
    for result in results:
        for diagnostic in result.diagnostics:
            print(format_diagnostic(result, diagnostic))
            count += 1
    if count:
        print(f"Found {count} problem(s) in {len(results)} file(s).", file=sys.stderr)
        return 1
    return 0


def format_diagnostic(result: LintRunResult, diagnostic: Diagnostic) -> str:
    line, column = line_col(result.source_text, diagnostic.range.start)
    location = f"{result.path}:{line}:{column}" if result.path is not None else f"{line}:{column}"
    rendered = f"{location}: {diagnostic.severity} {diagnostic.code} {diagnostic.message}"
    if diagnostic.hint:
        rendered += f" ({diagnostic.hint})"
    return rendered


def _collect_files(paths: list[Path]) -> list[Path]:
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(
                sorted(
                    candidate
                    for candidate in path.rglob("*")
                    if candidate.is_file()
                    and candidate.suffix in MODULE_EXTENSIONS
                    and "node_modules" not in candidate.parts
                )
            )
        else:
            files.append(path)
    return files


if __name__ == "__main__":
    raise SystemExit(main())
