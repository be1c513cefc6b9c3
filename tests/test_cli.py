import json
from pathlib import Path

import pytest

from defaultname.cli import main
from defaultname.config import MatchDefaultExportNameOptions, OverrideRule
from defaultname.lint import run_lint_paths


def _project(tmp_path: Path) -> Path:
    src = tmp_path / "src"
    src.mkdir()
    (src / "fn.js").write_text("export default function myFunction() {}\n", encoding="utf-8")
    (src / "app.js").write_text(
        'import wrong from "./fn";\nimport myFunction from "./fn";\nimport styles from "./app.module.css";\n',
        encoding="utf-8",
    )
    (src / "notes.txt").write_text('import wrong from "./fn";\n', encoding="utf-8")
    vendored = tmp_path / "src" / "node_modules" / "dep"
    vendored.mkdir(parents=True)
    (vendored / "index.js").write_text('import wrong from "../../fn";\n', encoding="utf-8")
    return src


def test_run_lint_paths_resolves_relative_modules(tmp_path: Path) -> None:
    src = _project(tmp_path)

    results = run_lint_paths([src / "app.js", src / "fn.js"], root=tmp_path)

    assert [result.path for result in results] == [src / "app.js", src / "fn.js"]
    assert [diagnostic.message for diagnostic in results[0].diagnostics] == [
        "Expected import 'wrong' to match the default export 'myFunction'."
    ]
    assert results[1].diagnostics == []


def test_run_lint_paths_applies_overrides(tmp_path: Path) -> None:
    src = _project(tmp_path)
    options = MatchDefaultExportNameOptions(
        overrides=(OverrideRule(module=r"/(\w+)\.module\.css$/", names=("$1Styles",)),),
    )

    results = run_lint_paths([src / "app.js"], options, root=tmp_path)

    assert [diagnostic.message for diagnostic in results[0].diagnostics] == [
        "Expected import 'wrong' to match the default export 'myFunction'.",
        "Expected import 'styles' to match 'appStyles'.",
    ]


def test_cli_reports_problems(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = _project(tmp_path)

    exit_code = main([str(src), "--root", str(tmp_path)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out.splitlines() == [
        f"{src / 'app.js'}:1:8: warning LINT_DEFAULT_EXPORT_NAME_MISMATCH "
        "Expected import 'wrong' to match the default export 'myFunction'. (Rename to `myFunction`.)"
    ]
    assert "Found 1 problem(s) in 2 file(s)." in captured.err


def test_cli_clean_run(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = _project(tmp_path)

    exit_code = main([str(src / "fn.js"), "--root", str(tmp_path), "--progress"])

    assert exit_code == 0
    assert capsys.readouterr().out == ""


def test_cli_reads_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = _project(tmp_path)
    config = tmp_path / "defaultname.json"
    config.write_text(json.dumps({"overrides": [{"module": "./fn", "name": ["wrong", "myFunction"]}]}), encoding="utf-8")

    exit_code = main([str(src / "app.js"), "--root", str(tmp_path), "--config", str(config)])

    assert exit_code == 0
    assert capsys.readouterr().out == ""


def test_cli_configuration_errors_exit_with_two(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = _project(tmp_path)
    config = tmp_path / "defaultname.json"
    config.write_text(json.dumps({"overrides": [{"module": "/[/", "name": "x"}]}), encoding="utf-8")

    assert main([str(src), "--config", str(config)]) == 2
    assert "Invalid configuration" in capsys.readouterr().err

    assert main([str(src), "--config", str(tmp_path / "missing.json")]) == 2
    assert "Cannot read config" in capsys.readouterr().err


def test_cli_missing_source_exits_with_two(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "missing.js")]) == 2
    assert "Failed to read sources" in capsys.readouterr().err


def test_cli_undecodable_source_exits_with_two(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "latin1.js"
    source.write_bytes(b'import caf\xe9 from "./cafe";\n\xff\xfe')

    assert main([str(source), "--root", str(tmp_path)]) == 2
    assert "Failed to read sources" in capsys.readouterr().err


def test_run_lint_paths_reports_syntax_errors_in_imported_module(tmp_path: Path) -> None:
    (tmp_path / "malformed.js").write_text("return 1;\nexport default function myFunction( {", encoding="utf-8")
    app = tmp_path / "app.js"
    app.write_text('import foo from "./malformed.js";\n', encoding="utf-8")

    (result,) = run_lint_paths([app], root=tmp_path)

    assert [(diagnostic.code, diagnostic.message) for diagnostic in result.diagnostics] == [
        (
            "LINT_IMPORT_RESOLUTION_ERROR",
            "Parse errors in imported module './malformed.js': 'return' outside of function (1:1)",
        )
    ]
