from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Verifies:
1. Console summary rendering order and framework status lines.
2. Exit codes for success, missing source directory, and scan failures.
3. Configuration dump and JSON output modes.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from frontbrain.core.pipeline.engine import run_pipeline
from frontbrain.infra.logging import shutdown_logging
from frontbrain.interface.cli.app import main, render_console_summary


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    shutdown_logging()
    yield
    shutdown_logging()


def _cli_args(project: Path, *extra: str):
    return ["-r", str(project), "--self-path", "ADD/brain.ts", "--use-defaults", *extra]

# -----------------------------------------------------------------------------
# Console Rendering
# -----------------------------------------------------------------------------

def test_summary_sections_in_order(project_config) -> None:
    result = run_pipeline(project_config, dry_run=True)
    lines = render_console_summary(result)

    markers = [
        "Dry run: no report was written.",
        "PROJECT OVERVIEW",
        "📁 src/",
        "--- TypeScript Hygiene ---",
        "Score: 94/100",
        "--- Vue SFC Typing ---",
        "--- Perf Signals (any present?) ---",
        "--- Engine (self) ---",
        "--- Suggestions ---",
    ]
    positions = [next(i for i, line in enumerate(lines) if marker in line) for marker in markers]
    assert positions == sorted(positions)

    assert lines[-1].startswith("WARNING: Vuetify-like tags detected (")
    assert lines[-1].endswith("but no vuetify plugin found.")


def test_summary_without_tree(project_config) -> None:
    result = run_pipeline(project_config, dry_run=True)
    lines = render_console_summary(result, show_tree=False)

    assert not any("PROJECT OVERVIEW" in line for line in lines)
    assert "📁 src/" not in lines


def test_summary_counts_tree_nodes(project_config) -> None:
    result = run_pipeline(project_config, dry_run=True)
    lines = render_console_summary(result, show_tree=False)

    counts = next(line for line in lines if line.startswith("Components:"))
    assert counts == "Components: 2 | Code files: 3 | Tree nodes: 4"


def test_summary_lists_saved_files(project_config) -> None:
    result = run_pipeline(project_config)
    lines = render_console_summary(result)

    assert lines[:3] == [
        "Saved: " + str(Path("ADD", "memory", "frontendMemory.json")),
        "Saved: " + str(Path("ADD", "memory", "structure.json")),
        "Saved: " + str(Path("ADD", "memory", "structure.txt")),
    ]


def test_summary_plugin_detected(frontend_project, project_config) -> None:
    plugins = frontend_project / "src" / "plugins"
    plugins.mkdir()
    (plugins / "vuetify.ts").write_text("export default createVuetify()\n", encoding="utf-8")

    lines = render_console_summary(run_pipeline(project_config, dry_run=True))

    assert lines[-1] == "Vuetify plugin detected at " + str(Path("src", "plugins", "vuetify.ts"))


def test_summary_no_framework_usage(tmp_path: Path) -> None:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "util.ts").write_text("export const a = 1\n", encoding="utf-8")

    result = run_pipeline({"project_root": str(tmp_path), "self_path": "missing.ts"}, dry_run=True)
    lines = render_console_summary(result)

    assert lines[-1] == "No Vuetify usage detected."
    assert not any("--- Engine (self) ---" in line for line in lines)

# -----------------------------------------------------------------------------
# Controller Exit Codes
# -----------------------------------------------------------------------------

def test_main_success(frontend_project, capsys) -> None:
    code = main(_cli_args(frontend_project))
    out = capsys.readouterr().out

    assert code == 0
    assert "Score: 94/100" in out
    assert (frontend_project / "ADD" / "memory" / "frontendMemory.json").exists()


def test_main_missing_source_dir(tmp_path: Path, capsys) -> None:
    code = main(["-r", str(tmp_path), "--use-defaults"])
    err = capsys.readouterr().err

    assert code == 1
    assert "ERROR: Source directory not found" in err
    assert not (tmp_path / "ADD").exists()


def test_main_scan_failure_exits_one(frontend_project, capsys) -> None:
    with patch("frontbrain.core.scanners.code_scanner.read_text", side_effect=PermissionError("denied")):
        code = main(_cli_args(frontend_project))

    assert code == 1
    assert "Scan aborted, no report was written" in capsys.readouterr().err
    assert not (frontend_project / "ADD" / "memory").exists()


def test_main_keyboard_interrupt(frontend_project) -> None:
    with patch("frontbrain.interface.cli.app.run_pipeline", side_effect=KeyboardInterrupt):
        assert main(_cli_args(frontend_project)) == 130


def test_main_dump_config(frontend_project, capsys) -> None:
    code = main(_cli_args(frontend_project, "--memory-dir", "out", "--no-tree", "--dump-config"))
    data = json.loads(capsys.readouterr().out)

    assert code == 0
    assert data["project_root"] == str(frontend_project)
    assert data["memory_dir"] == "out"
    assert data["print_tree"] is False
    assert not (frontend_project / "out").exists()


def test_main_json_dry_run(frontend_project, capsys) -> None:
    code = main(_cli_args(frontend_project, "--json", "--dry-run"))
    data = json.loads(capsys.readouterr().out)

    assert code == 0
    assert data["summary"]["tsHygieneScore"] == 94
    assert not (frontend_project / "ADD" / "memory").exists()


def test_main_reads_project_config_file(frontend_project, capsys) -> None:
    (frontend_project / ".frontbrain.json").write_text(
        json.dumps({"memory_dir": "reports", "self_path": "ADD/brain.ts"}), encoding="utf-8"
    )

    code = main(["-r", str(frontend_project)])

    assert code == 0
    assert (frontend_project / "reports" / "structure.txt").exists()
