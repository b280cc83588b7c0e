from __future__ import annotations

"""
Unit tests for the Project Environment Readers.
"""

import json
from pathlib import Path

from frontbrain.core.services.environment import read_env_keys, read_tsconfigs, summarize_tsconfig


def test_env_keys_deduplicated_across_files(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("VITE_A=1\n# comment\nVITE_B = 2\n", encoding="utf-8")
    (tmp_path / ".env.production").write_text("VITE_A=3\nAPI_KEY=x\n", encoding="utf-8")
    (tmp_path / "notenv").write_text("OTHER=1\n", encoding="utf-8")

    assert read_env_keys(str(tmp_path)) == ["VITE_A", "VITE_B", "API_KEY"]


def test_env_key_shape(tmp_path: Path) -> None:
    """Lowercase names and lines without '=' are not keys."""
    (tmp_path / ".env").write_text("lower=1\n  INDENTED_1=2\nNO_EQUALS\n", encoding="utf-8")
    assert read_env_keys(str(tmp_path)) == ["INDENTED_1"]


def test_env_directories_ignored(tmp_path: Path) -> None:
    (tmp_path / ".env.d").mkdir()
    assert read_env_keys(str(tmp_path)) == []


def test_tsconfig_subset(tmp_path: Path) -> None:
    (tmp_path / "tsconfig.json").write_text(json.dumps({
        "extends": "./base.json",
        "compilerOptions": {
            "strict": True,
            "skipLibCheck": False,
            "moduleResolution": "bundler",
            "target": "ES2022",
        },
    }), encoding="utf-8")

    found = read_tsconfigs(str(tmp_path))

    assert len(found) == 1
    assert found[0].to_dict() == {
        "path": "tsconfig.json",
        "extends": "./base.json",
        "strict": True,
        "skipLibCheck": False,
        "moduleResolution": "bundler",
    }


def test_unparseable_and_missing_tsconfigs_skipped(tmp_path: Path) -> None:
    (tmp_path / "tsconfig.app.json").write_text("{ // nope\n}", encoding="utf-8")
    (tmp_path / "tsconfig.add.json").write_text('{"compilerOptions": {"strict": false}}', encoding="utf-8")

    found = read_tsconfigs(str(tmp_path))

    assert [t.path for t in found] == ["tsconfig.add.json"]
    assert found[0].strict is False


def test_non_object_tsconfig_skipped(tmp_path: Path) -> None:
    (tmp_path / "tsconfig.json").write_text("[1, 2]", encoding="utf-8")
    assert read_tsconfigs(str(tmp_path)) == []


def test_summarize_without_compiler_options() -> None:
    summary = summarize_tsconfig("tsconfig.json", {"compilerOptions": "bogus"})
    assert summary.to_dict() == {"path": "tsconfig.json"}
