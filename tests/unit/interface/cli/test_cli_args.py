from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Handling of boolean flags (store_true).
3. Unset options stay None so they never mask the project config.
"""

from frontbrain.interface.cli.app import _merge_config
from frontbrain.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_path_options_mapping():
    args = parse_args([
        "-r", "/work/app",
        "--src", "client",
        "--memory-dir", "out/memory",
        "--self-path", "ADD/brain.ts",
    ])

    overrides = args_to_overrides(args)

    assert overrides["project_root"] == "/work/app"
    assert overrides["source_dir"] == "client"
    assert overrides["memory_dir"] == "out/memory"
    assert overrides["self_path"] == "ADD/brain.ts"


def test_no_tree_flag():
    assert args_to_overrides(parse_args(["--no-tree"]))["print_tree"] is False
    assert "print_tree" not in args_to_overrides(parse_args([]))


def test_flags_default_off():
    args = parse_args([])

    assert args.json_output is False
    assert args.dry_run is False
    assert args.use_defaults is False
    assert args.dump_config is False
    assert args.debug is False
    assert args.log_file is None


def test_unset_options_do_not_override():
    base = {"source_dir": "app", "memory_dir": "mem", "print_tree": True}
    merged = _merge_config(base, args_to_overrides(parse_args(["--memory-dir", "other"])))

    assert merged["source_dir"] == "app"
    assert merged["memory_dir"] == "other"
    assert merged["print_tree"] is True
