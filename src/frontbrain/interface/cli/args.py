from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the frontbrain CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="frontbrain",
        description="Scan a frontend source tree and persist structure and hygiene reports.",
    )

    # --- Path Management ---
    p.add_argument(
        "-r", "--root",
        dest="project_root",
        default=None,
        help="Project root (defaults to the current directory).",
    )
    p.add_argument(
        "--src",
        dest="source_dir",
        default=None,
        help="Source directory to walk, relative to the root (default: src).",
    )
    p.add_argument(
        "--memory-dir",
        dest="memory_dir",
        default=None,
        help="Report destination, relative to the root (default: ADD/memory).",
    )
    p.add_argument(
        "--self-path",
        dest="self_path",
        default=None,
        help="Source file used for the self scan (default: the engine module).",
    )

    # --- Output ---
    p.add_argument(
        "--no-tree",
        action="store_true",
        help="Omit the tree overview from the console summary.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the analysis report as JSON instead of the summary.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Scan and report without writing any file.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the project configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "project_root": args.project_root,
        "source_dir": args.source_dir,
        "memory_dir": args.memory_dir,
        "self_path": args.self_path,
    }

    if args.no_tree:
        overrides["print_tree"] = False

    return overrides
