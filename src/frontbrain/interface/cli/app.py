from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration resolution
(defaults, project config file, and CLI overrides), pipeline execution, and
console rendering of the resulting reports.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from frontbrain.core.pipeline.engine import run_pipeline
from frontbrain.core.pipeline.validator import validate_config
from frontbrain.domain.config import get_default_config, load_config
from frontbrain.domain.pipeline_models import PipelineResult
from frontbrain.domain.tree_models import count_nodes
from frontbrain.infra.logging import LoggingConfig, configure_logging, get_logger
from frontbrain.interface.cli import args as cli_args

logger = get_logger(__name__)

BANNER_RULE = "=" * 38

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, 1 for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (defaults vs project file)
    if args.use_defaults:
        base_conf = get_default_config(args.project_root)
    else:
        base_conf = load_config(args.project_root)

    # 4. Merge overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 5. Pipeline execution phase
    try:
        result = run_pipeline(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Scan interrupted by user.")
        print("Scan interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        msg = f"Scan aborted, no report was written: {e}"
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    if args.json_output and result.analysis is not None:
        print(json.dumps(result.analysis.to_dict(), ensure_ascii=False, indent=2))
    else:
        for line in render_console_summary(result, show_tree=bool(clean_conf["print_tree"])):
            print(line)

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None override values into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def render_console_summary(result: PipelineResult, show_tree: bool = True) -> List[str]:
    """
    Build the ordered console lines summarizing a successful run.

    Args:
        result: Successful pipeline result.
        show_tree: Include the tree overview block.

    Returns:
        List[str]: Lines to print, in order.
    """
    if result.analysis is None:
        return []

    root = result.project_root
    summary = result.analysis.summary
    scan = result.analysis.scan
    totals = summary.ts_totals
    perf = summary.perf_presence
    typing_counts = summary.component_typing
    framework = summary.framework

    lines: List[str] = []
    for path in result.output_paths.values():
        lines.append(f"Saved: {os.path.relpath(path, root)}")
    if not result.output_paths:
        lines.append("Dry run: no report was written.")

    if show_tree:
        lines += ["", BANNER_RULE, "PROJECT OVERVIEW".center(len(BANNER_RULE)), BANNER_RULE]
        lines += result.tree_lines

    lines.append("")
    lines.append(f"Scan: {scan.started_iso} -> {scan.ended_iso}  ({scan.duration_ms} ms)")
    tree_nodes = count_nodes(result.structure.tree) if result.structure is not None else 0
    lines.append(
        f"Components: {summary.components_scanned} | Code files: {summary.files_scanned}"
        f" | Tree nodes: {tree_nodes}"
    )

    lines += ["", "--- TypeScript Hygiene ---", f"Score: {summary.hygiene_score}/100"]
    lines.append(
        f"any:{totals.any_count}  @ts-ignore:{totals.ts_ignore_count}  "
        f"@ts-expect-error:{totals.ts_expect_error_count}  !!:{totals.non_null_assertion_count}"
    )
    lines.append(
        f"as const:{totals.as_const_count}  satisfies:{totals.satisfies_count}  "
        f"interfaces:{totals.interface_count}  types:{totals.type_alias_count}"
    )

    lines += ["", "--- Vue SFC Typing ---"]
    lines.append(
        f"script setup lang=ts: {typing_counts.script_setup_ts_count} | "
        f"defineProps<T>: {typing_counts.define_props_typed_count} | "
        f"runtime defineProps: {typing_counts.define_props_runtime_count}"
    )

    lines += ["", "--- Perf Signals (any present?) ---"]
    lines.append(
        f"performance.now:{_flag(perf.performance_now)}  "
        f"requestIdleCallback:{_flag(perf.request_idle_callback)}  "
        f"IntersectionObserver:{_flag(perf.intersection_observer)}  "
        f"console.time:{_flag(perf.console_time)}  "
        f"dynamic import():{_flag(perf.dynamic_import)}"
    )

    if summary.self_stats:
        s = summary.self_stats
        lines += ["", "--- Engine (self) ---"]
        lines.append(
            f"{s.path}  lines:{s.lines}  bytes:{s.bytes}  maxLine:{s.max_line_len}  "
            f"funcs~:{s.function_like_count}  TODO:{s.todo_count}  FIXME:{s.fixme_count}"
        )

    if summary.suggestions:
        lines += ["", "--- Suggestions ---"]
        lines += [f"- {s}" for s in summary.suggestions]

    lines.append("")
    if framework.tags_without_plugin:
        lines.append(
            f"WARNING: Vuetify-like tags detected ({', '.join(framework.used_tags)}) "
            f"but no vuetify plugin found."
        )
    elif framework.plugin_detected:
        lines.append(f"Vuetify plugin detected at {framework.plugin_path}")
    else:
        lines.append("No Vuetify usage detected.")

    return lines


def _flag(value: bool) -> str:
    return "true" if value else "false"

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
