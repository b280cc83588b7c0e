from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates one full introspection run:
1. Validates configuration and checks the source directory exists.
2. Walks the source tree and classifies files.
3. Scans every component and code file.
4. Reads environment keys, typed-config files, and framework usage.
5. Scans the engine's own source.
6. Aggregates signals into the analysis and structure reports.
7. Persists the three artifacts to the memory directory.

The run is strictly sequential. Nothing is written until every scan has
completed, so a failing read never leaves a partial snapshot behind.
"""

import logging
import os
import time
from typing import Any, Dict, Optional

from frontbrain.core.analysis.tree_renderer import render_tree_view, tree_header
from frontbrain.core.analysis.tree_walker import walk_source_tree
from frontbrain.core.pipeline.report_builder import build_analysis_report, build_structure_report
from frontbrain.core.pipeline.validator import validate_config
from frontbrain.core.pipeline.writer import persist_reports
from frontbrain.core.scanners.code_scanner import scan_code
from frontbrain.core.scanners.component_scanner import scan_component
from frontbrain.core.scanners.self_scanner import scan_self
from frontbrain.core.services.environment import read_env_keys, read_tsconfigs
from frontbrain.core.services.framework import detect_framework_usage
from frontbrain.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)
from frontbrain.domain.report_models import ScanWindow
from frontbrain.infra.fs import normalize_path, resolve_under
from frontbrain.utils.timefmt import elapsed_ms, iso_from_timestamp

logger = logging.getLogger(__name__)


def default_self_path() -> str:
    """Path of the engine's own source module, the default self-scan target."""
    return os.path.abspath(__file__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
) -> PipelineResult:
    """
    Execute the full introspection pipeline.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: If True, build the reports without writing them.

    Returns:
        PipelineResult: Object containing status, reports, and artifact paths.

    Raises:
        OSError: If an enumerated file cannot be stat-ed or read.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Precondition
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    project_root = normalize_path(cfg["project_root"], os.getcwd())
    src_dir = resolve_under(project_root, cfg["source_dir"])
    memory_dir = resolve_under(project_root, cfg["memory_dir"])

    if not os.path.isdir(src_dir):
        msg = f"Source directory not found: {src_dir}"
        logger.error(msg)
        return create_error_result(msg, project_root, src_dir, warnings)

    started = time.time()

    # -------------------------------------------------------------------------
    # 2) Walk & Per-File Scans
    # -------------------------------------------------------------------------
    walk = walk_source_tree(src_dir, project_root)
    components = [scan_component(p, project_root) for p in walk.component_files]
    code = [scan_code(p, project_root) for p in walk.code_files]
    logger.info(f"Scanned {len(components)} components and {len(code)} code files.")

    # -------------------------------------------------------------------------
    # 3) Environment, Framework & Self
    # -------------------------------------------------------------------------
    env_vars = read_env_keys(project_root)
    tsconfigs = read_tsconfigs(project_root)
    framework = detect_framework_usage(project_root, src_dir, components)

    self_target = resolve_under(project_root, cfg["self_path"]) if cfg["self_path"] else default_self_path()
    self_stats = scan_self(self_target, project_root)

    ended = time.time()
    scan = ScanWindow(
        started_iso=iso_from_timestamp(started),
        ended_iso=iso_from_timestamp(ended),
        duration_ms=elapsed_ms(started, ended),
    )

    # -------------------------------------------------------------------------
    # 4) Assembly
    # -------------------------------------------------------------------------
    tree_lines = render_tree_view(walk.tree, tree_header(os.path.basename(src_dir)))
    analysis = build_analysis_report(
        components, code, env_vars, tsconfigs, framework, self_stats, scan
    )
    structure = build_structure_report(walk.tree, tree_lines, scan)

    # -------------------------------------------------------------------------
    # 5) Persistence
    # -------------------------------------------------------------------------
    if dry_run:
        logger.info(f"Dry run: skipping report persistence to {memory_dir}.")
        output_paths: Dict[str, str] = {}
    else:
        output_paths = persist_reports(analysis, structure, memory_dir)

    logger.info(f"Pipeline completed in {scan.duration_ms} ms.")
    return create_success_result(
        project_root, src_dir, analysis, structure, tree_lines, output_paths, warnings
    )
