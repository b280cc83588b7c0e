from __future__ import annotations

"""
Report Assembly Stage.

Turns the per-file scan results, the project environment, and the
framework detection into the two persisted snapshots. Aggregation and
scoring are delegated to the aggregator service.
"""

from typing import List, Optional, Sequence

from frontbrain.core.services.aggregator import (
    aggregate_perf_presence,
    aggregate_type_totals,
    build_suggestions,
    compute_hygiene_score,
    summarize_component_typing,
)
from frontbrain.domain.report_models import (
    AnalysisReport,
    AnalysisSummary,
    FrameworkUsage,
    ScanWindow,
    StructureReport,
)
from frontbrain.domain.scan_models import (
    CodeSummary,
    ComponentSummary,
    SelfStats,
    TsConfigSummary,
)
from frontbrain.domain.tree_models import TreeNode


def build_analysis_report(
        components: Sequence[ComponentSummary],
        code: Sequence[CodeSummary],
        env_vars: List[str],
        tsconfigs: List[TsConfigSummary],
        framework: FrameworkUsage,
        self_stats: Optional[SelfStats],
        scan: ScanWindow,
) -> AnalysisReport:
    """
    Assemble the analysis report of one run.

    Args:
        components: Component summaries, walk order.
        code: Code summaries, walk order.
        env_vars: Declared environment keys.
        tsconfigs: Parsed typed-config summaries.
        framework: Framework usage detection result.
        self_stats: Engine self-scan, if its source was found.
        scan: Scan timing window.

    Returns:
        AnalysisReport: The complete report.
    """
    totals = aggregate_type_totals(code)
    perf = aggregate_perf_presence(code)
    typing_counts = summarize_component_typing(components)
    typed_props = typing_counts.define_props_typed_count

    summary = AnalysisSummary(
        components_scanned=len(components),
        files_scanned=len(code),
        env_vars=list(env_vars),
        tsconfigs=list(tsconfigs),
        ts_totals=totals,
        perf_presence=perf,
        component_typing=typing_counts,
        framework=framework,
        hygiene_score=compute_hygiene_score(totals, typed_props),
        suggestions=build_suggestions(totals, perf, typed_props, self_stats),
        self_stats=self_stats,
    )
    return AnalysisReport(
        summary=summary,
        components=list(components),
        code=list(code),
        scan=scan,
    )


def build_structure_report(
        tree: Sequence[TreeNode],
        tree_lines: List[str],
        scan: ScanWindow,
) -> StructureReport:
    """Assemble the structure snapshot with its text rendering."""
    return StructureReport(scan=scan, tree=tuple(tree), tree_view="\n".join(tree_lines))
