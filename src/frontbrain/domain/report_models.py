from __future__ import annotations

"""
Report Domain Data Models.

Defines the two persisted snapshots (analysis report and structure report)
and the intermediate summary blocks assembled by the aggregator.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from frontbrain.domain.scan_models import (
    CodeSummary,
    ComponentSummary,
    PerformanceSignals,
    SelfStats,
    TsConfigSummary,
    TypeSystemSignals,
)
from frontbrain.domain.tree_models import TreeNode

# -----------------------------------------------------------------------------
# SUMMARY BLOCKS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanWindow:
    """Start/end timestamps of a scan and its elapsed time in milliseconds."""
    started_iso: str
    ended_iso: str
    duration_ms: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startedIso": self.started_iso,
            "endedIso": self.ended_iso,
            "durationMs": self.duration_ms,
        }


@dataclass(frozen=True)
class FrameworkUsage:
    """
    Result of the UI framework usage detection.

    Attributes:
        plugin_path: Root-relative path of the plugin-init module, if any.
        used_tags: Deduplicated framework-style template tags.
    """
    plugin_path: Optional[str] = None
    used_tags: List[str] = field(default_factory=list)

    @property
    def plugin_detected(self) -> bool:
        return self.plugin_path is not None

    @property
    def tags_without_plugin(self) -> bool:
        """Framework tags are used but no plugin initializes the framework."""
        return not self.plugin_detected and bool(self.used_tags)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pluginPath": self.plugin_path,
            "usedTags": list(self.used_tags),
            "pluginDetected": self.plugin_detected,
            "tagsWithoutPlugin": self.tags_without_plugin,
        }


@dataclass(frozen=True)
class ComponentTyping:
    """Adoption counts of typed component constructs."""
    script_setup_ts_count: int = 0
    define_props_typed_count: int = 0
    define_props_runtime_count: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "scriptSetupTsCount": self.script_setup_ts_count,
            "definePropsTypedCount": self.define_props_typed_count,
            "definePropsRuntimeCount": self.define_props_runtime_count,
        }


@dataclass(frozen=True)
class AnalysisSummary:
    """Repository-wide aggregate block of the analysis report."""
    components_scanned: int
    files_scanned: int
    env_vars: List[str]
    tsconfigs: List[TsConfigSummary]
    ts_totals: TypeSystemSignals
    perf_presence: PerformanceSignals
    component_typing: ComponentTyping
    framework: FrameworkUsage
    hygiene_score: int
    suggestions: List[str]
    self_stats: Optional[SelfStats] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "componentsScanned": self.components_scanned,
            "filesScanned": self.files_scanned,
            "envVars": list(self.env_vars),
            "tsconfigs": [t.to_dict() for t in self.tsconfigs],
            "tsTotals": self.ts_totals.to_dict(),
            "perfPresence": self.perf_presence.to_dict(),
            "vueSfc": self.component_typing.to_dict(),
            "vuetify": self.framework.to_dict(),
            "tsHygieneScore": self.hygiene_score,
            "suggestions": list(self.suggestions),
            "self": self.self_stats.to_dict() if self.self_stats else None,
        }

# -----------------------------------------------------------------------------
# PERSISTED SNAPSHOTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisReport:
    """Root persisted object with the full analysis of one run."""
    summary: AnalysisSummary
    components: List[ComponentSummary]
    code: List[CodeSummary]
    scan: ScanWindow

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "vue": [c.to_dict() for c in self.components],
            "code": [c.to_dict() for c in self.code],
            "scan": self.scan.to_dict(),
        }


@dataclass(frozen=True)
class StructureReport:
    """File-tree snapshot with its precomputed text rendering."""
    scan: ScanWindow
    tree: Tuple[TreeNode, ...]
    tree_view: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scan": self.scan.to_dict(),
            "tree": [node.to_dict() for node in self.tree],
            "treeView": self.tree_view,
        }
