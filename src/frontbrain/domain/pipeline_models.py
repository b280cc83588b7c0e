from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object exchanged between the pipeline engine and the
interface layer, plus factory functions for its success and error forms.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from frontbrain.domain.report_models import AnalysisReport, StructureReport

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete pipeline execution.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        project_root: Normalized project root that was analysed.
        source_dir: Absolute source directory that was walked.
        analysis: Assembled analysis report (None on failure).
        structure: Assembled structure report (None on failure).
        tree_lines: Rendered tree view lines, header included.
        output_paths: Artifact name to absolute path of each written file.
        warnings: Non-fatal configuration warnings.
    """
    ok: bool
    error: str

    project_root: str
    source_dir: str

    analysis: Optional[AnalysisReport] = None
    structure: Optional[StructureReport] = None
    tree_lines: List[str] = field(default_factory=list)
    output_paths: Dict[str, str] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        project_root: str,
        source_dir: str,
        warnings: Optional[List[str]] = None,
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        project_root: The analysed project root.
        source_dir: The source directory that was expected.
        warnings: Configuration warnings gathered before the failure.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error=error,
        project_root=project_root,
        source_dir=source_dir,
        warnings=warnings or [],
    )


def create_success_result(
        project_root: str,
        source_dir: str,
        analysis: AnalysisReport,
        structure: StructureReport,
        tree_lines: List[str],
        output_paths: Dict[str, str],
        warnings: Optional[List[str]] = None,
) -> PipelineResult:
    """Create a successful pipeline result instance."""
    return PipelineResult(
        ok=True,
        error="",
        project_root=project_root,
        source_dir=source_dir,
        analysis=analysis,
        structure=structure,
        tree_lines=tree_lines,
        output_paths=output_paths,
        warnings=warnings or [],
    )
