from __future__ import annotations

"""
Signal Aggregator and Hygiene Scorer.

Combines per-file signals into repository-wide totals, computes the bounded
hygiene score, and derives the suggestion list from a fixed set of rules.
"""

from functools import reduce
from typing import List, Optional, Sequence

from frontbrain.domain.constants import (
    PENALTIES,
    REWARDS,
    SCORE_BASELINE,
    SCORE_MAX,
    SCORE_MIN,
    SELF_LINES_THRESHOLD,
    SUGGESTIONS,
)
from frontbrain.domain.report_models import ComponentTyping
from frontbrain.domain.scan_models import (
    CodeSummary,
    ComponentSummary,
    PerformanceSignals,
    SelfStats,
    TypeSystemSignals,
)

# -----------------------------------------------------------------------------
# AGGREGATION
# -----------------------------------------------------------------------------

def aggregate_type_totals(code: Sequence[CodeSummary]) -> TypeSystemSignals:
    """Sum every type-system counter across all code files."""
    return reduce(lambda acc, c: acc + c.ts_signals, code, TypeSystemSignals())


def aggregate_perf_presence(code: Sequence[CodeSummary]) -> PerformanceSignals:
    """Presence union of every performance flag across all code files."""
    return reduce(lambda acc, c: acc | c.perf_signals, code, PerformanceSignals())


def summarize_component_typing(components: Sequence[ComponentSummary]) -> ComponentTyping:
    """Count components adopting each typing construct."""
    return ComponentTyping(
        script_setup_ts_count=sum(1 for c in components if c.script_setup_ts),
        define_props_typed_count=sum(1 for c in components if c.define_props_typed),
        define_props_runtime_count=sum(1 for c in components if c.define_props_runtime),
    )

# -----------------------------------------------------------------------------
# SCORING
# -----------------------------------------------------------------------------

def compute_hygiene_score(totals: TypeSystemSignals, typed_props_count: int) -> int:
    """
    Compute the hygiene score clamped to [0, 100].

    Args:
        totals: Repository-wide type-system counters.
        typed_props_count: Components declaring typed props.

    Returns:
        int: The bounded score.
    """
    negatives = (
        totals.any_count * PENALTIES["any"]
        + totals.ts_ignore_count * PENALTIES["ts_ignore"]
        + totals.ts_expect_error_count * PENALTIES["ts_expect_error"]
        + totals.non_null_assertion_count * PENALTIES["non_null"]
    )
    positives = (
        typed_props_count * REWARDS["define_props_typed"]
        + totals.satisfies_count * REWARDS["satisfies"]
        + totals.as_const_count * REWARDS["as_const"]
    )
    return max(SCORE_MIN, min(SCORE_MAX, SCORE_BASELINE - negatives + positives))


def build_suggestions(
        totals: TypeSystemSignals,
        perf: PerformanceSignals,
        typed_props_count: int,
        self_stats: Optional[SelfStats],
) -> List[str]:
    """
    Evaluate every suggestion rule in order.

    Rules are independent; each appends at most one message.

    Returns:
        List[str]: Messages of the rules whose condition holds.
    """
    rules = [
        ("any", totals.any_count > 0),
        ("ts_ignore", totals.ts_ignore_count > 0),
        ("non_null", totals.non_null_assertion_count > 0),
        ("typed_props", typed_props_count == 0),
        ("dynamic_import", not perf.dynamic_import),
        ("intersection_observer", not perf.intersection_observer),
        ("self_size", self_stats is not None and self_stats.lines > SELF_LINES_THRESHOLD),
    ]
    return [SUGGESTIONS[key] for key, triggered in rules if triggered]
