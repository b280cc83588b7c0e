from __future__ import annotations

"""
Unit tests for the Type-System Signal Scanner.

Verifies:
1. Zero counters on text without any signal.
2. Additivity: each appended occurrence raises its counter by exactly one.
3. The naive adjacency rules of the union, intersection and `!!` heuristics.
"""

from dataclasses import fields

import pytest

from frontbrain.core.scanners.type_signals import scan_type_signals
from frontbrain.domain.scan_models import TypeSystemSignals

BASE_TEXT = "const value = 1;\n"

SAMPLES = [
    ("any_count", "let x: any;"),
    ("ts_ignore_count", "// @ts-ignore"),
    ("ts_expect_error_count", "// @ts-expect-error"),
    ("non_null_assertion_count", "if (!!flag) {}"),
    ("as_const_count", "const t = ['a'] as const;"),
    ("satisfies_count", "const c = {} satisfies Config;"),
    ("readonly_count", "readonly id: string;"),
    ("enum_count", "enum Color { Red }"),
    ("interface_count", "interface User {}"),
    ("type_alias_count", "type Id = string;"),
    ("generic_angles_count", "const m = new Map<Key, Value>();"),
    ("union_count", "let v: string | number;"),
    ("intersection_count", "let ab: A & B;"),
]


def test_empty_text_yields_zero_signals() -> None:
    """Text without signals produces the all-zero record."""
    assert scan_type_signals("") == TypeSystemSignals()
    assert scan_type_signals(BASE_TEXT) == TypeSystemSignals()


def test_every_counter_has_a_sample() -> None:
    """The sample table covers all thirteen counters."""
    assert {name for name, _ in SAMPLES} == {f.name for f in fields(TypeSystemSignals)}


@pytest.mark.parametrize("field_name, sample", SAMPLES)
def test_counter_additivity(field_name: str, sample: str) -> None:
    """Appending one more matching occurrence increases the counter by one."""
    zero = getattr(scan_type_signals(BASE_TEXT), field_name)
    once = getattr(scan_type_signals(BASE_TEXT + sample + "\n"), field_name)
    twice = getattr(scan_type_signals(BASE_TEXT + sample + "\n" + sample + "\n"), field_name)

    assert zero == 0
    assert once == 1
    assert twice == 2


def test_any_requires_word_boundaries() -> None:
    """Identifiers containing 'any' are not counted."""
    signals = scan_type_signals("const company = many(anyway)")
    assert signals.any_count == 0


def test_escape_hatch_example_counts_two() -> None:
    """Two escape-hatch annotations give anyCount=2 and nothing else."""
    signals = scan_type_signals("let a: any = 1\nlet b: any = 2\n")
    assert signals == TypeSystemSignals(any_count=2)


def test_logical_or_is_not_a_union() -> None:
    """`||` never satisfies the single-pipe adjacency check."""
    assert scan_type_signals("const ok = a || b").union_count == 0


def test_non_null_matches_are_non_overlapping() -> None:
    """Runs of exclamation marks are counted in non-overlapping pairs."""
    assert scan_type_signals("!!!").non_null_assertion_count == 1
    assert scan_type_signals("!!!!").non_null_assertion_count == 2


def test_intersection_requires_surrounding_whitespace() -> None:
    """`a&&b` and `a & b` are told apart by whitespace only."""
    assert scan_type_signals("a&&b").intersection_count == 0
    assert scan_type_signals("a & b").intersection_count == 1


def test_signals_add_up() -> None:
    """Records support element-wise addition for aggregation."""
    total = TypeSystemSignals(any_count=1, union_count=2) + TypeSystemSignals(any_count=3)
    assert total.any_count == 4
    assert total.union_count == 2
