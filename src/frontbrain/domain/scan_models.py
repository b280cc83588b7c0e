from __future__ import annotations

"""
Per-File Scan Data Models.

Defines the immutable signal records produced by the lexical scanners and
the configuration summaries read from the project root. Every record knows
how to serialize itself into the persisted JSON shape.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# SIGNAL RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TypeSystemSignals:
    """
    Occurrence counters of static-typing constructs and anti-patterns.

    Always fully populated; a missing construct is a zero.
    """
    any_count: int = 0
    ts_ignore_count: int = 0
    ts_expect_error_count: int = 0
    non_null_assertion_count: int = 0
    as_const_count: int = 0
    satisfies_count: int = 0
    readonly_count: int = 0
    enum_count: int = 0
    interface_count: int = 0
    type_alias_count: int = 0
    generic_angles_count: int = 0
    union_count: int = 0
    intersection_count: int = 0

    def __add__(self, other: TypeSystemSignals) -> TypeSystemSignals:
        if not isinstance(other, TypeSystemSignals):
            return NotImplemented
        return TypeSystemSignals(**{
            f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)
        })

    def to_dict(self) -> Dict[str, int]:
        return {
            "anyCount": self.any_count,
            "tsIgnoreCount": self.ts_ignore_count,
            "tsExpectErrorCount": self.ts_expect_error_count,
            "nonNullAssertionCount": self.non_null_assertion_count,
            "asConstCount": self.as_const_count,
            "satisfiesCount": self.satisfies_count,
            "readonlyCount": self.readonly_count,
            "enumCount": self.enum_count,
            "interfaceCount": self.interface_count,
            "typeAliasCount": self.type_alias_count,
            "genericAnglesCount": self.generic_angles_count,
            "unionCount": self.union_count,
            "intersectionCount": self.intersection_count,
        }


@dataclass(frozen=True)
class PerformanceSignals:
    """Presence flags of runtime performance API usage."""
    performance_now: bool = False
    request_idle_callback: bool = False
    intersection_observer: bool = False
    console_time: bool = False
    dynamic_import: bool = False

    def __or__(self, other: PerformanceSignals) -> PerformanceSignals:
        if not isinstance(other, PerformanceSignals):
            return NotImplemented
        return PerformanceSignals(**{
            f.name: getattr(self, f.name) or getattr(other, f.name) for f in fields(self)
        })

    def to_dict(self) -> Dict[str, bool]:
        return {
            "performanceNow": self.performance_now,
            "requestIdleCallback": self.request_idle_callback,
            "intersectionObserver": self.intersection_observer,
            "consoleTime": self.console_time,
            "dynamicImport": self.dynamic_import,
        }

# -----------------------------------------------------------------------------
# FILE SUMMARIES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ComponentSummary:
    """
    Structural signals of one single-file UI component.

    Attributes:
        file: Path relative to the project root.
        template_tags: Opening-tag names in appearance order (duplicates kept).
        imports: Import module specifiers.
        emits: Raw argument text of every defineEmits call.
        props: Raw argument text of every defineProps call.
        script_setup_ts: A `<script setup lang="ts">` block is present.
        define_props_typed: A generic-style `defineProps<T>()` call is present.
        define_props_runtime: An object-literal `defineProps({...})` call is present.
    """
    file: str
    template_tags: List[str] = field(default_factory=list)
    imports: List[str] = field(default_factory=list)
    emits: List[str] = field(default_factory=list)
    props: List[str] = field(default_factory=list)
    script_setup_ts: bool = False
    define_props_typed: bool = False
    define_props_runtime: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.file,
            "templateTags": list(self.template_tags),
            "imports": list(self.imports),
            "emits": list(self.emits),
            "props": list(self.props),
            "vueScriptSetupTs": self.script_setup_ts,
            "definePropsTyped": self.define_props_typed,
            "definePropsRuntime": self.define_props_runtime,
        }


@dataclass(frozen=True)
class CodeSummary:
    """
    Signals of one generic code file.

    Attributes:
        file: Path relative to the project root.
        imports: Import module specifiers.
        export_count: Number of top-level default/const/function/class exports.
        vuetify_create: The UI framework is initialized in this file.
        ts_signals: Embedded type-system counters.
        perf_signals: Embedded performance presence flags.
    """
    file: str
    imports: List[str] = field(default_factory=list)
    export_count: int = 0
    vuetify_create: bool = False
    ts_signals: TypeSystemSignals = field(default_factory=TypeSystemSignals)
    perf_signals: PerformanceSignals = field(default_factory=PerformanceSignals)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.file,
            "imports": list(self.imports),
            "exportCount": self.export_count,
            "vuetifyCreate": self.vuetify_create,
            "tsSignals": self.ts_signals.to_dict(),
            "perfSignals": self.perf_signals.to_dict(),
        }

# -----------------------------------------------------------------------------
# PROJECT-LEVEL RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TsConfigSummary:
    """Known compiler flags extracted from one typed-config file."""
    path: str
    extends: Optional[str] = None
    strict: Optional[bool] = None
    no_unused_locals: Optional[bool] = None
    no_unused_parameters: Optional[bool] = None
    no_fallthrough_cases_in_switch: Optional[bool] = None
    no_unchecked_side_effect_imports: Optional[bool] = None
    skip_lib_check: Optional[bool] = None
    use_define_for_class_fields: Optional[bool] = None
    module_resolution: Optional[str] = None
    types: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        raw: Dict[str, Any] = {
            "path": self.path,
            "extends": self.extends,
            "strict": self.strict,
            "noUnusedLocals": self.no_unused_locals,
            "noUnusedParameters": self.no_unused_parameters,
            "noFallthroughCasesInSwitch": self.no_fallthrough_cases_in_switch,
            "noUncheckedSideEffectImports": self.no_unchecked_side_effect_imports,
            "skipLibCheck": self.skip_lib_check,
            "useDefineForClassFields": self.use_define_for_class_fields,
            "moduleResolution": self.module_resolution,
            "types": self.types,
        }
        # Undeclared flags are omitted, not persisted as null
        return {k: v for k, v in raw.items() if v is not None}


@dataclass(frozen=True)
class SelfStats:
    """Size and hygiene metrics of the engine's own source file."""
    path: str
    bytes: int
    lines: int
    max_line_len: int
    function_like_count: int
    todo_count: int
    fixme_count: int
    ts_signals: TypeSystemSignals = field(default_factory=TypeSystemSignals)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "bytes": self.bytes,
            "lines": self.lines,
            "maxLineLen": self.max_line_len,
            "functionLikeCount": self.function_like_count,
            "todoCount": self.todo_count,
            "fixmeCount": self.fixme_count,
            "tsSignals": self.ts_signals.to_dict(),
        }
