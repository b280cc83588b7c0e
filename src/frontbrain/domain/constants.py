from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the fixed vocabulary of the introspection engine: skipped
directory names, file classification rules, candidate configuration and
plugin filenames, scoring weights, and suggestion messages.
"""

import re
from typing import Dict, FrozenSet, Tuple

APP_NAME = "frontbrain"

# -----------------------------------------------------------------------------
# DEFAULT LOCATIONS (RELATIVE TO THE PROJECT ROOT)
# -----------------------------------------------------------------------------

DEFAULT_SOURCE_DIR = "src"
DEFAULT_MEMORY_DIR = "ADD/memory"
PROJECT_CONFIG_FILE = ".frontbrain.json"

ANALYSIS_REPORT_FILE = "frontendMemory.json"
STRUCTURE_REPORT_FILE = "structure.json"
STRUCTURE_TEXT_FILE = "structure.txt"

# -----------------------------------------------------------------------------
# TREE WALK AND CLASSIFICATION
# -----------------------------------------------------------------------------

SKIP_NAMES: FrozenSet[str] = frozenset({"node_modules", ".git", "dist", "coverage"})

COMPONENT_EXTENSION = ".vue"
CODE_FILE_RX = re.compile(r"\.(?:m?js|tsx?|vue)$")

# -----------------------------------------------------------------------------
# EXTERNAL INPUT CANDIDATES
# -----------------------------------------------------------------------------

ENV_FILE_PREFIX = ".env"
TSCONFIG_CANDIDATES: Tuple[str, ...] = ("tsconfig.json", "tsconfig.app.json", "tsconfig.add.json")
PLUGIN_DIR_NAME = "plugins"
PLUGIN_CANDIDATES: Tuple[str, ...] = ("vuetify.ts", "vuetify.js")

# -----------------------------------------------------------------------------
# HYGIENE SCORING
# -----------------------------------------------------------------------------

SCORE_BASELINE = 100
SCORE_MIN = 0
SCORE_MAX = 100

PENALTIES: Dict[str, int] = {
    "any": 8,
    "ts_ignore": 10,
    "ts_expect_error": 4,
    "non_null": 3,
}

REWARDS: Dict[str, int] = {
    "define_props_typed": 2,
    "satisfies": 2,
    "as_const": 1,
}

SELF_LINES_THRESHOLD = 400

# Ordered exactly as the rules are evaluated
SUGGESTIONS: Dict[str, str] = {
    "any": "Replace `any` with generics or discriminated unions.",
    "ts_ignore": "Avoid `@ts-ignore`; prefer proper typing or `@ts-expect-error` with rationale.",
    "non_null": "Avoid `!!`; narrow types via guards, `in`, or user-defined type predicates.",
    "typed_props": "Use `defineProps<T>()` for typed props in SFCs.",
    "dynamic_import": "Consider dynamic `import()` for code-splitting large routes/components.",
    "intersection_observer": "Use `IntersectionObserver` for lazy rendering of lists/images when appropriate.",
    "self_size": "Engine source is getting large; consider moving scanners into separate modules.",
}
