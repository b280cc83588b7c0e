from __future__ import annotations

"""
Project Environment Readers.

Collects declared environment key names from the `.env*` files at the
project root and the known compiler flags of the typed-config files.
Unparseable config files are skipped as if they were absent.
"""

import logging
import os
import re
from typing import Any, Dict, List, Pattern

from frontbrain.core.scanners.common import first_groups
from frontbrain.domain.constants import ENV_FILE_PREFIX, TSCONFIG_CANDIDATES
from frontbrain.domain.scan_models import TsConfigSummary
from frontbrain.infra.fs import read_json_safe, read_text

logger = logging.getLogger(__name__)

ENV_KEY_RX: Pattern[str] = re.compile(r"^\s*([A-Z0-9_]+)\s*=", re.MULTILINE)

# -----------------------------------------------------------------------------
# ENVIRONMENT KEYS
# -----------------------------------------------------------------------------

def read_env_keys(project_root: str) -> List[str]:
    """
    Collect the key names declared in every `.env*` file at the root.

    Files are visited in name order; keys are deduplicated and kept in
    first-seen order so repeated runs produce identical reports.

    Args:
        project_root: Directory holding the environment files.

    Returns:
        List[str]: Deduplicated key names.
    """
    keys: Dict[str, None] = {}
    for name in sorted(os.listdir(project_root)):
        if not name.startswith(ENV_FILE_PREFIX):
            continue
        path = os.path.join(project_root, name)
        if not os.path.isfile(path):
            continue
        for key in first_groups(ENV_KEY_RX, read_text(path)):
            keys.setdefault(key, None)

    logger.debug(f"Environment keys found: {len(keys)}")
    return list(keys)

# -----------------------------------------------------------------------------
# TYPED CONFIG FILES
# -----------------------------------------------------------------------------

def read_tsconfigs(project_root: str) -> List[TsConfigSummary]:
    """
    Summarize every known typed-config file found at the root.

    Args:
        project_root: Directory holding the config files.

    Returns:
        List[TsConfigSummary]: One summary per parseable file, candidate order.
    """
    found: List[TsConfigSummary] = []
    for rel in TSCONFIG_CANDIDATES:
        path = os.path.join(project_root, rel)
        if not os.path.exists(path):
            continue
        data = read_json_safe(path)
        if not isinstance(data, dict):
            logger.debug(f"Skipping tsconfig without a JSON object body: {rel}")
            continue
        found.append(summarize_tsconfig(rel, data))
    return found


def summarize_tsconfig(rel_path: str, data: Dict[str, Any]) -> TsConfigSummary:
    """Extract the fixed subset of flags from a decoded tsconfig object."""
    options = data.get("compilerOptions")
    if not isinstance(options, dict):
        options = {}

    return TsConfigSummary(
        path=rel_path,
        extends=data.get("extends"),
        strict=options.get("strict"),
        no_unused_locals=options.get("noUnusedLocals"),
        no_unused_parameters=options.get("noUnusedParameters"),
        no_fallthrough_cases_in_switch=options.get("noFallthroughCasesInSwitch"),
        no_unchecked_side_effect_imports=options.get("noUncheckedSideEffectImports"),
        skip_lib_check=options.get("skipLibCheck"),
        use_define_for_class_fields=options.get("useDefineForClassFields"),
        module_resolution=options.get("moduleResolution"),
        types=options.get("types"),
    )
