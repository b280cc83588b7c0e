from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration of the engine and loads the
optional per-project configuration file stored at the project root.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from frontbrain.domain.constants import (
    DEFAULT_MEMORY_DIR,
    DEFAULT_SOURCE_DIR,
    PROJECT_CONFIG_FILE,
)

logger = logging.getLogger(__name__)

# Keys accepted from the project configuration file
CONFIG_KEYS = ("source_dir", "memory_dir", "self_path", "print_tree")


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config(project_root: Optional[str] = None) -> Dict[str, Any]:
    """
    Generate the default runtime configuration.
    This dictionary drives the behavior of the pipeline.

    Args:
        project_root: Project root; defaults to the current working directory.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "project_root": project_root or os.getcwd(),
        "source_dir": DEFAULT_SOURCE_DIR,
        "memory_dir": DEFAULT_MEMORY_DIR,

        # Self scan target (empty: the engine's own module)
        "self_path": "",

        # Presentation
        "print_tree": True,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(project_root: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration of a project.

    Merges the optional project configuration file over the defaults.
    A missing file is silent; a malformed one is reported and ignored.

    Args:
        project_root: Project root; defaults to the current working directory.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config(project_root)
    config_file = os.path.join(config["project_root"], PROJECT_CONFIG_FILE)

    if not os.path.isfile(config_file):
        logger.debug("Project config file not found. Using defaults.")
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load project config '{config_file}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted project config file. Using defaults.")
        return config

    for key in CONFIG_KEYS:
        if key in data:
            config[key] = data[key]

    logger.debug(f"Project configuration loaded from {config_file}")
    return config
