from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A synthetic frontend project built under tmp_path for scanner,
   pipeline, and CLI tests.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Sample Sources
# -----------------------------------------------------------------------------
MAIN_TS = """import { createApp } from 'vue'
import App from './App.vue'

const app: any = createApp(App)
app.mount('#app')
"""

APP_VUE = """<template>
  <VApp>
    <VMain>
      <Button label="Hi" />
    </VMain>
  </VApp>
</template>

<script setup lang="ts">
import Button from './components/Button.vue'
</script>
"""

BUTTON_VUE = """<template>
  <VBtn @click="emit('click')">{{ label }}</VBtn>
</template>

<script setup lang="ts">
const props = defineProps<{label:string}>()
const emit = defineEmits(['click'])
</script>
"""

BRAIN_TS = """function walk() {}
// TODO: split scanners
"""


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def frontend_project(tmp_path: Path) -> Path:
    """
    Create a small Vue + TypeScript project.

    Structure:
    /project
      .env
      .env.local
      tsconfig.json          (valid)
      tsconfig.app.json      (JSON with comments, unparseable)
      /ADD
        brain.ts
      /src
        main.ts
        App.vue
        /components
          Button.vue
        /node_modules
          lib.js             (skipped)
    """
    root = tmp_path / "project"
    src = root / "src"
    (src / "components").mkdir(parents=True)
    (src / "node_modules").mkdir()
    (root / "ADD").mkdir()

    (src / "main.ts").write_text(MAIN_TS, encoding="utf-8")
    (src / "App.vue").write_text(APP_VUE, encoding="utf-8")
    (src / "components" / "Button.vue").write_text(BUTTON_VUE, encoding="utf-8")
    (src / "node_modules" / "lib.js").write_text("let x: any = 1\n", encoding="utf-8")
    (root / "ADD" / "brain.ts").write_text(BRAIN_TS, encoding="utf-8")

    (root / ".env").write_text("VITE_API_URL=http://localhost\nVITE_DEBUG=true\n", encoding="utf-8")
    (root / ".env.local").write_text("VITE_API_URL=http://prod\nSECRET_TOKEN=abc\n", encoding="utf-8")
    (root / "tsconfig.json").write_text(json.dumps({
        "extends": "@vue/tsconfig/tsconfig.dom.json",
        "compilerOptions": {"strict": True, "types": ["vite/client"]},
    }), encoding="utf-8")
    (root / "tsconfig.app.json").write_text(
        '{\n  // comments are not JSON\n  "compilerOptions": {}\n}\n', encoding="utf-8"
    )

    return root


@pytest.fixture
def project_config(frontend_project: Path) -> Dict[str, Any]:
    """Configuration dictionary targeting the sample project."""
    return {
        "project_root": str(frontend_project),
        "source_dir": "src",
        "memory_dir": "ADD/memory",
        "self_path": "ADD/brain.ts",
        "print_tree": True,
    }
