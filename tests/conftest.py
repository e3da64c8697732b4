"""Global pytest setup for a deterministic test environment."""

from __future__ import annotations

import os
import sys
from pathlib import Path

# Must run before resume_builder.core.config reads the environment.
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")
os.environ.setdefault("AI_ENABLED", "0")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
