# Kodebase Utilities Module
# Helper functions for paths and read-only documents

from kodebase_config.utils.paths import (
    atomic_write,
    ensure_dir,
    resolve_project_path,
)
from kodebase_config.utils.frozen import freeze, thaw

__all__ = [
    "atomic_write",
    "ensure_dir",
    "resolve_project_path",
    "freeze",
    "thaw",
]
