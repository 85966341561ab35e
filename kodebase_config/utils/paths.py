# Kodebase Path Utilities
# Project-relative path resolution and atomic writes

import os
import tempfile
from pathlib import Path


def resolve_project_path(project_root: str | Path, relative: str | Path) -> Path:
    """
    Resolve a path relative to the absolute form of a project root.

    Args:
        project_root: Project root directory (may be relative to cwd).
        relative: Path inside the project.

    Returns:
        Absolute path.
    """
    return Path(project_root).resolve() / Path(relative)


def ensure_dir(path: Path) -> Path:
    """Ensure directory exists, creating parents if necessary."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def atomic_write(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """
    Atomically write text to a file.

    Writes to a temporary file in the target directory and renames it into
    place, so readers never see a partially written file.

    Args:
        path: Target file path.
        content: Text to write.
        encoding: Text encoding (default utf-8).
    """
    ensure_dir(path.parent)

    fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            f.write(content)
        os.replace(temp_path, path)
    except Exception:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise
