"""Well-known engine directories, derived from the working directory."""

from __future__ import annotations

import os
from pathlib import Path


def _as_dir(path: str) -> str:
    return os.path.join(path, "")


def solution_path() -> str:
    """Return the parent of the working directory, with a trailing separator."""
    return _as_dir(str(Path.cwd().parent))


def engine_path() -> str:
    return _as_dir(os.path.join(solution_path(), "HopStepEngine"))


def engine_config_path() -> str:
    return ""


def shader_path() -> str:
    return _as_dir(os.path.join(engine_path(), "Runtime", "Render", "Shader"))


def content_path() -> str:
    return _as_dir(os.path.join(solution_path(), "Contents"))