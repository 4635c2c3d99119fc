"""Helpers for naming and placing CLI output files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory exists for a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def results_path_for_problem(problem_path: Path, output: Optional[Path]) -> Path:
    """Return where JSON results for ``problem_path`` should be written.

    An explicit ``output`` that names a directory receives
    ``<problem_stem>.result.json``; any other explicit path is used as is.
    Without ``output`` the file goes to the current working directory.
    """
    default_name = f"{problem_path.stem}.result.json"
    if output is None:
        return Path.cwd() / default_name
    if output.is_dir():
        return output / default_name
    return output
