"""Shell and git utilities.

git() runs inside a given checkout and turns failures into GitError so
callers never deal with subprocess exceptions. step() prints section
headers for the pipeline's progress output.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from .errors import GitError


def git(*args: str, cwd: Path | None = None) -> str:
    """Run a git command in cwd and return its stripped stdout.

    Args:
        *args: Arguments to pass to git (e.g., "status", "--porcelain").
        cwd: Checkout to run in. Defaults to the current directory.

    Raises:
        GitError: If git is missing or exits non-zero. Carries git's stderr,
            or its stdout when stderr is empty (e.g. "nothing to commit").
    """
    try:
        result = subprocess.run(
            ["git", *args], cwd=cwd, capture_output=True, text=True
        )
    except FileNotFoundError as exc:
        raise GitError(list(args), "git executable not found") from exc

    if result.returncode != 0:
        raise GitError(list(args), result.stderr.strip() or result.stdout.strip())
    return result.stdout.strip()


def step(msg: str) -> None:
    """Print a section header for one pipeline stage."""
    rule = "─" * 60
    print(f"\n{rule}\n{msg}\n{rule}")
