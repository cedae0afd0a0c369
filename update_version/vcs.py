"""Version-control adapter.

The pipeline only needs four things from version control: is the tree
clean, does a tag exist, commit these paths, create a tag. VersionControl
names those capabilities so tests can substitute a fake, and GitCli
provides them by shelling out to git.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from .shell import git


class VersionControl(Protocol):
    def is_clean(self) -> bool: ...

    def tag_exists(self, tag: str) -> bool: ...

    def commit(self, paths: Sequence[str], message: str) -> None: ...

    def tag(self, name: str) -> None: ...


class GitCli:
    """VersionControl backed by the git executable, run in the project root.

    Every method raises GitError when git exits non-zero.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def is_clean(self) -> bool:
        # Porcelain output lists modified, staged and untracked entries
        return git("status", "--porcelain", cwd=self.root) == ""

    def tag_exists(self, tag: str) -> bool:
        return tag in git("tag", "--list", tag, cwd=self.root).splitlines()

    def commit(self, paths: Sequence[str], message: str) -> None:
        """Stage exactly paths, then commit them."""
        git("add", "--", *paths, cwd=self.root)
        git("commit", "-m", message, cwd=self.root)

    def tag(self, name: str) -> None:
        git("tag", name, cwd=self.root)
