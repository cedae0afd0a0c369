"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

import pytest

PREFIX = "@scope/project-"


class FakeVcs:
    """In-memory VersionControl that records what the pipeline asked for."""

    def __init__(self, clean: bool = True, tags: Sequence[str] = ()) -> None:
        self.clean = clean
        self.tags: list[str] = list(tags)
        self.commits: list[tuple[list[str], str]] = []

    def is_clean(self) -> bool:
        return self.clean

    def tag_exists(self, tag: str) -> bool:
        return tag in self.tags

    def commit(self, paths: Sequence[str], message: str) -> None:
        self.commits.append((list(paths), message))

    def tag(self, name: str) -> None:
        self.tags.append(name)


def write_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n")


def read_json(path: Path) -> dict:
    return json.loads(path.read_text())


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a monorepo with two packages, a bundle and an empty directory.

    Layout:
        package.json                 1.0.0
        packages/core/package.json   1.0.0, depends on lodash
        packages/react/package.json  1.0.0, depends on core (dep + peer)
        packages/docs/               no manifest
        bundle/package.json          1.0.0, depends on core and react
    """
    root = tmp_path / "repo"
    write_json(
        root / "package.json",
        {
            "name": "project-monorepo",
            "private": True,
            "version": "1.0.0",
            "devDependencies": {"typescript": "^5.0.0"},
        },
    )
    write_json(
        root / "packages" / "core" / "package.json",
        {
            "name": f"{PREFIX}core",
            "version": "1.0.0",
            "dependencies": {"lodash": "^4.17.21"},
        },
    )
    write_json(
        root / "packages" / "react" / "package.json",
        {
            "name": f"{PREFIX}react",
            "version": "1.0.0",
            "dependencies": {f"{PREFIX}core": "~1.0.0"},
            "peerDependencies": {"react": "^18.0.0", f"{PREFIX}core": "~1.0.0"},
        },
    )
    (root / "packages" / "docs").mkdir(parents=True)
    write_json(
        root / "bundle" / "package.json",
        {
            "name": f"{PREFIX}bundle",
            "version": "1.0.0",
            "devDependencies": {
                f"{PREFIX}core": "~1.0.0",
                f"{PREFIX}react": "~1.0.0",
            },
        },
    )
    return root


@pytest.fixture
def fake_vcs() -> FakeVcs:
    return FakeVcs()
