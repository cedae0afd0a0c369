"""Data models for update-version.

These Pydantic models carry the configuration and results that flow
between the pipeline stages.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_PREFIX = "@teamdiverst/fullcalendar-"


class UpdateConfig(BaseModel):
    """Everything a run needs, passed explicitly to each stage.

    Attributes:
        root: Absolute path of the monorepo root.
        version: Validated target version.
        prefix: Name prefix of internal packages whose dependency ranges
                are rewritten.
    """

    root: Path
    version: str
    prefix: str = DEFAULT_PREFIX


class Package(BaseModel):
    """A package directory in the workspace.

    Attributes:
        name: Directory name (e.g. "core", "bundle").
        path: Path relative to the project root (e.g. "packages/core").
        has_manifest: Whether the directory contains a package.json.
    """

    name: str
    path: str
    has_manifest: bool


class ManifestUpdate(BaseModel):
    """Outcome of rewriting the workspace manifests.

    Attributes:
        old_version: Root manifest version before the rewrite.
        new_version: Version written to every manifest.
        paths: Manifest paths written, relative to the project root.
    """

    old_version: str | None
    new_version: str
    paths: list[str] = Field(default_factory=list)


class VersionBump(BaseModel):
    """Records the version change applied by a successful run."""

    old: str | None
    new: str
    tag: str
