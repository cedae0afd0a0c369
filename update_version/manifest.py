"""package.json reading and writing utilities.

Manifests are plain JSON objects. Key order is preserved on load and the
file is written back with 2-space indentation and a trailing newline so
diffs stay limited to the values that changed.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import ManifestError

MANIFEST_NAME = "package.json"

DEPENDENCY_FIELDS = ("dependencies", "devDependencies", "peerDependencies")


def load_manifest(path: Path) -> dict[str, Any]:
    """Load and parse a package.json file.

    Raises:
        ManifestError: If the file is unreadable, is not valid JSON, or does
            not hold a JSON object.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ManifestError(f"Could not read {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError(f"{path} does not contain a JSON object")
    return data


def save_manifest(path: Path, data: dict[str, Any]) -> None:
    """Write a manifest back to disk in the canonical npm layout."""
    try:
        path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
    except OSError as exc:
        raise ManifestError(f"Could not write {path}: {exc}") from exc


def get_version(data: dict[str, Any]) -> str | None:
    """Extract the version field as a string, or None if the manifest has none."""
    version = data.get("version")
    return None if version is None else str(version)


def tilde_range(version: str) -> str:
    """Build the range used for internal deps: patch updates only."""
    return f"~{version}"


def update_manifest(
    data: dict[str, Any], version: str, prefix: str
) -> dict[str, Any]:
    """Return a copy of a manifest with the new version applied.

    This function:
    1. Sets the top-level "version" to version
    2. Rewrites every dependency whose name starts with prefix to ~version

    Dependencies are rewritten in all three maps when present:
    - dependencies
    - devDependencies
    - peerDependencies

    Third-party entries and key order are left untouched, and data itself
    is not modified.

    Args:
        data: Parsed manifest.
        version: Version to set.
        prefix: Name prefix identifying internal packages
                (e.g. "@scope/project-").
    """
    updated = dict(data)
    updated["version"] = version

    for field in DEPENDENCY_FIELDS:
        deps = data.get(field)
        if isinstance(deps, dict):
            updated[field] = {
                name: tilde_range(version) if name.startswith(prefix) else constraint
                for name, constraint in deps.items()
            }

    return updated

