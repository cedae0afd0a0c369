"""Workspace discovery: locate the monorepo root and its packages."""

from __future__ import annotations

from pathlib import Path

from .errors import DiscoveryError
from .manifest import MANIFEST_NAME
from .models import Package

PACKAGES_DIR = "packages"
BUNDLE_DIR = "bundle"


def find_project_root(start: Path) -> Path:
    """Walk upward from start to the directory holding package.json and packages/.

    Args:
        start: File or directory to begin the search from.

    Raises:
        DiscoveryError: If the filesystem root is reached without a match.
    """
    current = start.resolve()
    if not current.is_dir():
        current = current.parent

    while current != current.parent:
        if (current / MANIFEST_NAME).exists() and (current / PACKAGES_DIR).is_dir():
            return current
        current = current.parent

    raise DiscoveryError(
        "Could not find project root "
        f"(looking for {MANIFEST_NAME} and {PACKAGES_DIR}/ directory)"
    )


def discover_packages(root: Path) -> list[Package]:
    """List every package directory in the workspace.

    Each immediate subdirectory of packages/ is one package, in name order.
    The bundle/ directory at the root is always appended, whether or not it
    exists, so callers decide what to do with manifest-less entries.
    """
    packages_dir = root / PACKAGES_DIR
    if not packages_dir.is_dir():
        raise DiscoveryError(f"No {PACKAGES_DIR}/ directory in {root}")

    packages: list[Package] = []
    for d in sorted(p for p in packages_dir.iterdir() if p.is_dir()):
        packages.append(
            Package(
                name=d.name,
                path=f"{PACKAGES_DIR}/{d.name}",
                has_manifest=(d / MANIFEST_NAME).is_file(),
            )
        )

    packages.append(
        Package(
            name=BUNDLE_DIR,
            path=BUNDLE_DIR,
            has_manifest=(root / BUNDLE_DIR / MANIFEST_NAME).is_file(),
        )
    )
    return packages
