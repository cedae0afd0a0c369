"""Version bump pipeline: validate → locate → check → discover → rewrite → commit → tag.

This module orchestrates a monorepo version bump:
1. Validate the requested version string
2. Locate the project root (package.json + packages/)
3. Refuse to run on a dirty tree or when the release tag already exists
4. Discover packages/* and bundle/
5. Rewrite every manifest's version and internal dependency ranges
6. Commit the rewritten manifests
7. Tag the commit as v<version>

Nothing is written before step 5, and step 5 parses every manifest before it
saves any of them. If git fails in step 6 or 7 the
manifests already on disk are left as they are.
"""

from __future__ import annotations

from .errors import PreconditionError
from .manifest import (
    MANIFEST_NAME,
    get_version,
    load_manifest,
    save_manifest,
    update_manifest,
)
from .models import ManifestUpdate, Package, UpdateConfig, VersionBump
from .shell import step
from .vcs import GitCli, VersionControl
from .versions import is_downgrade, validate_version
from .workspace import discover_packages


def tag_name(version: str) -> str:
    return f"v{version}"


def check_preconditions(vcs: VersionControl, version: str) -> None:
    """Make sure the bump can be applied without clobbering anything.

    Raises:
        PreconditionError: If the working tree has uncommitted changes or the
            release tag already exists.
    """
    step("Checking working tree")

    if not vcs.is_clean():
        raise PreconditionError(
            "Working tree has uncommitted changes. "
            "Commit or stash them before updating the version."
        )

    tag = tag_name(version)
    if vcs.tag_exists(tag):
        raise PreconditionError(f"Tag {tag} already exists")

    print(f"  Clean, {tag} is available")


def rewrite_manifests(
    config: UpdateConfig, packages: list[Package]
) -> ManifestUpdate:
    """Write config.version into the root manifest and every package manifest.

    Packages without a package.json are skipped. All manifests are loaded
    first, so an unreadable one aborts the stage before anything is saved.

    Returns:
        The root's previous version and the paths written, relative to root.
    """
    step(f"Updating manifests to {config.version}")

    root_data = load_manifest(config.root / MANIFEST_NAME)
    pending: list[tuple[Package, str, dict]] = []
    for pkg in packages:
        if pkg.has_manifest:
            rel = f"{pkg.path}/{MANIFEST_NAME}"
            pending.append((pkg, rel, load_manifest(config.root / rel)))

    old_version = get_version(root_data)
    if is_downgrade(old_version, config.version):
        print(f"  Warning: {config.version} is not newer than {old_version}")

    save_manifest(
        config.root / MANIFEST_NAME,
        update_manifest(root_data, config.version, config.prefix),
    )
    print(f"Updated root {MANIFEST_NAME} to {config.version}")
    update = ManifestUpdate(
        old_version=old_version, new_version=config.version, paths=[MANIFEST_NAME]
    )

    for pkg, rel, data in pending:
        save_manifest(
            config.root / rel, update_manifest(data, config.version, config.prefix)
        )
        update.paths.append(rel)
        print(f"Updated package {pkg.name}")

    return update


def commit_changes(vcs: VersionControl, update: ManifestUpdate) -> None:
    """Stage the rewritten manifests and commit them."""
    step("Committing")
    vcs.commit(
        update.paths,
        f"Updated version from {update.old_version} to {update.new_version}",
    )
    print("Committed changes on affected files")


def create_tag(vcs: VersionControl, version: str) -> str:
    """Tag HEAD as v<version> and return the tag name."""
    tag = tag_name(version)
    vcs.tag(tag)
    print(f"Created git tag {tag}")
    return tag


def run_update(
    config: UpdateConfig, vcs: VersionControl | None = None
) -> VersionBump:
    """Execute the full version bump.

    Args:
        config: Project root, target version and internal prefix.
        vcs: Version-control backend. Defaults to git in config.root.
    """
    validate_version(config.version)
    if vcs is None:
        vcs = GitCli(config.root)

    check_preconditions(vcs, config.version)
    packages = discover_packages(config.root)
    update = rewrite_manifests(config, packages)
    commit_changes(vcs, update)
    tag = create_tag(vcs, config.version)

    print(
        f"\nSuccessfully updated all packages from {update.old_version} "
        f"to {config.version}"
    )
    return VersionBump(old=update.old_version, new=config.version, tag=tag)
