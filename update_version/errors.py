"""Exceptions raised by the update-version pipeline."""

from __future__ import annotations


class UpdateVersionError(Exception):
    """Base class for every failure that should abort the run with exit 1."""


class InvalidVersionError(UpdateVersionError):
    """The requested version does not match the accepted SemVer grammar."""


class PreconditionError(UpdateVersionError):
    """The checkout is not in a state where a version bump may be applied."""


class DiscoveryError(UpdateVersionError):
    """The project root or the packages directory could not be found."""


class GitError(UpdateVersionError):
    """A git command exited non-zero.

    Attributes:
        command: The git arguments that were run.
        stderr: Raw error output from git.
    """

    def __init__(self, command: list[str], stderr: str) -> None:
        self.command = command
        self.stderr = stderr.strip()
        detail = self.stderr or "no output"
        super().__init__(f"git {' '.join(command)} failed: {detail}")


class ManifestError(UpdateVersionError):
    """A package.json could not be read, parsed or written."""
