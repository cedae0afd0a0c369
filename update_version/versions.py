"""Version validation and comparison utilities.

Validation follows a fixed grammar: three dot-separated integers with an
optional hyphenated pre-release suffix (e.g. "6.1.19-a11y.1"). Leading zeros
are accepted, so the grammar is looser than strict SemVer.
"""

from __future__ import annotations

import re

import semver

from .errors import InvalidVersionError

SEMVER_PATTERN = re.compile(
    r"^(\d+)\.(\d+)\.(\d+)(?:-([a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)*))?$"
)

EXAMPLES = ("6.1.19", "6.1.19-alpha", "6.1.19-a11y.1")


def validate_version(version: str) -> str:
    """Return version unchanged if it matches the accepted grammar.

    Raises:
        InvalidVersionError: With the expected format and a few examples.
    """
    if not SEMVER_PATTERN.match(version):
        raise InvalidVersionError(
            f'Invalid SemVer format "{version}"\n'
            "Expected format: X.Y.Z-pre-release.build\n"
            f"Examples: {', '.join(EXAMPLES)}"
        )
    return version


def is_downgrade(old: str | None, new: str) -> bool:
    """Return True if new sorts at or below old under SemVer precedence.

    Versions that strict SemVer rejects (leading zeros, missing values) are
    never reported as downgrades.
    """
    if not old:
        return False
    try:
        return semver.Version.parse(new) <= semver.Version.parse(old)
    except ValueError:
        return False
