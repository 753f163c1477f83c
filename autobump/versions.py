"""Version parsing, bumping and bump-needed decisions.

Handles conversion between version strings and semver objects, with
special handling for incomplete version strings (e.g., "1.0" → "1.0.0").
"""

from __future__ import annotations

import semver

from .models import BumpKind


def parse_version(version_str: str) -> semver.Version:
    """Parse a version string into a semver.Version object.

    Handles incomplete versions by padding with zeros:
    - "1" → "1.0.0"
    - "1.2" → "1.2.0"
    - "1.2.3" → "1.2.3"

    Prerelease/build metadata is dropped: "1.2.3-beta.1" → "1.2.3".

    Raises:
        ValueError: If the string is not a valid version.
    """
    parts = version_str.strip().split(".", 2)
    # Pad with zeros to ensure we have at least 3 parts
    while len(parts) < 3:
        parts.append("0")
    return semver.Version.parse(".".join(parts)).finalize_version()


def next_version(base: semver.Version, bump: BumpKind | str) -> semver.Version:
    """Compute the version a bump of ``base`` leads to.

    Examples:
        1.2.3 + major → 2.0.0
        1.2.3 + minor → 1.3.0
        1.2.3 + patch → 1.2.4
    """
    kind = BumpKind(bump)
    if kind is BumpKind.MAJOR:
        return base.bump_major()
    if kind is BumpKind.MINOR:
        return base.bump_minor()
    return base.bump_patch()


def check_bump_needed(
    base: semver.Version, head: semver.Version, bump: BumpKind | str
) -> semver.Version | None:
    """Decide whether the head branch still needs a bump.

    The target is the base version bumped by ``bump``. Once the head branch
    has reached (or passed) the target, no bump is needed, so re-running on
    an already bumped branch is a no-op.

    Returns:
        The target version, or None if the head is already at or past it.
    """
    target = next_version(base, bump)
    if target <= head:
        return None
    return target
