"""Autobump label parsing.

Labels take one of two forms:
- ``autobump-<bump>`` → bump the "default" package
- ``autobump-<package>-<bump>`` → bump the named package

where <bump> is major, minor or patch. Anything else is not a directive.
"""

from __future__ import annotations

from collections.abc import Iterable

from .matcher import choose
from .models import AutoBumpLabel, BumpKind

LABEL_PREFIX = "autobump"
DEFAULT_PACKAGE = "default"

_BUMP_VALUES = {kind.value for kind in BumpKind}


def parse_autobump_label(label: str) -> AutoBumpLabel | None:
    """Parse a single label into a directive, or None if it isn't one.

    Examples:
        "autobump-patch" → AutoBumpLabel(package_name="default", bump=patch)
        "autobump-domain-major" → AutoBumpLabel(package_name="domain", bump=major)
        "autobump", "autobump-test-not", "autobumpy-patch" → None
    """
    parts = label.split("-")
    if len(parts) not in (2, 3):
        return None

    if len(parts) == 2:
        parts = [parts[0], DEFAULT_PACKAGE, parts[1]]

    prefix, package_name, bump = parts
    if prefix != LABEL_PREFIX or bump not in _BUMP_VALUES:
        return None

    return AutoBumpLabel(package_name=package_name, bump=BumpKind(bump))


def extract_autobump_labels(labels: Iterable[str]) -> list[AutoBumpLabel]:
    """Parse every label on a pull request, dropping the ones that don't parse."""
    return choose(labels, parse_autobump_label)


def has_filter_labels(labels: Iterable[str], filter_labels: Iterable[str]) -> bool:
    """Check that every gating label is present.

    An empty set of gating labels lets every pull request through.
    """
    return set(filter_labels) <= set(labels)
