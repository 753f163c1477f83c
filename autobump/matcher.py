"""Matching of configured packages against parsed autobump labels."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from .models import AutoBumpLabel, PackageInPullRequest, PackageInRepo

T = TypeVar("T")
R = TypeVar("R")


def choose(items: Iterable[T], fn: Callable[[T], R | None]) -> list[R]:
    """Map each item through ``fn`` and keep the results that aren't None.

    Example:
        choose([1, 2, 3], lambda x: x * 10 if x > 1 else None) → [20, 30]
    """
    results: list[R] = []
    for item in items:
        result = fn(item)
        if result is not None:
            results.append(result)
    return results


def match_package(
    package: PackageInRepo, labels: Iterable[AutoBumpLabel]
) -> PackageInPullRequest | None:
    """Pair a package with the first label naming it, if any."""
    label = next((lb for lb in labels if lb.package_name == package.name), None)
    if label is None:
        return None
    return PackageInPullRequest(name=package.name, path=package.path, bump=label.bump)


def match_packages(
    packages: Iterable[PackageInRepo], labels: Iterable[AutoBumpLabel]
) -> list[PackageInPullRequest]:
    """Find the packages a pull request's labels ask to bump.

    Output follows the order of ``packages``; label order only matters when
    two labels name the same package, in which case the first one wins.
    Labels naming a package that isn't configured are ignored.

    Example:
        packages [default, domain, contracts] with labels
        ["autobump-minor", "autobump-domain-patch", "autobump-contracts-major"]
        → [default/minor, domain/patch, contracts/major]
    """
    labels = list(labels)
    return choose(packages, lambda package: match_package(package, labels))
