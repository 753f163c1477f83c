"""Data models for pr-autobump.

These Pydantic models represent the values passed between the label parser,
the package matcher and the bump orchestrator.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class BumpKind(str, Enum):
    """The semver component an autobump label asks to increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


class PackageInRepo(BaseModel):
    """A package configured for the repository.

    Attributes:
        name: Unique package name, as used in autobump labels.
        path: Directory (relative to the repository root) holding the
              package manifest. Empty for a package at the root.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    path: str


class AutoBumpLabel(BaseModel):
    """A directive parsed from a single autobump label."""

    model_config = ConfigDict(frozen=True)

    package_name: str
    bump: BumpKind


class PackageInPullRequest(PackageInRepo):
    """A configured package paired with the bump a pull request asks for."""

    bump: BumpKind


class PackageToBump(PackageInPullRequest):
    """Final outcome for one package: the bump and the version to move to."""

    version: str


# Head branch name -> packages to bump on that branch.
AutoBumpResult = dict[str, list[PackageToBump]]
