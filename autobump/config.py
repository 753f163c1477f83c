"""Run configuration.

All settings come from environment variables (as set by the action inputs)
and are read exactly once, by Config.from_env(). Components receive the
resulting Config instead of looking at the environment themselves.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from .models import PackageInRepo

DEFAULT_MANIFEST_FILE = "package.json"


class ConfigError(ValueError):
    """Raised when required configuration is missing or malformed."""


def _get_value(
    env: Mapping[str, str], key: str, required: bool = False, default: str = ""
) -> str:
    if key in env and env[key] is not None:
        return env[key]
    if required:
        raise ConfigError(
            f"Environment variable '{key}' was not provided, "
            "please define it and try again."
        )
    return default


def parse_packages_in_repo(value: str) -> list[PackageInRepo]:
    """Parse a ``name|path;name|path`` list into packages.

    Example:
        "default|;domain|packages/domain" →
        [PackageInRepo(name="default", path=""),
         PackageInRepo(name="domain", path="packages/domain")]

    Raises:
        ConfigError: If an entry has no "|" separator or a name is repeated.
    """
    value = value.strip()
    if not value:
        return []

    packages: list[PackageInRepo] = []
    seen: set[str] = set()
    for entry in value.split(";"):
        name, sep, path = entry.strip().partition("|")
        name = name.strip()
        if not sep or not name:
            raise ConfigError(
                f"Invalid PACKAGES_IN_REPO entry '{entry.strip()}', "
                "expected 'name|path'."
            )
        if name in seen:
            raise ConfigError(f"Package '{name}' is listed more than once.")
        seen.add(name)
        packages.append(PackageInRepo(name=name, path=path.strip()))
    return packages


def parse_filter_labels(value: str) -> list[str]:
    """Parse a comma separated label list, ignoring blank items."""
    return [label.strip() for label in value.split(",") if label.strip()]


class Config(BaseModel):
    """Immutable settings for one run.

    Attributes:
        github_token: Token used by the gh CLI.
        dry_run: Log decisions but report nothing to bump.
        packages_in_repo: Every package the labels may refer to.
        filter_labels: Labels a pull request must all carry to be evaluated.
        manifest_file: Manifest file name inside each package directory.
    """

    model_config = ConfigDict(frozen=True)

    github_token: str = Field(repr=False)
    dry_run: bool = False
    packages_in_repo: tuple[PackageInRepo, ...] = ()
    filter_labels: tuple[str, ...] = ()
    manifest_file: str = DEFAULT_MANIFEST_FILE

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> Config:
        """Build the configuration from environment variables.

        Raises:
            ConfigError: If GITHUB_TOKEN or PACKAGES_IN_REPO is missing, or
                         PACKAGES_IN_REPO is malformed.
        """
        return cls(
            github_token=_get_value(env, "GITHUB_TOKEN", required=True),
            dry_run=_get_value(env, "DRY_RUN", default="false") == "true",
            packages_in_repo=tuple(
                parse_packages_in_repo(
                    _get_value(env, "PACKAGES_IN_REPO", required=True)
                )
            ),
            filter_labels=tuple(parse_filter_labels(_get_value(env, "FILTER_LABELS"))),
            manifest_file=_get_value(env, "MANIFEST_FILE").strip()
            or DEFAULT_MANIFEST_FILE,
        )
