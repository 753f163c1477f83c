"""Package manifest reading.

Extracts the version from a manifest's text. JSON manifests (package.json)
read the top-level "version"; TOML manifests (pyproject.toml) are parsed with
tomlkit and read [project].version, falling back to [tool.poetry].version.
"""

from __future__ import annotations

import json
import posixpath

import tomlkit
from tomlkit.exceptions import TOMLKitError


def manifest_path(package_path: str, manifest_file: str) -> str:
    """Join a package directory and manifest name into a repository path.

    Examples:
        ("", "package.json") → "package.json"
        ("/packages/domain", "package.json") → "packages/domain/package.json"
    """
    return posixpath.join(package_path.strip("/"), manifest_file).lstrip("/")


def _table(doc: dict, *keys: str) -> dict:
    for key in keys:
        value = doc.get(key)
        # tomlkit tables are dict subclasses; anything else has no version.
        if not isinstance(value, dict):
            return {}
        doc = value
    return doc


def get_toml_version(content: str) -> str | None:
    """Read [project].version, falling back to [tool.poetry].version."""
    try:
        doc = tomlkit.parse(content)
    except TOMLKitError:
        return None
    version = _table(doc, "project").get("version")
    if version is None:
        version = _table(doc, "tool", "poetry").get("version")
    return str(version) if isinstance(version, str) else None


def get_json_version(content: str) -> str | None:
    """Read the top-level "version" of a JSON manifest."""
    try:
        doc = json.loads(content)
    except json.JSONDecodeError:
        return None
    if not isinstance(doc, dict):
        return None
    version = doc.get("version")
    return version if isinstance(version, str) else None


def get_manifest_version(path: str, content: str) -> str | None:
    """Read the version out of a manifest, picking the parser by file name.

    Returns:
        The raw version string, or None if the manifest can't be parsed or
        declares no version.
    """
    if path.endswith(".toml"):
        return get_toml_version(content)
    return get_json_version(content)
