"""Serialization of the autobump result for GitHub step outputs.

Format: one ``branch:name|path|bump|version;name|path|bump|version`` segment
per branch, segments joined by ``#``.
"""

from __future__ import annotations

from .models import AutoBumpResult, PackageToBump

OUTPUT_NAME = "AUTOBUMP_RUN"


def stringify_package_to_bump(package: PackageToBump) -> str:
    """Render a package as ``name|path|bump|version``."""
    return "|".join(
        [package.name, package.path, package.bump.value, package.version]
    )


def stringify_result(result: AutoBumpResult) -> str:
    """Render the whole result, one segment per branch.

    Example:
        {"feature": [default→1.3.0]} → "feature:default||minor|1.3.0"
    """
    return "#".join(
        f"{branch}:{';'.join(stringify_package_to_bump(p) for p in packages)}"
        for branch, packages in result.items()
    )


def write_output(github_output: str | None, name: str, value: str) -> None:
    """Append ``name=value`` to the step output file.

    Without an output file (e.g. when run locally) the pair is printed instead.
    """
    if not github_output:
        print(f"{name}={value}")
        return
    with open(github_output, "a") as fh:
        fh.write(f"{name}={value}\n")
