"""Shell and logging utilities.

Provides a thin wrapper around the gh CLI plus print-based helpers that emit
GitHub Actions workflow commands (warnings, debug lines, collapsible groups).
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterator
from contextlib import contextmanager


def gh(*args: str, token: str | None = None, check: bool = True) -> str:
    """Run a gh command and return stdout.

    Args:
        *args: Arguments to pass to gh (e.g., "api", "repos/o/r/pulls").
        token: Token exported to gh as GH_TOKEN. When omitted, gh falls back
               to whatever credentials the environment already provides.
        check: If True (default), raise CalledProcessError on non-zero exit.
               stderr is captured so callers can inspect the failure.

    Returns:
        Stripped stdout from the gh command.
    """
    env = None
    if token:
        env = {**os.environ, "GH_TOKEN": token}
    result = subprocess.run(
        ["gh", *args], capture_output=True, text=True, check=check, env=env
    )
    return result.stdout.strip()


def step(msg: str) -> None:
    """Print a visually distinct step header."""
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def info(msg: str) -> None:
    print(msg)


def warning(msg: str) -> None:
    """Print a warning annotation shown in the workflow run summary."""
    print(f"::warning::{msg}")


def debug(msg: str) -> None:
    """Print a debug line, only visible when step debugging is enabled."""
    print(f"::debug::{msg}")


@contextmanager
def group(title: str) -> Iterator[None]:
    """Fold everything printed inside the block into a collapsible group."""
    print(f"::group::{title}")
    try:
        yield
    finally:
        print("::endgroup::")
