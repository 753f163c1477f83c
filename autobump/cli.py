"""CLI entry point for pr-autobump."""

from __future__ import annotations

import json
import os
from pathlib import Path

import click
from pydantic import ValidationError

from autobump.bumper import AutoBumper
from autobump.config import Config, ConfigError
from autobump.github import GitHubClient, GitHubError
from autobump.output import OUTPUT_NAME, stringify_result, write_output
from autobump.router import UnsupportedEventError, route
from autobump.shell import debug, info


@click.group()
@click.version_option(package_name="pr-autobump")
def cli() -> None:
    """Work out which monorepo packages autobump labels ask to bump."""


@cli.command()
@click.option(
    "--event-name",
    envvar="GITHUB_EVENT_NAME",
    required=True,
    help="Name of the triggering event (push or pull_request).",
)
@click.option(
    "--event-path",
    envvar="GITHUB_EVENT_PATH",
    required=True,
    type=click.Path(dir_okay=False),
    help="Path to the JSON webhook payload.",
)
@click.option(
    "--github-output",
    envvar="GITHUB_OUTPUT",
    default=None,
    help="Path to the GitHub step output file. Printed to stdout if unset.",
)
def run(event_name: str, event_path: str, github_output: str | None) -> None:
    """Evaluate the event and write the AUTOBUMP_RUN output (called from CI)."""
    try:
        config = Config.from_env(os.environ)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    try:
        raw_event = Path(event_path).read_text()
        payload = json.loads(raw_event)
    except (OSError, json.JSONDecodeError) as exc:
        raise click.ClickException(f"Could not read event payload: {exc}") from exc

    debug(f"EVENT NAME: {event_name}")
    debug(f"EVENT DATA: {raw_event}")

    if config.dry_run:
        info("Detected DRY_RUN=true, running in dry mode - no bumps will be reported.")

    bumper = AutoBumper(config, GitHubClient(config.github_token))
    try:
        result = route(bumper, event_name, payload)
    except (UnsupportedEventError, GitHubError) as exc:
        raise click.ClickException(str(exc)) from exc
    except ValidationError as exc:
        raise click.ClickException(
            f"Invalid '{event_name}' event payload: {exc}"
        ) from exc

    write_output(github_output, OUTPUT_NAME, stringify_result(result))


if __name__ == "__main__":
    cli()
