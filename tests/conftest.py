"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from typing import Any

import pytest

from autobump.config import Config
from autobump.events import PullRequest
from autobump.github import NotFoundError
from autobump.models import PackageInRepo

OWNER = "octo-org"
REPO = "monorepo"
BASE = "main"
HEAD = "develop"


class FakeGitHubClient:
    """In-memory stand-in for GitHubClient."""

    def __init__(self) -> None:
        self.files: dict[tuple[str, str], str] = {}
        self.pulls: list[PullRequest] = []
        self.reads: list[tuple[str, str, str, str]] = []

    def add_manifest(self, ref: str, path: str, version: str) -> None:
        self.files[(ref, path)] = json.dumps({"name": path, "version": version})

    def list_open_pull_requests(
        self, owner: str, repo: str, base: str
    ) -> Iterator[PullRequest]:
        yield from (p for p in self.pulls if p.base.ref == base)

    def read_file_at_ref(self, owner: str, repo: str, ref: str, path: str) -> str:
        self.reads.append((owner, repo, ref, path))
        try:
            return self.files[(ref, path)]
        except KeyError:
            raise NotFoundError(f"{path}@{ref}") from None


@pytest.fixture
def packages() -> tuple[PackageInRepo, ...]:
    return (
        PackageInRepo(name="default", path=""),
        PackageInRepo(name="domain", path="packages/domain"),
        PackageInRepo(name="contracts", path="packages/contracts"),
    )


@pytest.fixture
def config(packages: tuple[PackageInRepo, ...]) -> Config:
    return Config(
        github_token="test-token",
        packages_in_repo=packages,
        filter_labels=("autobump",),
    )


@pytest.fixture
def fake_client() -> FakeGitHubClient:
    return FakeGitHubClient()


@pytest.fixture
def make_pull() -> Callable[..., PullRequest]:
    """Factory for open pull requests from develop into main."""

    def _make_pull(
        labels: list[str] | None = None,
        *,
        head_ref: str = HEAD,
        number: int = 1,
        gated: bool = True,
        **overrides: Any,
    ) -> PullRequest:
        names = list(labels or [])
        if gated:
            names.append("autobump")
        raw: dict[str, Any] = {
            "number": number,
            "merged": False,
            "state": "open",
            "labels": [{"id": i, "name": name} for i, name in enumerate(names)],
            "base": {"ref": BASE, "repo": {"owner": {"login": OWNER}, "name": REPO}},
            "head": {"ref": head_ref, "repo": {"owner": {"login": OWNER}, "name": REPO}},
        }
        raw.update(overrides)
        return PullRequest.model_validate(raw)

    return _make_pull
