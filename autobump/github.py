"""GitHub API access through the gh CLI.

The bumper only needs two things from GitHub: the open pull requests that
target a branch, and the content of a file at a given ref. Both go through
``gh api`` so authentication, proxies and GitHub Enterprise hosts are
handled by gh itself.
"""

from __future__ import annotations

import base64
import binascii
import json
import subprocess
from collections.abc import Iterator
from urllib.parse import quote, urlencode

from .events import PullRequest
from .shell import debug, gh

PER_PAGE = 100


class GitHubError(RuntimeError):
    """Raised when a gh call fails for any reason other than a missing file."""


class NotFoundError(GitHubError):
    """Raised when the requested file does not exist at the given ref."""


class UnreadableFileError(GitHubError):
    """Raised when a file exists but its content can't be decoded as text."""


class GitHubClient:
    """Minimal GitHub REST client backed by ``gh api``."""

    def __init__(self, token: str | None = None) -> None:
        self.token = token

    def api(self, endpoint: str) -> object:
        """GET an API endpoint and decode the JSON response.

        Raises:
            NotFoundError: If GitHub answered 404.
            GitHubError: If gh failed or returned something that isn't JSON.
        """
        debug(f"GET {endpoint}")
        try:
            output = gh("api", endpoint, token=self.token)
        except FileNotFoundError as exc:
            raise GitHubError("gh CLI is not installed or not on PATH") from exc
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or "").strip()
            if "HTTP 404" in stderr:
                raise NotFoundError(f"Not found: {endpoint}") from exc
            raise GitHubError(f"gh api {endpoint} failed: {stderr}") from exc

        try:
            return json.loads(output)
        except json.JSONDecodeError as exc:
            raise GitHubError(f"Invalid JSON from gh api {endpoint}: {exc}") from exc

    def list_open_pull_requests(
        self, owner: str, repo: str, base: str
    ) -> Iterator[PullRequest]:
        """Yield open pull requests targeting ``base``, most recently updated first.

        Pages are fetched lazily, one gh call per page, so a consumer that stops
        early never fetches the remaining pages. Calling again restarts from
        the first page.
        """
        page = 1
        while True:
            query = urlencode(
                {
                    "base": base,
                    "state": "open",
                    "sort": "updated",
                    "direction": "desc",
                    "per_page": PER_PAGE,
                    "page": page,
                }
            )
            data = self.api(f"repos/{owner}/{repo}/pulls?{query}")
            if not isinstance(data, list):
                raise GitHubError(f"Unexpected pull request listing for {owner}/{repo}")

            for raw in data:
                yield PullRequest.model_validate(raw)

            if len(data) < PER_PAGE:
                return
            page += 1

    def read_file_at_ref(self, owner: str, repo: str, ref: str, path: str) -> str:
        """Return the text content of ``path`` at ``ref``.

        Raises:
            NotFoundError: If the file (or ref) doesn't exist.
            UnreadableFileError: If the content isn't base64 encoded UTF-8.
            GitHubError: On any other failure.
        """
        query = urlencode({"ref": ref})
        data = self.api(f"repos/{owner}/{repo}/contents/{quote(path)}?{query}")
        if not isinstance(data, dict) or "content" not in data:
            # A directory listing, or a submodule/symlink entry.
            raise NotFoundError(f"{path} is not a file at {ref}")
        try:
            return base64.b64decode(data["content"]).decode("utf-8")
        except (binascii.Error, TypeError, UnicodeDecodeError) as exc:
            raise UnreadableFileError(
                f"{path} at {ref} is not readable: {exc}"
            ) from exc
