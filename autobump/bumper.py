"""Bump orchestration: event → pull requests → packages → decisions.

For every open pull request affected by an event:
1. Skip it if it is merged, closed, its fork is gone, or gating labels are missing
2. Match its autobump labels against the configured packages
3. Read each candidate's manifest version on the base and head refs
4. Keep the packages whose head branch hasn't reached the bumped version yet

Nothing is written back to the repository; the result only says which
packages should be bumped on which branch, and to what version.
"""

from __future__ import annotations

from .config import Config
from .events import PullRequest, PullRequestEvent, PushEvent, Repository
from .github import GitHubClient, NotFoundError, UnreadableFileError
from .labels import extract_autobump_labels, has_filter_labels
from .manifest import get_manifest_version, manifest_path
from .matcher import choose, match_packages
from .models import AutoBumpResult, PackageInPullRequest, PackageToBump
from .output import stringify_package_to_bump
from .shell import group, info, step, warning
from .versions import check_bump_needed, parse_version

BRANCH_REF_PREFIX = "refs/heads/"


class AutoBumper:
    """Computes the autobump result for push and pull request events."""

    def __init__(self, config: Config, client: GitHubClient) -> None:
        self.config = config
        self.client = client

    def handle_push(self, event: PushEvent) -> AutoBumpResult:
        """Evaluate every open pull request targeting the pushed branch."""
        step(f"Handling push event on ref '{event.ref}'")

        if not event.ref.startswith(BRANCH_REF_PREFIX):
            warning("Push event was not on a branch, skipping.")
            return {}

        base_branch = event.ref[len(BRANCH_REF_PREFIX) :]
        repo = event.repository

        result: AutoBumpResult = {}
        evaluated = 0
        for pull in self.client.list_open_pull_requests(
            repo.owner, repo.name, base_branch
        ):
            evaluated += 1
            with group(f"PR-{pull.number}"):
                packages = self.get_packages_to_bump(pull, repo)
            if not packages:
                continue
            # Pulls arrive most recently updated first; that one keeps the branch.
            if pull.head.ref in result:
                warning(
                    f"Skipping pull request #{pull.number}, an earlier pull request "
                    f"already reported bumps for branch '{pull.head.ref}'."
                )
                continue
            result[pull.head.ref] = packages

        info(
            f"Auto bump complete, {evaluated} pull request(s) that point to base "
            f"branch '{base_branch}' were evaluated, {len(result)} need a bump."
        )
        return result

    def handle_pull_request(self, event: PullRequestEvent) -> AutoBumpResult:
        """Evaluate the pull request the event is about."""
        pull = event.pull_request
        step(f"Handling pull request event '{event.action}' on #{pull.number}")

        repo = event.repository or pull.base.repo
        if repo is None:
            warning("Pull request event carries no repository, skipping.")
            return {}

        packages = self.get_packages_to_bump(pull, repo)
        return {pull.head.ref: packages} if packages else {}

    def get_packages_to_bump(
        self, pull: PullRequest, repo: Repository
    ) -> list[PackageToBump]:
        """Decide which of a pull request's candidate packages need a bump.

        In dry-run mode the decisions are logged but an empty list is returned.
        """
        info(f"Evaluating pull request #{pull.number}...")
        candidates = self.get_packages_in_pull_request(pull)
        packages = choose(
            candidates,
            lambda package: self.check_if_bump_is_needed(pull, repo, package),
        )

        if self.config.dry_run and packages:
            warning(
                "Would have bumped packages "
                f"{', '.join(stringify_package_to_bump(p) for p in packages)} "
                f"for branch {pull.head.ref}"
            )
            return []

        return packages

    def get_packages_in_pull_request(
        self, pull: PullRequest
    ) -> list[PackageInPullRequest]:
        """Match the pull request's autobump labels against configured packages."""
        if pull.is_merged:
            warning("Skipping pull request, already merged.")
            return []
        if pull.state != "open":
            warning(
                f"Skipping pull request, no longer open (current state: {pull.state})."
            )
            return []
        if pull.head.repo is None:
            warning("Skipping pull request, fork appears to have been deleted.")
            return []

        labels = pull.label_names
        if not has_filter_labels(labels, self.config.filter_labels):
            warning(
                "Skipping pull request, missing one of the required labels: "
                f"{', '.join(self.config.filter_labels)}."
            )
            return []

        return match_packages(
            self.config.packages_in_repo, extract_autobump_labels(labels)
        )

    def check_if_bump_is_needed(
        self, pull: PullRequest, repo: Repository, package: PackageInPullRequest
    ) -> PackageToBump | None:
        """Compare the package's base and head versions against the requested bump.

        Returns:
            The package with its target version, or None if the head branch is
            already there or the versions couldn't be read.
        """
        path = manifest_path(package.path, self.config.manifest_file)
        head_repo = pull.head.repo or repo

        base_version = self.get_package_version(repo, pull.base.ref, path)
        head_version = self.get_package_version(head_repo, pull.head.ref, path)
        if base_version is None or head_version is None:
            warning(
                f"Skipping package '{package.name}' on branch '{pull.head.ref}', "
                "could not determine its versions."
            )
            return None

        try:
            base = parse_version(base_version)
            head = parse_version(head_version)
        except ValueError as exc:
            warning(
                f"Skipping package '{package.name}' on branch '{pull.head.ref}', "
                f"invalid version in {path}: {exc}"
            )
            return None

        target = check_bump_needed(base, head, package.bump)
        if target is None:
            info(
                f"  {package.name}: {head} on '{pull.head.ref}' already satisfies "
                f"{package.bump.value} bump of {base}"
            )
            return None

        info(f"  {package.name}: {head} → {target} ({package.bump.value})")
        return PackageToBump(
            name=package.name,
            path=package.path,
            bump=package.bump,
            version=str(target),
        )

    def get_package_version(self, repo: Repository, ref: str, path: str) -> str | None:
        """Read the manifest version of ``path`` at ``ref``.

        A missing or undecodable file, or a manifest without a usable
        version, yields None;
        transport errors propagate.
        """
        try:
            content = self.client.read_file_at_ref(repo.owner, repo.name, ref, path)
        except NotFoundError:
            warning(
                f"Manifest {path} not found at ref '{ref}' "
                f"in {repo.owner}/{repo.name}."
            )
            return None
        except UnreadableFileError as exc:
            warning(f"Manifest {path} at ref '{ref}' could not be decoded: {exc}")
            return None

        version = get_manifest_version(path, content)
        if version is None:
            warning(f"Manifest {path} at ref '{ref}' has no readable version.")
        return version
