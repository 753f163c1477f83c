"""Webhook payload models.

The GitHub event payload is validated into one of two typed events before it
reaches the bumper. Only the fields the bumper uses are modelled; everything
else in the payload is ignored.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field, field_validator


class Repository(BaseModel):
    owner: str
    name: str

    @field_validator("owner", mode="before")
    @classmethod
    def _owner_login(cls, value: Any) -> Any:
        # Push payloads carry both "login" and "name", PR payloads only "login".
        if isinstance(value, dict):
            return value.get("login") or value.get("name")
        return value


class Label(BaseModel):
    name: str


class PullRequestRef(BaseModel):
    """The base or head side of a pull request.

    ``repo`` is None when the head repository (a fork) has been deleted.
    """

    ref: str
    repo: Repository | None = None


class PullRequest(BaseModel):
    number: int
    merged: bool | None = False
    merged_at: str | None = None
    state: str
    labels: list[Label] = Field(default_factory=list)
    base: PullRequestRef
    head: PullRequestRef

    @property
    def is_merged(self) -> bool:
        # The list endpoint omits "merged" but always carries "merged_at".
        return bool(self.merged) or self.merged_at is not None

    @property
    def label_names(self) -> list[str]:
        return [label.name for label in self.labels]


class PushEvent(BaseModel):
    ref: str
    repository: Repository


class PullRequestEvent(BaseModel):
    action: str | None = None
    pull_request: PullRequest
    repository: Repository | None = None


Event = Union[PushEvent, PullRequestEvent]
