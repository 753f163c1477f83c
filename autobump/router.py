"""Routing of GitHub events to the bumper."""

from __future__ import annotations

from typing import Any

from .bumper import AutoBumper
from .events import Event, PullRequestEvent, PushEvent
from .models import AutoBumpResult

SUPPORTED_EVENTS: dict[str, type[PushEvent] | type[PullRequestEvent]] = {
    "push": PushEvent,
    "pull_request": PullRequestEvent,
}


class UnsupportedEventError(ValueError):
    """Raised for events other than push and pull_request."""

    def __init__(self, event_name: str | None) -> None:
        super().__init__(
            f"Unknown event type '{event_name}', "
            "only 'push' and 'pull_request' are supported."
        )
        self.event_name = event_name


def load_event(event_name: str | None, payload: dict[str, Any]) -> Event:
    """Validate a raw webhook payload into a typed event.

    Raises:
        UnsupportedEventError: If the event type isn't handled.
        pydantic.ValidationError: If the payload doesn't have the expected shape.
    """
    model = SUPPORTED_EVENTS.get(event_name or "")
    if model is None:
        raise UnsupportedEventError(event_name)
    return model.model_validate(payload)


def route(
    bumper: AutoBumper, event_name: str | None, payload: dict[str, Any]
) -> AutoBumpResult:
    """Dispatch an event to the matching bumper handler."""
    event = load_event(event_name, payload)
    if isinstance(event, PushEvent):
        return bumper.handle_push(event)
    return bumper.handle_pull_request(event)
