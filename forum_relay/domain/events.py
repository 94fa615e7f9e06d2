"""Event classification — maps a raw WebhookEvent to a closed set of variants.

Pure Python, no framework dependencies. ``classify`` is the only place that
looks at which payload sections are present; everything downstream matches
on the variant type.
"""

from dataclasses import dataclass
from typing import Union

from forum_relay.domain.models import Comment, InvalidPayload, Issue, PullRequest, WebhookEvent


@dataclass(frozen=True)
class IssueOpened:
    issue: Issue
    sender: str


@dataclass(frozen=True)
class PullRequestOpened:
    pull_request: PullRequest
    sender: str


@dataclass(frozen=True)
class CommentCreated:
    number: int
    comment: Comment
    sender: str


@dataclass(frozen=True)
class PullRequestStateChanged:
    pull_request: PullRequest
    action: str  # "closed" | "reopened"
    sender: str

    @property
    def merged(self) -> bool:
        return self.action == "closed" and self.pull_request.merged


@dataclass(frozen=True)
class IssueStateChanged:
    issue: Issue
    action: str  # "closed" | "reopened"
    sender: str


@dataclass(frozen=True)
class Unrecognized:
    action: str


ClassifiedEvent = Union[
    IssueOpened,
    PullRequestOpened,
    CommentCreated,
    PullRequestStateChanged,
    IssueStateChanged,
    Unrecognized,
]

STATE_ACTIONS = ("closed", "reopened")


def _checked(section, kind: str):
    """Return ``section`` once a matched rule needs its number."""
    if section.number is None:
        raise InvalidPayload(f"{kind}.number must be a non-negative integer")
    return section


def classify(event: WebhookEvent) -> ClassifiedEvent:
    """Classify an event. First matching rule wins.

    Raises InvalidPayload when the matched rule resolves on an issue/PR
    number that the payload did not supply. Unmatched shapes are never
    validated.
    """
    action = event.action
    sender = event.sender_login

    if action == "opened":
        # A PR payload may also carry an issue section; the PR wins.
        if event.pull_request is not None:
            return PullRequestOpened(_checked(event.pull_request, "pull_request"), sender)
        if event.issue is not None:
            return IssueOpened(_checked(event.issue, "issue"), sender)

    elif action == "created":
        if event.comment is not None and event.issue is not None:
            return CommentCreated(_checked(event.issue, "issue").number, event.comment, sender)

    elif action in STATE_ACTIONS:
        if event.pull_request is not None:
            return PullRequestStateChanged(
                _checked(event.pull_request, "pull_request"), action, sender
            )
        if event.issue is not None:
            return IssueStateChanged(_checked(event.issue, "issue"), action, sender)

    return Unrecognized(action)
