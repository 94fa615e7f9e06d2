"""Domain data models — pure Python dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from forum_relay.ports.outbound import ThreadPort


class InvalidPayload(ValueError):
    """Webhook body is not a usable event payload."""


@dataclass(frozen=True)
class Issue:
    number: Optional[int]
    title: str = ""
    body: Optional[str] = None
    html_url: str = ""


@dataclass(frozen=True)
class PullRequest:
    number: Optional[int]
    title: str = ""
    body: Optional[str] = None
    html_url: str = ""
    merged: bool = False


@dataclass(frozen=True)
class Comment:
    body: str = ""
    html_url: str = ""


@dataclass(frozen=True)
class WebhookEvent:
    """One GitHub webhook delivery, reduced to the fields the relay reads."""

    action: str
    issue: Optional[Issue] = None
    pull_request: Optional[PullRequest] = None
    comment: Optional[Comment] = None
    sender_login: str = "unknown"


# ── Actions ────────────────────────────────────────────────


@dataclass(frozen=True)
class CreateThread:
    name: str
    body: str


@dataclass(frozen=True)
class AppendMessage:
    thread: "ThreadPort"
    body: str


@dataclass(frozen=True)
class NoOp:
    reason: str  # "unrecognized" | "resolution_miss"


UNRECOGNIZED = "unrecognized"
RESOLUTION_MISS = "resolution_miss"


# ── Payload parsing ────────────────────────────────────────


def _number(obj: Dict[str, Any]) -> Optional[int]:
    raw = obj.get("number")
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        return None
    return raw


def _text(obj: Dict[str, Any], key: str) -> str:
    value = obj.get(key)
    return value if isinstance(value, str) else ""


def _section(payload: Dict[str, Any], key: str) -> Optional[Dict[str, Any]]:
    """A payload section, ``{}`` when present but not an object."""
    value = payload.get(key)
    if value is None:
        return None
    return value if isinstance(value, dict) else {}


def parse_event(payload: Any) -> WebhookEvent:
    """Build a WebhookEvent from a decoded JSON payload.

    Parsing is lenient: unknown fields are ignored, a missing or
    non-string ``action`` becomes ``""`` (ping, push and the like) and a
    malformed issue/PR number is kept as None. Whether a number is needed
    is decided by ``classify``. Raises InvalidPayload only when the
    payload is not a JSON object.
    """
    if not isinstance(payload, dict):
        raise InvalidPayload("payload must be a JSON object")
    action = payload.get("action")
    if not isinstance(action, str):
        action = ""

    issue = pull_request = comment = None

    raw_issue = _section(payload, "issue")
    if raw_issue is not None:
        issue = Issue(
            number=_number(raw_issue),
            title=_text(raw_issue, "title"),
            body=_text(raw_issue, "body") or None,
            html_url=_text(raw_issue, "html_url"),
        )

    raw_pr = _section(payload, "pull_request")
    if raw_pr is not None:
        pull_request = PullRequest(
            number=_number(raw_pr),
            title=_text(raw_pr, "title"),
            body=_text(raw_pr, "body") or None,
            html_url=_text(raw_pr, "html_url"),
            merged=raw_pr.get("merged") is True,
        )

    raw_comment = _section(payload, "comment")
    if raw_comment is not None:
        comment = Comment(
            body=_text(raw_comment, "body"),
            html_url=_text(raw_comment, "html_url"),
        )

    sender = _section(payload, "sender") or {}
    return WebhookEvent(
        action=action,
        issue=issue,
        pull_request=pull_request,
        comment=comment,
        sender_login=_text(sender, "login") or "unknown",
    )
