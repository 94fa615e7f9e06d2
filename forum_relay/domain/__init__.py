"""Domain layer — pure Python, no framework dependencies."""

from forum_relay.domain.events import ClassifiedEvent, classify
from forum_relay.domain.models import (
    AppendMessage,
    CreateThread,
    InvalidPayload,
    NoOp,
    WebhookEvent,
    parse_event,
)
from forum_relay.domain.reconciler import Action, EventReconciler
from forum_relay.domain.resolver import find_thread
from forum_relay.domain.signature import sign, verify

__all__ = [
    "Action",
    "AppendMessage",
    "ClassifiedEvent",
    "CreateThread",
    "EventReconciler",
    "InvalidPayload",
    "NoOp",
    "WebhookEvent",
    "classify",
    "find_thread",
    "parse_event",
    "sign",
    "verify",
]
