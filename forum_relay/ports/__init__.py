"""Port interfaces (Hexagonal Architecture)."""

from forum_relay.ports.outbound import ChatPort, ChatUnavailable, ForumPort, ThreadPort

__all__ = [
    "ChatPort",
    "ChatUnavailable",
    "ForumPort",
    "ThreadPort",
]
