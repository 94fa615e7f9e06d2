"""Discord adapters."""

from forum_relay.adapters.discord.adapter import (
    DiscordChatAdapter,
    DiscordForumAdapter,
    DiscordThreadAdapter,
    RelayBot,
)

__all__ = [
    "DiscordChatAdapter",
    "DiscordForumAdapter",
    "DiscordThreadAdapter",
    "RelayBot",
]
