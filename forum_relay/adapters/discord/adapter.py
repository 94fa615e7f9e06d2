"""Discord adapter — implements the chat ports on top of discord.py.

RelayBot owns the single long-lived gateway session. The port adapters wrap
it so the reconciler never imports discord.
"""

import sys
from typing import List

import discord

from forum_relay.ports.outbound import ChatUnavailable

# Discord message content limit
MAX_MESSAGE_LENGTH = 2000


def _log(msg: str):
    print(msg, file=sys.stderr)


class DiscordThreadAdapter:
    """ThreadPort implementation around a discord.Thread."""

    def __init__(self, thread: discord.Thread):
        self._thread = thread

    @property
    def name(self) -> str:
        return self._thread.name

    @property
    def id(self) -> int:
        return self._thread.id

    async def post_message(self, body: str) -> None:
        # Split long messages
        text = body
        while text:
            await self._thread.send(text[:MAX_MESSAGE_LENGTH])
            text = text[MAX_MESSAGE_LENGTH:]


class DiscordForumAdapter:
    """ForumPort implementation around a discord.ForumChannel."""

    def __init__(self, forum: discord.ForumChannel):
        self._forum = forum

    async def list_active_threads(self) -> List[DiscordThreadAdapter]:
        # Guild-wide endpoint; keep only this forum's children.
        threads = await self._forum.guild.active_threads()
        return [
            DiscordThreadAdapter(t) for t in threads if t.parent_id == self._forum.id
        ]

    async def list_archived_threads(self) -> List[DiscordThreadAdapter]:
        return [
            DiscordThreadAdapter(t)
            async for t in self._forum.archived_threads(limit=None)
        ]

    async def create_thread(self, name: str, initial_message: str) -> DiscordThreadAdapter:
        created = await self._forum.create_thread(
            name=name,
            content=initial_message[:MAX_MESSAGE_LENGTH],
        )
        thread = DiscordThreadAdapter(created.thread)
        # Starter message is capped; the rest follows as replies
        overflow = initial_message[MAX_MESSAGE_LENGTH:]
        if overflow:
            await thread.post_message(overflow)
        return thread


class DiscordChatAdapter:
    """ChatPort implementation using a discord.Client."""

    def __init__(self, client: discord.Client):
        self._client = client

    async def fetch_channel(self, channel_id: int) -> DiscordForumAdapter:
        channel = self._client.get_channel(channel_id)
        if channel is None:
            try:
                channel = await self._client.fetch_channel(channel_id)
            except discord.NotFound as e:
                raise ChatUnavailable(f"channel {channel_id} not found") from e
        if not isinstance(channel, discord.ForumChannel):
            raise ChatUnavailable(f"channel {channel_id} is not a forum channel")
        return DiscordForumAdapter(channel)


class RelayBot(discord.Client):
    """Gateway session used only for forum thread operations."""

    def __init__(self, **discord_kwargs):
        intents = discord.Intents.none()
        intents.guilds = True
        super().__init__(intents=intents, **discord_kwargs)

    async def on_ready(self):
        _log(f"Bot logged in as {self.user}")
