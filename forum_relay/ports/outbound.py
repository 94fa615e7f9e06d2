"""Outbound ports — the chat platform capabilities the relay depends on."""

from typing import List, Protocol, runtime_checkable


@runtime_checkable
class ThreadPort(Protocol):
    """A named discussion thread inside a forum channel."""

    @property
    def name(self) -> str: ...

    async def post_message(self, body: str) -> None: ...


@runtime_checkable
class ForumPort(Protocol):
    """A forum channel whose children are threads."""

    async def list_active_threads(self) -> List[ThreadPort]: ...
    async def list_archived_threads(self) -> List[ThreadPort]: ...
    async def create_thread(self, name: str, initial_message: str) -> ThreadPort: ...


@runtime_checkable
class ChatPort(Protocol):
    """Long-lived chat session able to look up forum channels."""

    async def fetch_channel(self, channel_id: int) -> ForumPort: ...


class ChatUnavailable(Exception):
    """Raised when the chat session cannot provide the requested forum."""
