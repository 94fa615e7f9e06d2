"""Shared in-memory chat fakes for relay tests."""

from typing import List, Optional

import pytest


class FakeThread:
    def __init__(self, name: str):
        self.name = name
        self.messages: List[str] = []

    async def post_message(self, body: str) -> None:
        self.messages.append(body)


class FakeForum:
    def __init__(self, active: Optional[List[str]] = None, archived: Optional[List[str]] = None):
        self.active = [FakeThread(n) for n in (active or [])]
        self.archived = [FakeThread(n) for n in (archived or [])]
        self.created: List[FakeThread] = []
        self.active_calls = 0
        self.archived_calls = 0

    async def list_active_threads(self):
        self.active_calls += 1
        return list(self.active)

    async def list_archived_threads(self):
        self.archived_calls += 1
        return list(self.archived)

    async def create_thread(self, name: str, initial_message: str) -> FakeThread:
        thread = FakeThread(name)
        thread.messages.append(initial_message)
        self.active.append(thread)
        self.created.append(thread)
        return thread

    def add(self, name: str, archived: bool = False) -> FakeThread:
        thread = FakeThread(name)
        (self.archived if archived else self.active).append(thread)
        return thread

    def thread(self, name: str) -> FakeThread:
        for t in self.active + self.archived:
            if t.name == name:
                return t
        raise KeyError(name)


class FakeChat:
    def __init__(self, forum: FakeForum):
        self.forum = forum
        self.fetched: List[int] = []

    async def fetch_channel(self, channel_id: int) -> FakeForum:
        self.fetched.append(channel_id)
        return self.forum


@pytest.fixture
def forum():
    return FakeForum()


@pytest.fixture
def chat(forum):
    return FakeChat(forum)


@pytest.fixture
def make_forum():
    return FakeForum
