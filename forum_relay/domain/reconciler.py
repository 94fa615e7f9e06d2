"""EventReconciler — maps webhook events onto forum threads.

No framework dependencies; the chat platform is reached through ChatPort so
tests can substitute a fake.
"""

import asyncio
import sys
from contextlib import asynccontextmanager
from typing import Dict, Optional, Union

from forum_relay.domain import formatting
from forum_relay.domain.events import (
    ClassifiedEvent,
    CommentCreated,
    IssueOpened,
    IssueStateChanged,
    PullRequestOpened,
    PullRequestStateChanged,
    classify,
)
from forum_relay.domain.models import (
    RESOLUTION_MISS,
    UNRECOGNIZED,
    AppendMessage,
    CreateThread,
    NoOp,
    WebhookEvent,
)
from forum_relay.domain.resolver import find_thread
from forum_relay.ports.outbound import ChatPort, ForumPort

Action = Union[CreateThread, AppendMessage, NoOp]


def _log(msg: str):
    print(msg, file=sys.stderr)


def tracked_number(event: ClassifiedEvent) -> Optional[int]:
    """The issue/PR number an event is about, None for Unrecognized."""
    if isinstance(event, IssueOpened):
        return event.issue.number
    if isinstance(event, (PullRequestOpened, PullRequestStateChanged)):
        return event.pull_request.number
    if isinstance(event, CommentCreated):
        return event.number
    if isinstance(event, IssueStateChanged):
        return event.issue.number
    return None


class EventReconciler:
    """Decides create-vs-append for each event and performs it.

    With ``serialize_per_number`` on, handling of events for the same
    tracked number is serialized inside this process so two concurrent
    "opened" deliveries cannot both miss the lookup and create duplicate
    threads. Separate processes can still race.
    """

    def __init__(
        self,
        chat: ChatPort,
        forum_channel_id: int,
        serialize_per_number: bool = True,
    ):
        self._chat = chat
        self._forum_channel_id = forum_channel_id
        self._serialize = serialize_per_number
        self._locks: Dict[int, asyncio.Lock] = {}
        self._lock_users: Dict[int, int] = {}

    @asynccontextmanager
    async def _number_lock(self, number: int):
        if not self._serialize:
            yield
            return
        lock = self._locks.setdefault(number, asyncio.Lock())
        self._lock_users[number] = self._lock_users.get(number, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[number] -= 1
            if not self._lock_users[number]:
                del self._lock_users[number]
                del self._locks[number]

    async def plan(self, event: ClassifiedEvent, forum: ForumPort) -> Action:
        """Work out what to do for a classified event. Only reads the forum."""
        if isinstance(event, IssueOpened):
            issue = event.issue
            return CreateThread(
                name=formatting.thread_name(issue.number, issue.title),
                body=formatting.new_issue_message(event.sender, issue.html_url, issue.body),
            )

        if isinstance(event, PullRequestOpened):
            pr = event.pull_request
            thread = await find_thread(forum, pr.number)
            if thread is not None:
                return AppendMessage(
                    thread,
                    formatting.pull_request_opened_message(event.sender, pr.html_url, pr.body),
                )
            return CreateThread(
                name=formatting.thread_name(pr.number, pr.title),
                body=formatting.new_pull_request_message(event.sender, pr.html_url, pr.body),
            )

        if isinstance(event, CommentCreated):
            thread = await find_thread(forum, event.number)
            if thread is None:
                return NoOp(RESOLUTION_MISS)
            comment = event.comment
            return AppendMessage(
                thread,
                formatting.comment_message(event.sender, comment.html_url, comment.body),
            )

        if isinstance(event, PullRequestStateChanged):
            thread = await find_thread(forum, event.pull_request.number)
            if thread is None:
                return NoOp(RESOLUTION_MISS)
            return AppendMessage(
                thread,
                formatting.pull_request_state_message(event.sender, event.action, event.merged),
            )

        if isinstance(event, IssueStateChanged):
            thread = await find_thread(forum, event.issue.number)
            if thread is None:
                return NoOp(RESOLUTION_MISS)
            return AppendMessage(
                thread, formatting.issue_state_message(event.sender, event.action)
            )

        return NoOp(UNRECOGNIZED)

    async def execute(self, action: Action, forum: ForumPort) -> None:
        """Perform an action once. Errors from the chat platform propagate."""
        if isinstance(action, CreateThread):
            await forum.create_thread(action.name, action.body)
        elif isinstance(action, AppendMessage):
            await action.thread.post_message(action.body)

    async def handle(self, event: WebhookEvent) -> Action:
        """Classify, plan and execute one webhook event."""
        classified = classify(event)
        number = tracked_number(classified)

        if number is None:
            _log(f"[reconciler] ignoring unrecognized event action={event.action!r}")
            return NoOp(UNRECOGNIZED)

        forum = await self._chat.fetch_channel(self._forum_channel_id)
        async with self._number_lock(number):
            action = await self.plan(classified, forum)
            await self.execute(action, forum)

        self._report(classified, number, action)
        return action

    def _report(self, event: ClassifiedEvent, number: int, action: Action):
        if isinstance(action, CreateThread):
            kind = "pull request" if isinstance(event, PullRequestOpened) else "issue"
            _log(f"[reconciler] Created thread for {kind} #{number}")
        elif isinstance(action, AppendMessage):
            _log(f"[reconciler] Posted to thread {action.thread.name!r}")
        else:
            _log(
                f"[reconciler] WARNING: no thread found for #{number}, "
                f"dropping {type(event).__name__}"
            )
