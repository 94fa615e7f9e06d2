"""Thread lookup by tracked number.

Identity lives only in thread names, so every lookup scans the forum's live
thread lists: active threads first, archived threads only on a miss. If two
threads share a prefix the first one listed wins; nothing here enforces
uniqueness.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from forum_relay.domain.formatting import thread_prefix

if TYPE_CHECKING:
    from forum_relay.ports.outbound import ForumPort, ThreadPort


def _first_match(threads: Iterable["ThreadPort"], prefix: str) -> Optional["ThreadPort"]:
    for thread in threads:
        if thread.name.startswith(prefix):
            return thread
    return None


async def find_thread(forum: "ForumPort", number: int) -> Optional["ThreadPort"]:
    """Return the thread for ``number`` or None."""
    prefix = thread_prefix(number)

    thread = _first_match(await forum.list_active_threads(), prefix)
    if thread is not None:
        return thread

    return _first_match(await forum.list_archived_threads(), prefix)
