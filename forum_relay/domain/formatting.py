"""Thread names and relay message bodies."""

NO_DESCRIPTION = "No description"

# Discord rejects thread names longer than this.
MAX_THREAD_NAME = 100


def thread_prefix(number: int) -> str:
    """Identity key of a tracked item's thread: ``#<number> - ``."""
    return f"#{number} - "


def thread_name(number: int, title: str) -> str:
    return f"{thread_prefix(number)}{title}"[:MAX_THREAD_NAME]


def _described(body):
    return body or NO_DESCRIPTION


def new_issue_message(sender: str, url: str, body) -> str:
    return f"New Issue by {sender}: {url}\n\n{_described(body)}"


def new_pull_request_message(sender: str, url: str, body) -> str:
    return f"New Pull Request by {sender}: {url}\n\n{_described(body)}"


def pull_request_opened_message(sender: str, url: str, body) -> str:
    return f"{sender} opened a pull request: {url}\n\n{_described(body)}"


def comment_message(sender: str, url: str, body: str) -> str:
    return f"{sender} commented: {url}\n\n{body}"


def pull_request_state_message(sender: str, action: str, merged: bool) -> str:
    if merged:
        return f"{sender} merged this PR"
    return f"{sender} {action} this PR"


def issue_state_message(sender: str, action: str) -> str:
    return f"{sender} {action} this issue"
