"""Configuration loaded from the environment (.env supported)."""

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

_TRUTHY = ("1", "true", "yes", "on")


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


@dataclass
class AppConfig:
    """Typed process configuration."""

    forum_channel_id: int = 0
    discord_bot_token: str = ""
    webhook_secret: str = ""
    port: int = 3000
    serialize_per_number: bool = True

    @property
    def discord_configured(self) -> bool:
        return bool(self.discord_bot_token) and self.discord_bot_token != "your_token_here"

    @property
    def webhook_secret_bytes(self) -> bytes:
        return self.webhook_secret.encode("utf-8")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            forum_channel_id=_int_env("FORUM_CHANNEL_ID", 0),
            discord_bot_token=os.getenv("DISCORD_BOT_TOKEN", ""),
            webhook_secret=os.getenv("WEBHOOK_SECRET", ""),
            port=_int_env("PORT", 3000),
            serialize_per_number=os.getenv("SERIALIZE_PER_NUMBER", "true").strip().lower()
            in _TRUTHY,
        )
