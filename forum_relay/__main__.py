"""Run the relay: ``python -m forum_relay``."""

import uvicorn

from forum_relay.adapters.web.server import app
from forum_relay.config import AppConfig


def main():
    config = AppConfig.from_env()
    print(f"Webhook server running on port {config.port}")
    uvicorn.run(app, host="0.0.0.0", port=config.port, log_level="info")


if __name__ == "__main__":
    main()
