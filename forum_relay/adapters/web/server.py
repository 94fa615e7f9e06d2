"""FastAPI application and Discord session startup."""

import asyncio
import sys
from typing import Optional

from fastapi import FastAPI

from forum_relay.adapters.discord.adapter import DiscordChatAdapter, RelayBot
from forum_relay.adapters.web.routes import relay_router
from forum_relay.config import AppConfig
from forum_relay.domain.reconciler import EventReconciler
from forum_relay.ports.outbound import ChatPort


def _log(msg: str):
    print(msg, file=sys.stderr)


def create_app(
    config: AppConfig,
    chat: Optional[ChatPort] = None,
    bot: Optional[RelayBot] = None,
) -> FastAPI:
    """Build the app.

    Pass ``chat`` to run against something other than Discord (tests). When
    omitted and a bot token is configured, a RelayBot session is created and
    logged in on startup.
    """
    app = FastAPI(title="GitHub Forum Relay")
    app.include_router(relay_router)

    if chat is None and bot is None and config.discord_configured:
        bot = RelayBot()
    if chat is None and bot is not None:
        chat = DiscordChatAdapter(bot)

    app.state.config = config
    app.state.bot = bot
    app.state.reconciler = (
        EventReconciler(
            chat,
            config.forum_channel_id,
            serialize_per_number=config.serialize_per_number,
        )
        if chat is not None
        else None
    )

    @app.on_event("startup")
    async def startup_event():
        _log("GitHub forum relay starting")
        _log(f"Forum channel: {config.forum_channel_id or 'not set'}")
        if not config.webhook_secret:
            _log("WEBHOOK_SECRET is empty; every delivery will be rejected")

        if bot is None:
            _log("Discord bot not configured (set DISCORD_BOT_TOKEN in .env)")
            return
        if bot.is_ready():
            return

        _log("Starting Discord bot...")

        async def _start_discord():
            try:
                await bot.start(config.discord_bot_token)
            except Exception as e:
                _log(f"Discord bot failed to start: {e}")

        app.state.discord_task = asyncio.create_task(_start_discord())

    @app.on_event("shutdown")
    async def shutdown_event():
        if bot is not None and not bot.is_closed():
            await bot.close()

    return app


app = create_app(AppConfig.from_env())
