"""Webhook and status routes."""

import json
import sys
from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from forum_relay.domain.models import AppendMessage, CreateThread, NoOp, parse_event
from forum_relay.domain.signature import verify
from forum_relay.ports.outbound import ChatUnavailable

SIGNATURE_HEADER = "x-hub-signature-256"

relay_router = APIRouter(tags=["relay"])


def _log(msg: str):
    print(msg, file=sys.stderr)


class WebhookResponse(BaseModel):
    status: str
    action: str
    reason: Optional[str] = None


class StatusResponse(BaseModel):
    ready: bool
    forumChannelId: int


def _describe(action) -> WebhookResponse:
    if isinstance(action, CreateThread):
        return WebhookResponse(status="ok", action="create_thread")
    if isinstance(action, AppendMessage):
        return WebhookResponse(status="ok", action="append_message")
    reason = action.reason if isinstance(action, NoOp) else None
    return WebhookResponse(status="ok", action="noop", reason=reason)


@relay_router.post("/webhook", response_model=WebhookResponse)
async def github_webhook(request: Request):
    """Receive a GitHub webhook delivery and relay it to the forum."""
    raw_body = await request.body()

    # Verify against the raw bytes before anything is parsed
    config = request.app.state.config
    signature = request.headers.get(SIGNATURE_HEADER)
    if not config.webhook_secret or not verify(
        raw_body, signature, config.webhook_secret_bytes
    ):
        _log("[webhook] Invalid webhook signature")
        raise HTTPException(status_code=401, detail="Invalid signature")

    reconciler = request.app.state.reconciler
    try:
        if reconciler is None:
            raise ChatUnavailable("Discord session not configured")
        event = parse_event(json.loads(raw_body))
        action = await reconciler.handle(event)
    except Exception as e:
        _log(f"[webhook] Error: {type(e).__name__}: {e}")
        raise HTTPException(status_code=500, detail="Internal error")

    return _describe(action)


@relay_router.get("/status", response_model=StatusResponse)
async def status(request: Request):
    """Whether the Discord session is logged in."""
    bot = request.app.state.bot
    return StatusResponse(
        ready=bool(bot is not None and bot.is_ready()),
        forumChannelId=request.app.state.config.forum_channel_id,
    )
