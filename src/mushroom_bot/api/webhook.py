"""Telegram webhook router."""
from __future__ import annotations

import hmac

import structlog
from fastapi import APIRouter, Depends, Header, HTTPException, Request, Response, status

from mushroom_bot.config import Settings, get_settings
from mushroom_bot.dependencies import BotServiceDep
from mushroom_bot.services.webhook import decode_update, validate_update
from mushroom_bot.utils.exceptions import DecodeError, DownstreamError, ValidationError

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("/", status_code=200)
async def telegram_webhook(
    request: Request,
    service: BotServiceDep,
    settings: Settings = Depends(get_settings),
    x_telegram_bot_api_secret_token: str | None = Header(default=None),
) -> Response:
    """Answer one Telegram update with a Dialogflow or Vision based reply."""
    webhook_secret = settings.telegram_webhook_secret
    if webhook_secret and not hmac.compare_digest(
        x_telegram_bot_api_secret_token or "", webhook_secret
    ):
        logger.warning("telegram_webhook_secret_mismatch")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid secret token")

    body = await request.body()
    try:
        update = validate_update(decode_update(body))
    except (DecodeError, ValidationError) as exc:
        logger.warning("telegram_webhook_rejected", error=str(exc))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Bad Request")

    try:
        await service.handle_update(update)
    except DownstreamError as exc:
        # Details stay in the logs; the chat user only sees silence.
        logger.error(
            "telegram_update_processing_failed",
            update_id=update.update_id,
            service=exc.service,
            error=str(exc),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        )

    return Response(status_code=200)
