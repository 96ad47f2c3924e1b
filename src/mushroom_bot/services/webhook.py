"""Decoding and validation of inbound Telegram webhook bodies."""
from __future__ import annotations

import pydantic

from mushroom_bot.schemas.telegram import TelegramUpdate
from mushroom_bot.utils.exceptions import DecodeError, ValidationError


def decode_update(body: bytes) -> TelegramUpdate:
    """
    Parse a raw request body into an update.

    Unknown fields are ignored so newer Bot API payloads still decode.

    Raises:
        DecodeError: body is not JSON or does not match the update schema
    """
    try:
        return TelegramUpdate.model_validate_json(body)
    except pydantic.ValidationError as exc:
        raise DecodeError(f"{exc.error_count()} schema error(s)") from exc


def validate_update(update: TelegramUpdate) -> TelegramUpdate:
    """Ensure the update has a message with text or a photo."""
    if update.message is None:
        raise ValidationError("webhook: no message")

    if not update.message.has_text and not update.message.has_photo:
        raise ValidationError("webhook: no text or photo")

    return update
