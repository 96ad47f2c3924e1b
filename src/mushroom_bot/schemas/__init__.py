from __future__ import annotations

from mushroom_bot.schemas.telegram import (
    TelegramChat,
    TelegramMessage,
    TelegramPhotoSize,
    TelegramUpdate,
)

__all__ = [
    "TelegramChat",
    "TelegramMessage",
    "TelegramPhotoSize",
    "TelegramUpdate",
]
