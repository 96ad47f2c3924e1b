from __future__ import annotations

from mushroom_bot.utils.exceptions import (
    BotException,
    CredentialsError,
    DecodeError,
    DownstreamError,
    TelegramAPIError,
    ValidationError,
)
from mushroom_bot.utils.logging import setup_logging

__all__ = [
    "setup_logging",
    "BotException",
    "DecodeError",
    "ValidationError",
    "DownstreamError",
    "CredentialsError",
    "TelegramAPIError",
]
