from __future__ import annotations

from mushroom_bot.services.bot_service import BotService
from mushroom_bot.services.credentials import ProjectResolver
from mushroom_bot.services.intent_service import IntentDetector
from mushroom_bot.services.label_filter import filter_labels, has_any
from mushroom_bot.services.telegram_client import TelegramClient
from mushroom_bot.services.translation_service import TextTranslator
from mushroom_bot.services.vision_service import LabelDetector
from mushroom_bot.services.webhook import decode_update, validate_update

__all__ = [
    "BotService",
    "ProjectResolver",
    "IntentDetector",
    "LabelDetector",
    "TelegramClient",
    "TextTranslator",
    "has_any",
    "filter_labels",
    "decode_update",
    "validate_update",
]
