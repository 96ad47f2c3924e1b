from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from mushroom_bot.config import Settings, get_settings
from mushroom_bot.services.bot_service import BotService
from mushroom_bot.services.credentials import ProjectResolver
from mushroom_bot.services.intent_service import IntentDetector
from mushroom_bot.services.telegram_client import TelegramClient
from mushroom_bot.services.translation_service import TextTranslator
from mushroom_bot.services.vision_service import LabelDetector


@lru_cache
def _project_resolver(project_id: str | None) -> ProjectResolver:
    return ProjectResolver(project_id)


def get_project_resolver(
    settings: Settings = Depends(get_settings),
) -> ProjectResolver:
    """Process-wide project resolver; discovery happens once per configured project."""
    return _project_resolver(settings.google_cloud_project)


def get_telegram_client(
    settings: Settings = Depends(get_settings),
) -> TelegramClient:
    """Dependency to get a request-scoped Telegram client."""
    return TelegramClient(
        bot_token=settings.bot_token,
        api_url=settings.telegram_api_url,
        timeout_seconds=settings.telegram_timeout_seconds,
    )


def get_bot_service(
    telegram: Annotated[TelegramClient, Depends(get_telegram_client)],
    project_resolver: Annotated[ProjectResolver, Depends(get_project_resolver)],
    settings: Settings = Depends(get_settings),
) -> BotService:
    """Dependency to get the update handler for one request."""
    translator = None
    if settings.translation_enabled:
        translator = TextTranslator(
            target_language=settings.language_code,
            source_language=settings.translation_source_language,
        )

    return BotService(
        telegram=telegram,
        project_resolver=project_resolver,
        intent_detector=IntentDetector(),
        label_detector=LabelDetector(
            max_results=settings.max_labels,
            download_timeout_seconds=settings.image_download_timeout_seconds,
        ),
        language_code=settings.language_code,
        translator=translator,
    )


BotServiceDep = Annotated[BotService, Depends(get_bot_service)]
