"""
Pytest configuration and shared fixtures.

Every external collaborator (Telegram, Dialogflow, Vision, credentials) is
replaced by a mock, so no network or Google credentials are needed.
"""
from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from mushroom_bot.services.bot_service import BotService
from mushroom_bot.services.credentials import ProjectResolver
from mushroom_bot.services.intent_service import IntentDetector
from mushroom_bot.services.telegram_client import TelegramClient
from mushroom_bot.services.vision_service import LabelDetector

CHAT_ID = 42
MESSAGE_ID = 7


# ── Update payloads ───────────────────────────────────────────────────────────
@pytest.fixture
def text_update() -> dict[str, Any]:
    return {
        "update_id": 1001,
        "message": {
            "message_id": MESSAGE_ID,
            "date": 1700000000,
            "chat": {"id": CHAT_ID, "type": "private"},
            "from": {"id": CHAT_ID, "is_bot": False, "first_name": "Anna"},
            "text": "hello",
        },
    }


@pytest.fixture
def photo_update() -> dict[str, Any]:
    return {
        "update_id": 1002,
        "message": {
            "message_id": MESSAGE_ID,
            "date": 1700000000,
            "chat": {"id": CHAT_ID, "type": "private"},
            "photo": [
                {"file_id": "small", "file_unique_id": "s", "width": 90, "height": 60},
                {"file_id": "medium", "file_unique_id": "m", "width": 320, "height": 240},
                {"file_id": "large", "file_unique_id": "l", "width": 1280, "height": 960},
            ],
        },
    }


# ── Mocked collaborators ──────────────────────────────────────────────────────
@pytest.fixture
def telegram() -> AsyncMock:
    client = AsyncMock(spec=TelegramClient)
    client.get_file_url.return_value = "https://api.telegram.org/file/botTOKEN/photos/file_1.jpg"
    client.send_message.return_value = {"message_id": 100}
    return client


@pytest.fixture
def project_resolver() -> MagicMock:
    resolver = MagicMock(spec=ProjectResolver)
    resolver.resolve = AsyncMock(return_value="mushroom-project")
    return resolver


@pytest.fixture
def intent_detector() -> AsyncMock:
    detector = AsyncMock(spec=IntentDetector)
    detector.detect_intent_text.return_value = ["Привет!", "Пришлите фото гриба."]
    return detector


@pytest.fixture
def label_detector() -> AsyncMock:
    detector = AsyncMock(spec=LabelDetector)
    detector.detect_labels.return_value = ["Mushroom", "Forest"]
    return detector


@pytest.fixture
def bot_service(telegram, project_resolver, intent_detector, label_detector) -> BotService:
    return BotService(
        telegram=telegram,
        project_resolver=project_resolver,
        intent_detector=intent_detector,
        label_detector=label_detector,
        language_code="ru-RU",
    )


# ── Mock HTTP client fixture ──────────────────────────────────────────────────
@pytest.fixture
def mock_async_client():
    """Factory for a mocked httpx.AsyncClient usable as an async context manager."""
    def _make(post=None, get=None):
        client = AsyncMock()
        if post is not None:
            client.post = post
        if get is not None:
            client.get = get
        client.__aenter__ = AsyncMock(return_value=client)
        client.__aexit__ = AsyncMock(return_value=False)
        return client
    return _make


@pytest.fixture
def telegram_response():
    """Factory for mocked Bot API responses."""
    def _make(body: Any, status_code: int = 200) -> MagicMock:
        resp = MagicMock()
        resp.status_code = status_code
        if isinstance(body, Exception):
            resp.json = MagicMock(side_effect=body)
        else:
            resp.json = MagicMock(return_value=body)
        return resp
    return _make
