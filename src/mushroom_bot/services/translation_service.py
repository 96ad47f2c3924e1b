"""Optional Cloud Translation of detected labels."""
from __future__ import annotations

from typing import Any, Callable

import structlog
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import translate_v3

from mushroom_bot.utils.exceptions import DownstreamError

logger = structlog.get_logger(__name__)


class TextTranslator:
    """Translate plain text with Cloud Translation v3."""

    def __init__(
        self,
        target_language: str = "ru-RU",
        source_language: str = "en-US",
        client_factory: Callable[[], Any] = translate_v3.TranslationServiceAsyncClient,
    ):
        self.target_language = target_language
        self.source_language = source_language
        self.client_factory = client_factory

    async def translate(self, project_id: str, text: str) -> str:
        """Translate ``text`` and join multiple translations with ", "."""
        request = translate_v3.TranslateTextRequest(
            parent=f"projects/{project_id}/locations/global",
            source_language_code=self.source_language,
            target_language_code=self.target_language,
            mime_type="text/plain",
            contents=[text],
        )

        try:
            async with self.client_factory() as client:
                response = await client.translate_text(request=request)
        except (GoogleAPIError, GoogleAuthError) as exc:
            logger.error("translation_failed", error=str(exc))
            raise DownstreamError("translate", str(exc)) from exc

        return ", ".join(
            translation.translated_text for translation in response.translations
        )
