"""Per-update orchestration: text goes to Dialogflow, photos go to Vision."""
from __future__ import annotations

import structlog

from mushroom_bot.schemas.telegram import TelegramMessage, TelegramUpdate
from mushroom_bot.services.credentials import ProjectResolver
from mushroom_bot.services.intent_service import IntentDetector
from mushroom_bot.services.label_filter import filter_labels, has_any
from mushroom_bot.services.telegram_client import TelegramClient
from mushroom_bot.services.translation_service import TextTranslator
from mushroom_bot.services.vision_service import LabelDetector
from mushroom_bot.utils.exceptions import DownstreamError, ValidationError

logger = structlog.get_logger(__name__)

MUSHROOM_LABELS = ["fungus", "mushroom"]

NOT_FOUND_TEXT = "Увы, но на этом изображении грибов я не вижу."
FOUND_PREFIX = "На этом изображении я вижу: "
DISCLAIMER = (
    "\n\n⚠️ Результаты распознавания и определения основаны на сервисах "
    "Google Cloud Vision и Google Cloud Translation. За любые несоответствия "
    "фактического названия гриба и результатов распознавания ответственны "
    "указанные решения и их производители. Мы рекомендуем вам брать только "
    "те грибы, в которых вы уверены на 100 %."
)


class BotService:
    """Answer one validated Telegram update."""

    def __init__(
        self,
        telegram: TelegramClient,
        project_resolver: ProjectResolver,
        intent_detector: IntentDetector,
        label_detector: LabelDetector,
        language_code: str = "ru-RU",
        translator: TextTranslator | None = None,
    ):
        self.telegram = telegram
        self.project_resolver = project_resolver
        self.intent_detector = intent_detector
        self.label_detector = label_detector
        self.language_code = language_code
        self.translator = translator

    async def handle_update(self, update: TelegramUpdate) -> None:
        """Route an update to the text or photo branch. Text wins if both are present."""
        message = update.message
        if message is None:
            raise ValidationError("webhook: no message")

        if message.has_text:
            logger.info("telegram_text_received", chat_id=message.chat.id)
            await self.process_text(message)
            return

        if message.has_photo:
            logger.info("telegram_photo_received", chat_id=message.chat.id)
            await self.process_photo(message)
            return

        raise ValidationError("webhook: no text or photo")

    async def process_text(self, message: TelegramMessage) -> None:
        project_id = await self.project_resolver.resolve()
        replies = await self.intent_detector.detect_intent_text(
            project_id,
            str(message.chat.id),
            message.text or "",
            self.language_code,
        )
        for reply in replies:
            await self.telegram.send_message(message.chat.id, reply)

    async def process_photo(self, message: TelegramMessage) -> None:
        photo = message.largest_photo()
        if photo is None:
            raise ValidationError("webhook: no text or photo")

        url = await self.telegram.get_file_url(photo.file_id)
        labels = await self.label_detector.detect_labels(url)

        if not has_any(MUSHROOM_LABELS, labels):
            logger.info("photo_without_mushrooms", chat_id=message.chat.id, labels=labels)
            await self.telegram.send_message(
                message.chat.id,
                NOT_FOUND_TEXT + DISCLAIMER,
                reply_to_message_id=message.message_id,
            )
            return

        labels = filter_labels(labels, MUSHROOM_LABELS)
        text = await self._translate(", ".join(labels))
        logger.info("photo_with_mushrooms", chat_id=message.chat.id, labels=labels)
        await self.telegram.send_message(
            message.chat.id,
            FOUND_PREFIX + text + DISCLAIMER,
            reply_to_message_id=message.message_id,
        )

    async def _translate(self, text: str) -> str:
        if self.translator is None or not text:
            return text
        try:
            project_id = await self.project_resolver.resolve()
            return await self.translator.translate(project_id, text)
        except DownstreamError as exc:
            # Untranslated labels are still useful to the user.
            logger.warning("label_translation_skipped", error=str(exc))
            return text
