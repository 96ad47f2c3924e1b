"""Thin Telegram Bot API client used for replies and file lookups."""
from __future__ import annotations

from typing import Any

import httpx
import structlog

from mushroom_bot.utils.exceptions import TelegramAPIError

logger = structlog.get_logger(__name__)


class TelegramClient:
    """Call Telegram Bot API methods over HTTPS."""

    def __init__(
        self,
        bot_token: str,
        api_url: str = "https://api.telegram.org",
        timeout_seconds: float = 10.0,
    ):
        self.bot_token = bot_token
        self.timeout_seconds = timeout_seconds
        self.base_url = api_url.rstrip("/")
        self.api_url = f"{self.base_url}/bot{self.bot_token}"
        self.file_url = f"{self.base_url}/file/bot{self.bot_token}"

    async def send_message(
        self,
        chat_id: int,
        text: str,
        reply_to_message_id: int | None = None,
    ) -> dict[str, Any]:
        """
        Send a plain-text message to a chat.

        Args:
            chat_id: Target chat
            text: Message body, sent without parse mode
            reply_to_message_id: Thread the message as a reply to this message

        Returns:
            The sent Message object as returned by Telegram

        Raises:
            TelegramAPIError: Telegram refused the message or was unreachable
        """
        payload: dict[str, object] = {"chat_id": chat_id, "text": text}
        if reply_to_message_id is not None:
            payload["reply_to_message_id"] = reply_to_message_id

        result = await self._call("sendMessage", payload)
        logger.info(
            "telegram_message_sent",
            chat_id=chat_id,
            reply_to_message_id=reply_to_message_id,
        )
        return result

    async def get_file_url(self, file_id: str) -> str:
        """Resolve a file id into a download URL via getFile."""
        result = await self._call("getFile", {"file_id": file_id})
        file_path = result.get("file_path") if isinstance(result, dict) else None
        if not file_path:
            raise TelegramAPIError("getFile", "response has no file_path")
        return f"{self.file_url}/{file_path}"

    async def set_webhook(self, url: str, secret_token: str | None = None) -> bool:
        """Point the bot's webhook at ``url``."""
        payload: dict[str, object] = {"url": url}
        if secret_token:
            payload["secret_token"] = secret_token

        await self._call("setWebhook", payload)
        logger.info("telegram_webhook_registered", webhook_url=url)
        return True

    async def _call(self, method: str, payload: dict[str, object]) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.post(f"{self.api_url}/{method}", json=payload)
        except httpx.RequestError as exc:
            logger.error("telegram_request_failed", method=method, error=str(exc))
            raise TelegramAPIError(method, str(exc)) from exc

        # Telegram reports failures as {"ok": false, "description": ...}
        # with a 4xx status, so the body is read before the status.
        try:
            data = response.json()
        except ValueError:
            response_error = f"http_status={response.status_code}"
            logger.error("telegram_invalid_response", method=method, error=response_error)
            raise TelegramAPIError(method, response_error) from None

        if not isinstance(data, dict) or not data.get("ok"):
            description = (
                data.get("description") if isinstance(data, dict) else None
            ) or f"http_status={response.status_code}"
            logger.error(
                "telegram_api_error",
                method=method,
                status_code=response.status_code,
                description=description,
            )
            raise TelegramAPIError(method, description)

        return data.get("result")
