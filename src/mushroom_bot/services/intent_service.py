"""Dialogflow intent detection for free-text messages."""
from __future__ import annotations

from typing import Any, Callable

import structlog
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import dialogflow_v2

from mushroom_bot.utils.exceptions import DownstreamError

logger = structlog.get_logger(__name__)


class IntentDetector:
    """Ask a Dialogflow agent for replies to a user's text."""

    def __init__(
        self,
        client_factory: Callable[[], Any] = dialogflow_v2.SessionsAsyncClient,
    ):
        self.client_factory = client_factory

    async def detect_intent_text(
        self,
        project_id: str,
        session_id: str,
        text: str,
        language_code: str,
    ) -> list[str]:
        """
        Run intent detection and collect the text fulfillment replies.

        Args:
            project_id: Google Cloud project hosting the agent
            session_id: Conversation id, the chat id for Telegram users
            text: User's message
            language_code: Language of ``text``

        Returns:
            Reply strings in the order Dialogflow returned them

        Raises:
            DownstreamError: empty identifiers or a failed API call
        """
        if not project_id or not session_id:
            raise DownstreamError(
                "dialogflow",
                f"received empty project ({project_id}) or session ({session_id})",
            )

        session_path = f"projects/{project_id}/agent/sessions/{session_id}"
        request = dialogflow_v2.DetectIntentRequest(
            session=session_path,
            query_input=dialogflow_v2.QueryInput(
                text=dialogflow_v2.TextInput(text=text, language_code=language_code),
            ),
        )

        try:
            async with self.client_factory() as client:
                response = await client.detect_intent(request=request)
        except (GoogleAPIError, GoogleAuthError) as exc:
            logger.error("dialogflow_detect_intent_failed", session=session_path, error=str(exc))
            raise DownstreamError("dialogflow", str(exc)) from exc

        replies = self._fulfillment_texts(response)
        logger.info("dialogflow_intent_detected", session=session_path, reply_count=len(replies))
        return replies

    @staticmethod
    def _fulfillment_texts(response: dialogflow_v2.DetectIntentResponse) -> list[str]:
        replies: list[str] = []
        for message in response.query_result.fulfillment_messages:
            # Cards, quick replies and payloads are not sent to Telegram.
            if "text" not in message:
                continue
            replies.extend(message.text.text)
        return replies
