"""Cloud Vision label detection for photos."""
from __future__ import annotations

from typing import Any, Callable

import httpx
import structlog
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import vision

from mushroom_bot.utils.exceptions import DownstreamError

logger = structlog.get_logger(__name__)


class LabelDetector:
    """Download an image and ask Cloud Vision what it shows."""

    def __init__(
        self,
        max_results: int = 10,
        download_timeout_seconds: float = 30.0,
        client_factory: Callable[[], Any] = vision.ImageAnnotatorAsyncClient,
    ):
        self.max_results = max_results
        self.download_timeout_seconds = download_timeout_seconds
        self.client_factory = client_factory

    async def detect_labels(self, url: str) -> list[str]:
        """
        Return label descriptions for the image at ``url``, most confident first.

        Raises:
            DownstreamError: download or label detection failed
        """
        content = await self._download(url)

        request = vision.AnnotateImageRequest(
            image=vision.Image(content=content),
            features=[
                vision.Feature(
                    type_=vision.Feature.Type.LABEL_DETECTION,
                    max_results=self.max_results,
                )
            ],
        )

        try:
            async with self.client_factory() as client:
                response = await client.batch_annotate_images(requests=[request])
        except (GoogleAPIError, GoogleAuthError) as exc:
            logger.error("vision_label_detection_failed", error=str(exc))
            raise DownstreamError("vision", str(exc)) from exc

        if not response.responses:
            raise DownstreamError("vision", "empty annotate response")

        annotated = response.responses[0]
        if annotated.error.message:
            logger.error("vision_label_detection_rejected", error=annotated.error.message)
            raise DownstreamError("vision", annotated.error.message)

        labels = [annotation.description for annotation in annotated.label_annotations]
        logger.info("vision_labels_detected", labels=labels)
        return labels

    async def _download(self, url: str) -> bytes:
        try:
            async with httpx.AsyncClient(timeout=self.download_timeout_seconds) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            # The URL embeds the bot token, so it is never logged.
            logger.error("image_download_failed", error=type(exc).__name__)
            raise DownstreamError("image_download", type(exc).__name__) from exc
        return response.content
