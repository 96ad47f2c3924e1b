"""Resolution of the Google Cloud project the bot runs under."""
from __future__ import annotations

import asyncio

import google.auth
import structlog
from google.auth.exceptions import GoogleAuthError

from mushroom_bot.utils.exceptions import CredentialsError

logger = structlog.get_logger(__name__)


class ProjectResolver:
    """
    Resolve the Google Cloud project id.

    An explicitly configured project wins. Otherwise Application Default
    Credentials are consulted once and the result is cached until
    ``invalidate()`` is called.
    """

    def __init__(self, project_id: str | None = None):
        self._configured_project_id = project_id or None
        self._cached_project_id: str | None = None
        self._lock = asyncio.Lock()

    async def resolve(self) -> str:
        """
        Return the project id.

        Discovery may query the GCE metadata server, so it runs in a worker
        thread.

        Raises:
            CredentialsError: no credentials or no project could be found
        """
        if self._configured_project_id:
            return self._configured_project_id

        async with self._lock:
            if self._cached_project_id is None:
                self._cached_project_id = await asyncio.to_thread(self._discover)
            return self._cached_project_id

    def invalidate(self) -> None:
        """Forget the discovered project so the next call looks it up again."""
        self._cached_project_id = None

    @staticmethod
    def _discover() -> str:
        try:
            _, project_id = google.auth.default()
        except GoogleAuthError as exc:
            logger.error("google_credentials_not_found", error=str(exc))
            raise CredentialsError(str(exc)) from exc

        if not project_id:
            logger.error("google_project_not_found")
            raise CredentialsError("default credentials carry no project id")

        logger.info("google_project_resolved", project_id=project_id)
        return project_id
