"""HTTP client for the remote chat webhooks.

Both endpoints take a JSON ``POST``. The profile endpoint only reports
success through its status; the question endpoint answers with a JSON body
holding an ``answer`` field.
"""
import asyncio
import json
import logging
from typing import Any, Dict, Optional

import aiohttp

from realty_chat.chat_config import WebhookConfig
from realty_chat.chat_models import VisitorProfile

logger = logging.getLogger(__name__)


class WebhookError(Exception):
    """Raised when a webhook call does not succeed.

    ``status`` holds the HTTP status for remote rejections and is None for
    transport, timeout and parse failures.
    """

    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        super().__init__(message)


class WebhookClient:
    """Async client for the profile and question webhooks.

    The underlying ``aiohttp.ClientSession`` is created on first use and
    must be released with :meth:`close`.
    """

    def __init__(self, config: WebhookConfig):
        self.config = config
        self._session: Optional[aiohttp.ClientSession] = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={"Content-Type": "application/json"},
                timeout=aiohttp.ClientTimeout(total=self.config.request_timeout),
            )
        return self._session

    async def _post(self, url: str, payload: Dict[str, Any], *, read_json: bool) -> Any:
        session = self._get_session()
        try:
            async with session.post(url, json=payload) as resp:
                if not 200 <= resp.status < 300:
                    raise WebhookError(f"Webhook {url} returned {resp.status}", status=resp.status)
                if not read_json:
                    return None
                body = await resp.read()
        except asyncio.TimeoutError as e:
            raise WebhookError(f"Webhook {url} timed out after {self.config.request_timeout}s") from e
        except aiohttp.ClientError as e:
            raise WebhookError(f"Webhook {url} failed: {type(e).__name__}: {e}") from e

        try:
            return json.loads(body.decode("utf-8"))
        except ValueError as e:
            raise WebhookError(f"Webhook {url} returned invalid JSON") from e

    async def submit_profile(self, profile: VisitorProfile, session_id: str) -> None:
        """Send the visitor profile. Raises WebhookError unless the status is 2xx."""
        payload = {**profile.model_dump(), "session_id": session_id}
        logger.info(f"[WEBHOOK] Submitting profile for session {session_id}")
        await self._post(self.config.profile_url, payload, read_json=False)

    async def ask(self, question: str, session_id: str) -> Optional[str]:
        """Send a question and return the ``answer`` field.

        Returns None when the body carries no usable answer.
        """
        payload = {"question": question, "session_id": session_id}
        logger.info(f"[WEBHOOK] Asking question for session {session_id}")
        data = await self._post(self.config.question_url, payload, read_json=True)
        answer = data.get("answer") if isinstance(data, dict) else None
        if isinstance(answer, str) and answer:
            return answer
        logger.warning(f"[WEBHOOK] Response without answer field: {str(data)[:200]}")
        return None

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
