"""
Client for the chat proxy endpoint.
"""

from typing import Optional

import httpx

from ecostay.core.exceptions import ChatProxyError
from ecostay.core.logging import get_logger

logger = get_logger(__name__)


class ChatClient:
    """Posts prompts to the proxy and returns the model's text."""

    def __init__(self, url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self._client = httpx.AsyncClient(timeout=httpx.Timeout(None), transport=transport)

    async def ask(self, prompt: str) -> Optional[str]:
        """
        Send one prompt.

        Returns the reply text, or None when the proxy answered without
        one (including its error responses).

        Raises:
            ChatProxyError: the proxy could not be reached or sent a
                body that is not JSON
        """
        try:
            response = await self._client.post(self.url, json={"prompt": prompt})
            body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Chat proxy unreachable: {e}")
            raise ChatProxyError(str(e)) from e

        if response.status_code >= 400:
            logger.warning(
                f"Chat proxy returned {response.status_code}",
                extra={"error": body.get("error") if isinstance(body, dict) else None},
            )
        if not isinstance(body, dict):
            return None
        return body.get("text") or None

    async def aclose(self) -> None:
        await self._client.aclose()
