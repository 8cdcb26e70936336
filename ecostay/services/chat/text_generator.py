"""
Language-model text generation behind the chat proxy.

Each prompt is an independent call; no conversation state is kept.
"""

from typing import Optional, Protocol

from google import genai

from ecostay.config.settings import Settings
from ecostay.core.exceptions import ChatProxyError, ConfigurationError
from ecostay.core.logging import get_logger

logger = get_logger(__name__)


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str:
        """Model reply for a single prompt."""
        ...


class GeminiTextGenerator:
    """TextGenerator backed by the Gemini API."""

    def __init__(self, api_key: str, model: str = "gemini-2.5-flash", client: Optional[genai.Client] = None):
        self.model = model
        self._client = client or genai.Client(api_key=api_key)

    @classmethod
    def from_settings(cls, config: Settings) -> "GeminiTextGenerator":
        if not config.GEMINI_API_KEY:
            raise ConfigurationError("Missing GEMINI_API_KEY")
        return cls(api_key=config.GEMINI_API_KEY, model=config.GEMINI_MODEL)

    async def generate(self, prompt: str) -> str:
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except Exception as e:
            logger.error(f"Gemini call failed: {e}", extra={"model": self.model})
            raise ChatProxyError(str(e)) from e
        return response.text or ""
