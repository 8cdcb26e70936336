"""
Shared FastAPI dependencies.

Example usage in a router:
    @router.post("/gemini")
    async def chat(generator: TextGenerator = Depends(deps.get_text_generator)):
        ...
"""

from functools import lru_cache

from ecostay.config.settings import get_settings
from ecostay.services.chat import GeminiTextGenerator, TextGenerator


@lru_cache()
def get_text_generator() -> TextGenerator:
    """Process-wide generator built from the environment."""
    return GeminiTextGenerator.from_settings(get_settings())
