"""
Chat: proxy client and the language-model generator behind the proxy.
"""

from ecostay.services.chat.chat_client import ChatClient
from ecostay.services.chat.text_generator import GeminiTextGenerator, TextGenerator

__all__ = ["ChatClient", "GeminiTextGenerator", "TextGenerator"]
