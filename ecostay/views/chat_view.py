"""
Chat assistant state: the message list and the pending input.
"""

import itertools
from dataclasses import dataclass
from typing import List, Optional

from ecostay.core.constants import CHAT_EMPTY_REPLY, CHAT_ERROR_REPLY
from ecostay.core.exceptions import ChatProxyError
from ecostay.core.logging import get_logger
from ecostay.services.chat import ChatClient
from ecostay.views.base import ViewState

logger = get_logger(__name__)

THINKING = "Thinking..."


@dataclass(frozen=True)
class ChatMessage:
    id: int
    text: str
    is_user: bool
    loading: bool = False


class ChatView(ViewState):
    name = "chat"

    def __init__(self, client: ChatClient, greeting: str = ""):
        super().__init__()
        self.client = client
        self.input = ""
        self._ids = itertools.count(1)
        self.messages: List[ChatMessage] = []
        if greeting:
            self.messages.append(ChatMessage(next(self._ids), greeting, is_user=False))

    def _append(self, text: str, is_user: bool, loading: bool = False) -> ChatMessage:
        message = ChatMessage(next(self._ids), text, is_user, loading)
        self.messages.append(message)
        return message

    def _drop_placeholders(self) -> None:
        self.messages = [m for m in self.messages if not m.loading]

    async def send(self, prompt: Optional[str] = None) -> None:
        text = self.input if prompt is None else prompt
        if not text.strip():
            return
        self._append(text, is_user=True)
        self.input = ""
        self.loading = True
        self._append(THINKING, is_user=False, loading=True)
        try:
            reply = await self.client.ask(text)
        except ChatProxyError as e:
            logger.warning(f"chat: {e.message}", extra={"view": self.name})
            reply_text = CHAT_ERROR_REPLY
        else:
            reply_text = reply or CHAT_EMPTY_REPLY
        finally:
            self.loading = False
        self._drop_placeholders()
        self._append(reply_text, is_user=False)
