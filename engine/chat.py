"""Free-form chat proxy."""

from __future__ import annotations

import logging

from prompts.system_prompt import CHAT_FALLBACK
from services.llm_service import ChatBackend

logger = logging.getLogger("blogsum.engine.chat")


class ChatResponder:
    def __init__(self, backend: ChatBackend) -> None:
        self.backend = backend

    async def reply(self, message: str) -> str:
        """Forward *message* verbatim; no history is kept between calls."""
        messages = await self.backend.generate(message)
        if not messages:
            logger.warning("LLM returned no messages for chat; using fallback.")
            return CHAT_FALLBACK
        return messages[0]
