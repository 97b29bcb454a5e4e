"""Step 2 — Blog Summary."""

from __future__ import annotations

import logging

from prompts.system_prompt import SUMMARY_FALLBACK, build_summary_prompt
from services.llm_service import ChatBackend

logger = logging.getLogger("blogsum.engine.summarizer")


class BlogSummarizer:
    """Summarize blog excerpts in two sentences via a ``ChatBackend``."""

    def __init__(self, backend: ChatBackend) -> None:
        self.backend = backend

    async def summarize(self, content: str) -> str:
        """Return the first generated message, or the fallback when there is none.

        ``BackendError`` from the backend propagates unchanged.  The
        two-sentence length is requested in the prompt but not checked.
        """
        messages = await self.backend.generate(build_summary_prompt(content))
        if not messages:
            logger.warning("LLM returned no messages; using fallback summary.")
            return SUMMARY_FALLBACK
        return messages[0]
