"""Pipeline orchestrator — fetch the blog excerpt, then summarize it."""

from __future__ import annotations

import logging
import time

from engine.summarizer import BlogSummarizer
from services.blog_service import BlogService

logger = logging.getLogger("blogsum.pipeline")


async def summarize_slug(slug: str, fetcher: BlogService, summarizer: BlogSummarizer) -> str:
    """Run the two-step summary pipeline for *slug*.

    Parameters
    ----------
    slug : str
        Path of the blog page, relative to the fetcher's base URL.
    fetcher : BlogService
        Retrieves the page and extracts its first paragraph.
    summarizer : BlogSummarizer
        Turns the excerpt into a short summary.

    Returns
    -------
    str
        The summary, or the summarizer's fallback text.

    ``TransportError`` and ``BackendError`` are not caught here; the second
    step never runs when the first one fails.
    """
    t0 = time.perf_counter()

    # ── Step 1 — Fetch + extract ───────────────────────────────────────
    excerpt = await fetcher.fetch(slug)
    logger.info("Step 1 complete — %d-char excerpt for '%s'", len(excerpt), slug)

    # ── Step 2 — Summarize ─────────────────────────────────────────────
    summary = await summarizer.summarize(excerpt)

    elapsed = time.perf_counter() - t0
    logger.info("Pipeline complete in %.2fs for '%s'", elapsed, slug)
    return summary
