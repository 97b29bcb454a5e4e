"""Blog page retrieval over a pre-configured HTTP client."""

from __future__ import annotations

import logging

import httpx

from engine.excerpt import extract_first_paragraph

logger = logging.getLogger("blogsum.blog_service")


class TransportError(Exception):
    """Raised when the blog page could not be retrieved."""

    def __init__(self, message: str, *, slug: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.slug = slug
        self.status_code = status_code


class BlogService:
    """Fetch a blog page by slug and return its first paragraph as plain text.

    The client must already carry the blog's ``base_url``; *slug* is resolved
    relative to it.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client

    def _relative_url(self, slug: str) -> httpx.URL:
        """Parse *slug*, refusing anything that would leave the blog's base URL."""
        try:
            url = httpx.URL(slug)
        except httpx.InvalidURL as exc:
            raise TransportError(f"Invalid slug '{slug}': {exc}", slug=slug) from exc
        if url.scheme or url.host:
            logger.warning("Rejected slug '%s': not a relative path", slug)
            raise TransportError(f"Slug '{slug}' must be a relative path", slug=slug)
        return url

    async def fetch(self, slug: str) -> str:
        url = self._relative_url(slug)
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("Blog fetch for '%s' returned HTTP %d", slug, status)
            raise TransportError(f"HTTP {status} fetching '{slug}'", slug=slug, status_code=status) from exc
        except httpx.HTTPError as exc:
            logger.warning("Blog fetch for '%s' failed: %s", slug, exc)
            raise TransportError(f"Request for '{slug}' failed: {exc}", slug=slug) from exc

        return extract_first_paragraph(response.text)

    get_content = fetch
