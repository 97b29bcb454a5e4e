"""Blogsum — AI blog summarizer.

FastAPI application entry-point.
Fetches a blog page by slug, extracts its first paragraph and asks the chat
backend for a two-sentence summary.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from engine.chat import ChatResponder
from engine.pipeline import summarize_slug
from engine.summarizer import BlogSummarizer
from schemas.request import ChatRequest
from schemas.response import ChatResponse, HealthResponse, ProblemDetails
from services.blog_service import BlogService
from services.llm_service import build_backend

VERSION = "0.1.0"

# ── Logging ────────────────────────────────────────────────────────────

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(name)-30s | %(levelname)-7s | %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("blogsum")


# ── Lifespan ───────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Blogsum starting — blog=%s provider=%s",
        settings.blog_base_url,
        settings.llm_provider,
    )
    app.state.http_client = httpx.AsyncClient(
        base_url=settings.blog_base_url,
        timeout=settings.http_timeout_seconds,
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
    )
    app.state.backend = build_backend(settings)
    yield
    await app.state.http_client.aclose()
    logger.info("Blogsum shutting down.")


# ── Dependencies ───────────────────────────────────────────────────────

def get_blog_service(request: Request) -> BlogService:
    return BlogService(request.app.state.http_client)


def get_summarizer(request: Request) -> BlogSummarizer:
    return BlogSummarizer(request.app.state.backend)


def get_chat_responder(request: Request) -> ChatResponder:
    return ChatResponder(request.app.state.backend)


def _problem(detail: str) -> JSONResponse:
    body = ProblemDetails(detail=detail)
    return JSONResponse(
        status_code=body.status,
        content=body.model_dump(),
        media_type="application/problem+json",
    )


# ── App ────────────────────────────────────────────────────────────────

app = FastAPI(
    title="Blogsum",
    description="Fetches blog pages and summarizes their opening paragraph with an LLM.",
    version=VERSION,
    lifespan=lifespan,
)

# Parse allowed_origins (comma-separated string → list)
_origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# ── Routes ─────────────────────────────────────────────────────────────

@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", service="blogsum", version=VERSION)


@app.get(
    "/summarize",
    response_model=str,
    responses={500: {"model": ProblemDetails}},
    summary="Summarize a blog post",
    description="Fetches the page at *slug* (relative to the configured blog URL) "
    "and returns a two-sentence summary of its first paragraph.",
    operation_id="SummarizeBlogContent",
)
async def summarize(
    slug: str = Query(..., min_length=1, description="Blog post path, e.g. get-started/welcome/"),
    blog_service: BlogService = Depends(get_blog_service),
    summarizer: BlogSummarizer = Depends(get_summarizer),
):
    try:
        return await summarize_slug(slug, blog_service, summarizer)
    except Exception:
        logger.exception("Error summarizing blog content for slug '%s'", slug)
        return _problem("Failed to summarize the blog content.")


@app.post(
    "/chat",
    response_model=ChatResponse,
    responses={500: {"model": ProblemDetails}},
    summary="Chat with the backend model",
    description="Forwards a single message to the chat backend; no history is kept.",
)
async def chat(payload: ChatRequest, responder: ChatResponder = Depends(get_chat_responder)):
    try:
        return ChatResponse(response=await responder.reply(payload.message))
    except Exception:
        logger.exception("Error processing chat message")
        return _problem("Failed to process the chat message.")


# ── Dev runner ─────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        reload=True,
    )
