"""Response schemas for the Blogsum API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ChatResponse(BaseModel):
    response: str = Field(description="First generated message, or a fallback text.")


class ProblemDetails(BaseModel):
    """RFC 7807 problem body returned for pipeline failures."""

    type: str = "https://tools.ietf.org/html/rfc9110#section-15.6.1"
    title: str = "An error occurred while processing your request."
    status: int = 500
    detail: str | None = None


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
