"""Request schemas for the Blogsum API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Free-form chat message; callers send the ``Message`` key."""

    message: str = Field(
        ...,
        min_length=1,
        alias="Message",
        description="Text forwarded verbatim to the chat backend.",
    )

    model_config = {"populate_by_name": True}
