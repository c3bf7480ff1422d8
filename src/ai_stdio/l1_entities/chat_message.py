"""Chat message entity — the shape handed to a Provider."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class ChatMessage(BaseModel):
    """A single message in an LLM conversation."""

    role: Literal['user', 'assistant']
    content: str
