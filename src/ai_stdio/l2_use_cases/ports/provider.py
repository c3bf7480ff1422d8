"""Port: chat backend."""

from __future__ import annotations

from typing import Any, Protocol

from ai_stdio.l1_entities.chat_message import ChatMessage


class Provider(Protocol):
    """Abstract chat backend. Zero framework types leak through."""

    name: str

    def chat(self, messages: list[ChatMessage]) -> str:
        """Send the full conversation, return the assistant reply. Raises ProviderError on failure."""
        ...


class ProviderFactory(Protocol):
    def __call__(self, model: str, params: dict[str, Any]) -> Provider: ...
