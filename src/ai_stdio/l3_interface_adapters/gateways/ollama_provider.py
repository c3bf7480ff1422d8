"""Gateway: Ollama chat provider — implements the Provider port."""

from __future__ import annotations

from typing import Any

import httpx
import ollama as ollama_sync

from ai_stdio.l1_entities.chat_message import ChatMessage
from ai_stdio.l1_entities.errors import ProviderError

CONTEXT_WINDOW = 8192


class OllamaProvider:
    """Wraps ollama.Client to implement the Provider protocol."""

    name = 'ollama'

    def __init__(self, model: str, params: dict[str, Any]) -> None:
        base_url = params.get('base_url')
        if not isinstance(base_url, str):
            raise ValueError('base_url not found in config params')
        self._model = model
        self._host = base_url

    def chat(self, messages: list[ChatMessage]) -> str:
        client = ollama_sync.Client(host=self._host)
        try:
            resp = client.chat(
                model=self._model,
                messages=[m.model_dump() for m in messages],
                stream=False,
                options={'num_ctx': CONTEXT_WINDOW},
            )
        except (ollama_sync.ResponseError, httpx.HTTPError, ConnectionError) as e:
            raise ProviderError(f'ollama chat failed: {e}') from e
        return resp.message.content or ''
