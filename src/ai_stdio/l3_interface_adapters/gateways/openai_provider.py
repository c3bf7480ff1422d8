"""Gateway: OpenAI-compatible chat provider — implements the Provider port.

Works with any OpenAI-compatible API: OpenAI, Gemini, Groq, Together, vLLM, etc.
"""

from __future__ import annotations

from typing import Any

import openai

from ai_stdio.l1_entities.chat_message import ChatMessage
from ai_stdio.l1_entities.errors import ProviderError
from ai_stdio.l3_interface_adapters.gateways.yaml_config_loader import expand_env_value


class OpenAIProvider:
    """Wraps openai.OpenAI to implement the Provider protocol."""

    name = 'openai'

    def __init__(self, model: str, params: dict[str, Any]) -> None:
        api_key = params.get('api_key')
        if not isinstance(api_key, str):
            raise ValueError('api_key not found in config params')
        self._model = model
        self._api_key = expand_env_value(api_key)
        self._base_url = params.get('base_url') or None  # None → SDK default / OPENAI_BASE_URL

    def chat(self, messages: list[ChatMessage]) -> str:
        client = openai.OpenAI(api_key=self._api_key, base_url=self._base_url)
        try:
            resp = client.chat.completions.create(
                model=self._model,
                messages=[{'role': m.role, 'content': m.content} for m in messages],  # ty: ignore[invalid-argument-type] -- dict satisfies ChatCompletionMessageParam at runtime
            )
        except openai.OpenAIError as e:
            raise ProviderError(f'OpenAI API error: {e}') from e
        if not resp.choices:
            raise ProviderError('no response choices returned')
        return resp.choices[0].message.content or ''
