"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ProviderConfig(BaseModel):
    type: str
    model: str
    params: dict[str, Any] = Field(default_factory=dict)


class LLMConfig(BaseModel):
    default_provider: str
    providers: dict[str, ProviderConfig] = Field(default_factory=dict)
    glob_ignore: list[str] = Field(default_factory=list)

    def provider_for(self, name: str) -> ProviderConfig | None:
        """Look up a provider entry, falling back to default_provider when *name* is empty."""
        return self.providers.get(name or self.default_provider)


class AppConfig(BaseModel):
    llm: LLMConfig
