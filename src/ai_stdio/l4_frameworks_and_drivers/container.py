"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

import logging

from ai_stdio.l1_entities.config import AppConfig, ProviderConfig
from ai_stdio.l1_entities.errors import UnsupportedBackendError
from ai_stdio.l2_use_cases.ports.provider import Provider, ProviderFactory
from ai_stdio.l2_use_cases.resolve_resources_use_case import ResolveResourcesUseCase
from ai_stdio.l2_use_cases.send_conversation_use_case import SendConversationUseCase
from ai_stdio.l3_interface_adapters.gateways.local_file_fetcher import FileFetcher, GlobFetcher
from ai_stdio.l3_interface_adapters.gateways.ollama_provider import OllamaProvider
from ai_stdio.l3_interface_adapters.gateways.openai_provider import OpenAIProvider
from ai_stdio.l3_interface_adapters.gateways.url_fetcher import URLFetcher

log = logging.getLogger('aistdio.cli')


class ProviderRegistry:
    """Maps a backend type ('openai', 'ollama', ...) to a Provider factory."""

    def __init__(self, factories: dict[str, ProviderFactory] | None = None) -> None:
        self._factories: dict[str, ProviderFactory] = dict(factories or {})

    def register(self, backend_type: str, factory: ProviderFactory) -> None:
        self._factories[backend_type] = factory

    def types(self) -> list[str]:
        return sorted(self._factories)

    def create(self, provider_config: ProviderConfig) -> Provider:
        factory = self._factories.get(provider_config.type)
        if factory is None:
            raise UnsupportedBackendError(f'unsupported provider type: {provider_config.type}')
        return factory(provider_config.model, provider_config.params)


def default_registry() -> ProviderRegistry:
    return ProviderRegistry({'openai': OpenAIProvider, 'ollama': OllamaProvider})


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(self, config: AppConfig, registry: ProviderRegistry | None = None) -> None:
        self.config = config
        self.registry = registry or default_registry()

        self.file_fetcher = FileFetcher()
        self.glob_fetcher = GlobFetcher(self.file_fetcher, config.llm.glob_ignore)
        self.url_fetcher = URLFetcher()
        self.resolver = ResolveResourcesUseCase(self.file_fetcher, self.glob_fetcher, self.url_fetcher)
        self.send_use_case = SendConversationUseCase(self.resolver)

    def provider_for(self, model: str) -> Provider:
        """Build the Provider named by a conversation's ``model`` (empty → default_provider)."""
        provider_config = self.config.llm.provider_for(model)
        if provider_config is None:
            raise UnsupportedBackendError(f'no provider configured for {model or self.config.llm.default_provider!r}')
        log.info('Using provider %s (type=%s, model=%s)', model or '<default>', provider_config.type, provider_config.model)
        return self.registry.create(provider_config)
