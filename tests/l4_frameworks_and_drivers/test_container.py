"""Tests for DependencyContainer and ProviderRegistry wiring."""

from __future__ import annotations

import pytest

from ai_stdio.l1_entities.config import AppConfig, ProviderConfig
from ai_stdio.l1_entities.errors import UnsupportedBackendError
from ai_stdio.l3_interface_adapters.gateways.local_file_fetcher import GlobFetcher
from ai_stdio.l3_interface_adapters.gateways.ollama_provider import OllamaProvider
from ai_stdio.l3_interface_adapters.gateways.openai_provider import OpenAIProvider
from ai_stdio.l4_frameworks_and_drivers.container import DependencyContainer, ProviderRegistry, default_registry
from ai_stdio.l4_frameworks_and_drivers.infra_config import build_app_config
from tests.conftest import FakeProvider


class TestProviderRegistry:
    def test_default_types(self):
        assert default_registry().types() == ['ollama', 'openai']

    def test_create_known_type(self):
        provider = default_registry().create(
            ProviderConfig(type='openai', model='gpt-4o', params={'api_key': 'k'}),
        )
        assert isinstance(provider, OpenAIProvider)

    def test_unknown_type_raises(self):
        with pytest.raises(UnsupportedBackendError, match='anthropic'):
            default_registry().create(ProviderConfig(type='anthropic', model='x'))

    def test_injected_fake(self):
        calls = []

        def factory(model, params):
            calls.append((model, params))
            return FakeProvider()

        registry = ProviderRegistry({'fake': factory})
        provider = registry.create(ProviderConfig(type='fake', model='m', params={'a': 1}))
        assert isinstance(provider, FakeProvider)
        assert calls == [('m', {'a': 1})]

    def test_register(self):
        registry = ProviderRegistry()
        registry.register('fake', lambda model, params: FakeProvider())
        assert registry.types() == ['fake']


class TestDependencyContainer:
    def test_provider_for_default(self, default_config: AppConfig):
        container = DependencyContainer(default_config)
        assert isinstance(container.provider_for(''), OllamaProvider)

    def test_provider_for_named_entry(self):
        config = build_app_config(
            {'llm': {'providers': {'gpt': {'type': 'openai', 'model': 'gpt-4o', 'params': {'api_key': 'k'}}}}}
        )
        assert isinstance(DependencyContainer(config).provider_for('gpt'), OpenAIProvider)

    def test_provider_for_unknown_entry(self, default_config: AppConfig):
        with pytest.raises(UnsupportedBackendError, match='missing'):
            DependencyContainer(default_config).provider_for('missing')

    def test_glob_ignore_wired(self):
        config = build_app_config({'llm': {'glob_ignore': ['vendor/']}})
        container = DependencyContainer(config)
        assert isinstance(container.glob_fetcher, GlobFetcher)
        assert container.glob_fetcher.is_ignored('/p/vendor/x.go')

    def test_custom_registry(self, default_config: AppConfig):
        registry = ProviderRegistry({'ollama': lambda model, params: FakeProvider(model)})
        provider = DependencyContainer(default_config, registry=registry).provider_for('')
        assert isinstance(provider, FakeProvider)
