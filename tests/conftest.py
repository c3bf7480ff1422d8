"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from pathlib import Path

import pytest

from ai_stdio.l1_entities.chat_message import ChatMessage
from ai_stdio.l1_entities.config import AppConfig
from ai_stdio.l1_entities.errors import ProviderError
from ai_stdio.l1_entities.resource import Resource, ResourceRequest
from ai_stdio.l4_frameworks_and_drivers.infra_config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeProvider:
    """Fake chat backend for L2 use case tests."""

    name = 'fake'

    def __init__(self, response: str = 'Fake LLM response'):
        self._response = response
        self._error: Exception | None = None
        self.chat_calls: list[list[ChatMessage]] = []

    def chat(self, messages: list[ChatMessage]) -> str:
        self.chat_calls.append(list(messages))
        if self._error is not None:
            raise self._error
        return self._response

    def set_response(self, response: str) -> None:
        self._response = response

    def set_error(self, message: str) -> None:
        self._error = ProviderError(message)


class FakeFetcher:
    """Fake resource fetcher returning canned resources per request."""

    def __init__(self, kind: str = 'file', results: dict[ResourceRequest, list[Resource]] | None = None):
        self._kind = kind
        self._results = dict(results or {})
        self._errors: dict[ResourceRequest, Exception] = {}
        self.fetch_calls: list[tuple[ResourceRequest, str]] = []

    def fetch(self, request: ResourceRequest, project_directory: str) -> list[Resource]:
        self.fetch_calls.append((request, project_directory))
        if request in self._errors:
            raise self._errors[request]
        if request in self._results:
            return list(self._results[request])
        return [Resource(kind=self._kind, name=repr(request), content=f'content of {request!r}')]

    def set_result(self, request: ResourceRequest, resources: list[Resource]) -> None:
        self._results[request] = list(resources)

    def set_error(self, request: ResourceRequest, error: Exception) -> None:
        self._errors[request] = error


# --- Standard Fixtures ---


SAMPLE_DOCUMENT = """\
---
model: local
project_directory: /work/project
temperature: 0.2
---

# Refactor the parser

## You

Please review this module.

+file src/parser.py

### Response

Looks fine overall.

## You

What about the tests?
"""


@pytest.fixture
def sample_document() -> str:
    return SAMPLE_DOCUMENT


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'project'
    d.mkdir()
    (d / 'src').mkdir()
    (d / 'src' / 'main.py').write_text('print("main")\n', encoding='utf-8')
    (d / 'src' / 'util.py').write_text('def util():\n    return 1\n', encoding='utf-8')
    (d / 'src' / 'util_test.py').write_text('def test_util():\n    pass\n', encoding='utf-8')
    (d / 'README.md').write_text('# Project\n', encoding='utf-8')
    return d


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
llm:
  default_provider: "local"
  glob_ignore:
    - "_test.py"
    - "node_modules"
  providers:
    local:
      type: "ollama"
      model: "llama3.2"
      params:
        base_url: "http://localhost:11434"
    gpt:
      type: "openai"
      model: "gpt-4o"
      params:
        api_key: "$ENV:OPENAI_API_KEY"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()
