"""CLI entry point for ai-stdio."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from pydantic import ValidationError

from ai_stdio import __version__
from ai_stdio.l1_entities.errors import (
    EmptyConversationError,
    FetchError,
    NoUserMessageError,
    ProviderError,
    UnsupportedBackendError,
)
from ai_stdio.l2_use_cases.new_conversation_use_case import build_new_conversation
from ai_stdio.l2_use_cases.utils.conversation_serializer import ASSISTANT_TURN_HEADING
from ai_stdio.l3_interface_adapters.gateways.file_document_store import FileDocumentStore
from ai_stdio.l3_interface_adapters.gateways.paths import LOG_DIR
from ai_stdio.l3_interface_adapters.gateways.project_locator import find_project_directory, find_prompt
from ai_stdio.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from ai_stdio.l4_frameworks_and_drivers.container import DependencyContainer
from ai_stdio.l4_frameworks_and_drivers.infra_config import build_app_config
from ai_stdio.l4_frameworks_and_drivers.logging_setup import setup_file_logging

log = logging.getLogger('aistdio.cli')


def _fail(message: str) -> NoReturn:
    click.echo(f'Error: {message}', err=True)
    sys.exit(1)


def _store_for(document_path: str | None, project_dir: Path) -> FileDocumentStore:
    if document_path:
        return FileDocumentStore(Path(document_path))
    return FileDocumentStore.in_project(project_dir)


@click.group()
@click.version_option(version=__version__)
def cli():
    """ai-stdio -- chat with an LLM through an append-only markdown document."""


@cli.command()
@click.argument('model', required=False)
@click.option(
    '-f',
    '--file',
    'document_path',
    default=None,
    type=click.Path(dir_okay=False),
    help='Conversation document to create (default: .ai-stdio.md in the project directory).',
)
@click.option('--force', is_flag=True, help='Overwrite an existing conversation document.')
def new(model, document_path, force):
    """Start a new conversation, optionally pinned to MODEL."""
    cwd = Path.cwd()
    project_dir = find_project_directory(cwd)
    store = _store_for(document_path, project_dir)
    if store.exists() and not force:
        _fail(f'{store.path} already exists (use --force to overwrite)')

    content = build_new_conversation(str(project_dir), model=model, prompt=find_prompt(cwd))
    try:
        path = store.write(content)
    except OSError as e:
        _fail(f'could not write {store.path}: {e}')
    click.echo(str(path))


@cli.command()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True),
    help='Path to YAML config file.',
)
@click.option(
    '-f',
    '--file',
    'document_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Conversation document to send (default: .ai-stdio.md in the project directory).',
)
@click.option('-w', '--write', is_flag=True, help='Also append the response to the document.')
@click.option('--debug', is_flag=True, help='Write a debug log to the user log directory.')
def send(config_path, document_path, write, debug):
    """Send the conversation to the configured LLM and print the response."""
    if debug:
        setup_file_logging(LOG_DIR)

    try:
        raw = YamlConfigLoader().load_raw(config_path)
        config = build_app_config(raw)
    except FileNotFoundError as e:
        _fail(str(e))
    except ValidationError as e:
        _fail(f'invalid configuration: {e}')

    project_dir = find_project_directory(Path.cwd())
    store = _store_for(document_path, project_dir)
    try:
        text = store.read()
    except OSError as e:
        _fail(f'could not read {store.path}: {e}')

    container = DependencyContainer(config)
    try:
        conversation = container.send_use_case.prepare(text, str(project_dir))
    except (EmptyConversationError, NoUserMessageError) as e:
        _fail(f'could not read conversation: {e}')
    except FetchError as e:
        _fail(f'could not fetch resource: {e}')

    if conversation is None:
        return

    try:
        provider = container.provider_for(conversation.model)
    except (UnsupportedBackendError, ValueError) as e:
        _fail(f'failed to create provider: {e}')

    response_heading = f'\n{ASSISTANT_TURN_HEADING}'
    click.echo(response_heading, nl=False)
    try:
        result = container.send_use_case.execute(conversation, provider)
    except ProviderError as e:
        log.error('Chat request failed: %s', e, exc_info=True)
        _fail(f'failed to get response from provider: {e}')
    click.echo(result.appended_text, nl=False)

    if write:
        try:
            store.write(text + response_heading + result.appended_text)
        except OSError as e:
            _fail(f'could not write {store.path}: {e}')
