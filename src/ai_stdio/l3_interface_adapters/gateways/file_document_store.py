"""Gateway: conversation document persistence on the local filesystem."""

from __future__ import annotations

import logging
from pathlib import Path

from ai_stdio.l3_interface_adapters.gateways.paths import CONVERSATION_FILENAME

log = logging.getLogger('aistdio.persist')


class FileDocumentStore:
    """Reads and writes the chat document (``.ai-stdio.md`` by default)."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @classmethod
    def in_project(cls, project_directory: Path) -> FileDocumentStore:
        return cls(project_directory / CONVERSATION_FILENAME)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def read(self) -> str:
        return self._path.read_text(encoding='utf-8')

    def write(self, content: str) -> Path:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(content, encoding='utf-8')
        log.debug('Wrote %d chars to %s', len(content), self._path)
        return self._path
