"""Gateway: local file and glob fetchers — implement the ResourceFetcher port."""

from __future__ import annotations

import glob
import logging
import os

from ai_stdio.l1_entities.errors import FetchError, FetchErrorKind
from ai_stdio.l1_entities.resource import FileRequest, GlobRequest, Resource

log = logging.getLogger('aistdio.fetch')


class FileFetcher:
    """Reads one file relative to the project directory."""

    def fetch(self, request: FileRequest, project_directory: str) -> list[Resource]:
        return [self.read(request.filename, project_directory)]

    def read(self, filename: str, project_directory: str) -> Resource:
        full_path = filename
        if not os.path.isabs(full_path):
            full_path = os.path.abspath(os.path.join(project_directory, filename))
        # Name is always relative, even for absolute input.
        relative_path = os.path.relpath(full_path, os.path.abspath(project_directory or os.curdir))

        try:
            with open(full_path, encoding='utf-8', errors='replace') as f:
                content = f.read()
        except FileNotFoundError as e:
            raise FetchError(FetchErrorKind.NOT_FOUND, full_path, 'no such file') from e
        except OSError as e:
            raise FetchError(FetchErrorKind.IO_ERROR, full_path, str(e)) from e

        log.debug('Read %s (%d chars)', relative_path, len(content))
        return Resource(kind='file', name=relative_path, content=content)


class GlobFetcher:
    """Expands a glob pattern and reads every match not excluded by the ignore list.

    An ignore entry excludes a match when it appears anywhere in the matched
    path (substring containment, not glob matching).
    """

    def __init__(self, file_fetcher: FileFetcher, glob_ignore: list[str] | None = None) -> None:
        self._file_fetcher = file_fetcher
        self._glob_ignore = list(glob_ignore or [])

    def fetch(self, request: GlobRequest, project_directory: str) -> list[Resource]:
        pattern = os.path.join(project_directory, request.pattern)
        matches = sorted(glob.glob(pattern, include_hidden=True))
        resources: list[Resource] = []
        for path in matches:
            if self.is_ignored(path):
                log.debug('Ignoring glob match %s', path)
                continue
            resources.append(self._file_fetcher.read(path, project_directory))
        log.debug('Glob %r matched %d file(s), kept %d', request.pattern, len(matches), len(resources))
        return resources

    def is_ignored(self, path: str) -> bool:
        return any(ignore in path for ignore in self._glob_ignore)
