"""Domain error types."""

from __future__ import annotations

import enum


class EmptyConversationError(Exception):
    """Raised when a document yields no messages at all."""


class NoUserMessageError(Exception):
    """Raised when a conversation holds no user turn."""


class FetchErrorKind(enum.Enum):
    NOT_FOUND = 'not_found'
    IO_ERROR = 'io_error'
    BAD_STATUS = 'bad_status'
    TIMEOUT = 'timeout'


class FetchError(Exception):
    """Raised when a resource directive cannot be resolved.

    ``source`` is the offending path or URL. The underlying exception, if any,
    is chained as ``__cause__`` by the raising fetcher.
    """

    def __init__(self, kind: FetchErrorKind, source: str, detail: str = '') -> None:
        self.kind = kind
        self.source = source
        self.detail = detail
        message = f'{kind.value}: {source}'
        if detail:
            message = f'{message} ({detail})'
        super().__init__(message)


class ProviderError(Exception):
    """Raised when the chat backend call fails."""


class UnsupportedBackendError(Exception):
    """Raised when a backend type or provider name has no registered implementation."""
