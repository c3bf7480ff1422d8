"""Resource directive entities and the fetch-boundary Resource record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FileRequest:
    """``+file <path>`` directive."""

    filename: str


@dataclass(frozen=True)
class GlobRequest:
    """``+glob <pattern>`` directive."""

    pattern: str


@dataclass(frozen=True)
class URLRequest:
    """``+url <url>`` directive."""

    url: str


ResourceRequest = FileRequest | GlobRequest | URLRequest


@dataclass(frozen=True)
class Resource:
    """Output of a single fetch. Kept apart from ReferenceMaterial so fetchers
    never import the conversation model."""

    kind: str
    name: str
    content: str
