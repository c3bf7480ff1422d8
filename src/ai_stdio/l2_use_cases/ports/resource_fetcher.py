"""Port: resource fetcher."""

from __future__ import annotations

from typing import Protocol

from ai_stdio.l1_entities.resource import Resource, ResourceRequest


class ResourceFetcher(Protocol):
    """Resolves one directive into zero or more resources."""

    def fetch(self, request: ResourceRequest, project_directory: str) -> list[Resource]:
        """Return the fetched resources in a stable order. Raises FetchError on failure."""
        ...
