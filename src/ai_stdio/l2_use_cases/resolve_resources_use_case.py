"""Use case: expand resource directives into reference material."""

from __future__ import annotations

import logging

from ai_stdio.l1_entities.conversation import Conversation, ReferenceKind, ReferenceMaterial
from ai_stdio.l1_entities.resource import FileRequest, GlobRequest, URLRequest
from ai_stdio.l2_use_cases.ports.resource_fetcher import ResourceFetcher

log = logging.getLogger('aistdio.resolve')


class ResolveResourcesUseCase:
    """Dispatches each directive to its fetcher and appends the results in request order."""

    def __init__(
        self,
        file_fetcher: ResourceFetcher,
        glob_fetcher: ResourceFetcher,
        url_fetcher: ResourceFetcher,
    ) -> None:
        self._fetchers: dict[type, ResourceFetcher] = {
            FileRequest: file_fetcher,
            GlobRequest: glob_fetcher,
            URLRequest: url_fetcher,
        }

    def execute(self, conversation: Conversation) -> list[ReferenceMaterial]:
        """Resolve every request on *conversation*. Mutates it; stops at the first FetchError."""
        added: list[ReferenceMaterial] = []
        for request in conversation.resource_requests:
            fetcher = self._fetchers[type(request)]
            resources = fetcher.fetch(request, conversation.project_directory)
            log.info('Resolved %r into %d resource(s)', request, len(resources))
            for resource in resources:
                added.append(
                    conversation.add_reference_material(
                        ReferenceKind(resource.kind),
                        resource.name,
                        resource.content,
                    )
                )
        return added
