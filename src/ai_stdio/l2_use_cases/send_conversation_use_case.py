"""Use case: parse a document, resolve its resources and send it to a Provider."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ai_stdio.l1_entities.conversation import Conversation
from ai_stdio.l2_use_cases.ports.provider import Provider
from ai_stdio.l2_use_cases.resolve_resources_use_case import ResolveResourcesUseCase
from ai_stdio.l2_use_cases.utils.conversation_parser import parse_conversation
from ai_stdio.l2_use_cases.utils.conversation_serializer import USER_TURN_HEADING
from ai_stdio.l2_use_cases.utils.message_assembler import assemble_messages

log = logging.getLogger('aistdio.llm')


@dataclass(frozen=True)
class SendResult:
    """Provider reply plus the text to append to the document."""

    response: str
    appended_text: str


class SendConversationUseCase:
    """Runs one resolve-then-send cycle. No retries; every failure reaches the caller."""

    def __init__(self, resolver: ResolveResourcesUseCase) -> None:
        self._resolver = resolver

    def prepare(self, text: str, default_project_directory: str | None = None) -> Conversation | None:
        """Parse and resolve *text*.

        Returns None when the last user turn is blank, meaning there is nothing
        to send. Raises EmptyConversationError, NoUserMessageError or FetchError.
        """
        conversation = parse_conversation(text, default_project_directory)
        if not conversation.last_user_message().strip():
            log.info('Last user turn is blank, nothing to send')
            return None
        self._resolver.execute(conversation)
        return conversation

    def execute(self, conversation: Conversation, provider: Provider) -> SendResult:
        """Send *conversation* to *provider* and record the reply on it."""
        messages = assemble_messages(conversation)
        log.info(
            'Chat request: provider=%s, msgs=%d, reference_material=%d',
            provider.name,
            len(messages),
            len(conversation.reference_material),
        )
        response = provider.chat(messages)
        log.debug('LLM raw response (%d chars): %s', len(response), response[:500])
        conversation.add_response(response)
        return SendResult(response=response, appended_text=f'{response}\n\n{USER_TURN_HEADING}')
