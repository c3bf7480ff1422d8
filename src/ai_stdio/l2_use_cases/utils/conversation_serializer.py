"""Pure functions turning a Conversation back into document text."""

from __future__ import annotations

from ai_stdio.l1_entities.conversation import Conversation, Role

USER_TURN_HEADING = '## You\n\n'
ASSISTANT_TURN_HEADING = '### Response\n\n'


def serialize_conversation(conversation: Conversation) -> str:
    """Render *conversation* as markdown. Round-trips through parse_conversation semantically, not byte-exact."""
    parts: list[str] = []

    front_matter: list[str] = []
    if conversation.model:
        front_matter.append(f'model: {conversation.model}\n')
    for key, value in conversation.parameters.items():
        front_matter.append(f'{key}: {value}\n')
    if front_matter:
        parts.append('---\n')
        parts.extend(front_matter)
        parts.append('---\n\n')

    if conversation.title:
        parts.append(f'# {conversation.title}\n\n')

    for message in conversation.messages:
        parts.append(USER_TURN_HEADING if message.role is Role.USER else ASSISTANT_TURN_HEADING)
        parts.append(f'{message.content}\n\n')

    return ''.join(parts)
