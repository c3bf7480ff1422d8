"""Pure functions for building the provider message list from a Conversation."""

from __future__ import annotations

from ai_stdio.l1_entities.chat_message import ChatMessage
from ai_stdio.l1_entities.conversation import Conversation, ReferenceMaterial, Role

REFERENCE_HEADER = '\n\n# Relevant Material\n\n'


def build_reference_block(material: list[ReferenceMaterial]) -> str:
    """Render all reference material as one block; empty string when there is none."""
    if not material:
        return ''
    items = [
        f'Reference Material Type: {item.kind.value}\nName: {item.name}\n```\n{item.content}\n```\n\n'
        for item in material
    ]
    return REFERENCE_HEADER + ''.join(items)


def assemble_messages(conversation: Conversation) -> list[ChatMessage]:
    """Map turns to provider roles, injecting reference material into the first user turn only."""
    block = build_reference_block(conversation.reference_material)
    injected = not block
    messages: list[ChatMessage] = []
    for message in conversation.messages:
        role = 'user' if message.role is Role.USER else 'assistant'
        content = message.content
        if not injected and role == 'user':
            content += block
            injected = True
        messages.append(ChatMessage(role=role, content=content))
    return messages
