"""Conversation document entities."""

from __future__ import annotations

import enum
from datetime import datetime

from pydantic import BaseModel, Field

from ai_stdio.l1_entities.errors import NoUserMessageError
from ai_stdio.l1_entities.resource import ResourceRequest


class Role(enum.Enum):
    USER = 'You'
    ASSISTANT = 'Response'


class ReferenceKind(enum.Enum):
    FILE = 'file'
    URL = 'url'
    COMMAND_OUTPUT = 'command_output'  # reserved, no fetcher produces it yet


class Message(BaseModel):
    """One turn of the conversation."""

    role: Role
    content: str
    timestamp: datetime = Field(default_factory=datetime.now)


class ReferenceMaterial(BaseModel):
    """Resolved attachment injected into the first user turn."""

    kind: ReferenceKind
    name: str
    content: str


class Conversation(BaseModel):
    """Full document state. Mutated in place by resolution and response handling."""

    title: str = ''
    model: str = ''
    project_directory: str = ''
    parameters: dict[str, str] = Field(default_factory=dict)
    messages: list[Message] = Field(default_factory=list)
    reference_material: list[ReferenceMaterial] = Field(default_factory=list)
    resource_requests: list[ResourceRequest] = Field(default_factory=list)
    include_files: bool = False

    def add_reference_material(self, kind: ReferenceKind, name: str, content: str) -> ReferenceMaterial:
        item = ReferenceMaterial(kind=kind, name=name, content=content)
        self.reference_material.append(item)
        return item

    def add_response(self, content: str) -> Message:
        message = Message(role=Role.ASSISTANT, content=content)
        self.messages.append(message)
        return message

    def last_user_message(self) -> str:
        """Content of the most recent user turn. Raises NoUserMessageError if there is none."""
        for message in reversed(self.messages):
            if message.role is Role.USER:
                return message.content
        raise NoUserMessageError('no user messages found')
