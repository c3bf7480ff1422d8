"""Parse a markdown chat document into a Conversation.

The document is read in a single forward pass. Per line, the first matching
rule wins:

1. ``---`` toggles front matter.
2. Inside front matter every line is a ``key: value`` pair.
3. ``+file`` / ``+glob`` / ``+url`` lines record a resource request, then
   fall through so the directive stays part of the open turn.
4. ``# `` outside a turn sets the title.
5. ``## You`` / ``### Response`` close the open turn and open a new one.
6. Anything else is accumulated into the open turn.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ai_stdio.l1_entities.conversation import Conversation, Message, Role
from ai_stdio.l1_entities.errors import EmptyConversationError
from ai_stdio.l1_entities.resource import FileRequest, GlobRequest, ResourceRequest, URLRequest

log = logging.getLogger('aistdio.parse')

FRONT_MATTER_DELIMITER = '---'
TITLE_PREFIX = '# '
USER_HEADING = '## You'
ASSISTANT_HEADING = '### Response'
INCLUDE_FILES_MARKER = '+files'

FILE_DIRECTIVE = '+file '
GLOB_DIRECTIVE = '+glob'
URL_DIRECTIVE = '+url '


@dataclass
class _ParserState:
    """Accumulator threaded through the line loop."""

    in_front_matter: bool = False
    role: Role | None = None
    buffer: list[str] = field(default_factory=list)

    def open_turn(self, conversation: Conversation, role: Role) -> None:
        self.close_turn(conversation)
        self.role = role

    def close_turn(self, conversation: Conversation) -> None:
        # A heading directly followed by another heading leaves nothing behind.
        if self.role is None or not self.buffer:
            self.buffer = []
            return
        content = ''.join(self.buffer).strip()
        conversation.messages.append(Message(role=self.role, content=content))
        if self.role is Role.USER and INCLUDE_FILES_MARKER in content:
            conversation.include_files = True
        self.buffer = []


def parse_directive(line: str) -> ResourceRequest | None:
    """Return the resource request a directive line declares, or None for ordinary lines."""
    if line.startswith(FILE_DIRECTIVE):
        filename = line[len(FILE_DIRECTIVE) :].strip()
        return FileRequest(filename=filename) if filename else None
    if line.startswith(GLOB_DIRECTIVE):
        pattern = line[len(GLOB_DIRECTIVE) :].strip()
        return GlobRequest(pattern=pattern) if pattern else None
    if line.startswith(URL_DIRECTIVE):
        url = line[len(URL_DIRECTIVE) :].strip()
        return URLRequest(url=url) if url else None
    return None


def _apply_front_matter(conversation: Conversation, line: str) -> None:
    key, sep, value = line.partition(':')
    if not sep:
        return
    key = key.strip()
    value = value.strip()
    if key == 'model':
        conversation.model = value
    elif key == 'project_directory':
        conversation.project_directory = value
    else:
        conversation.parameters[key] = value


def parse_conversation(text: str, default_project_directory: str | None = None) -> Conversation:
    """Parse *text* into a Conversation.

    Raises EmptyConversationError when no turn carries any content.
    ``default_project_directory`` is used when front matter does not set one.
    """
    conversation = Conversation()
    state = _ParserState()

    for line in text.splitlines():
        if line == FRONT_MATTER_DELIMITER:
            # A second block later in the document reopens front matter.
            state.in_front_matter = not state.in_front_matter
            continue

        if state.in_front_matter:
            _apply_front_matter(conversation, line)
            continue

        request = parse_directive(line)
        if request is not None:
            conversation.resource_requests.append(request)

        if line.startswith(TITLE_PREFIX) and state.role is None:
            conversation.title = line[len(TITLE_PREFIX) :]
            continue

        if line.startswith(USER_HEADING):
            state.open_turn(conversation, Role.USER)
            continue

        if line.startswith(ASSISTANT_HEADING):
            state.open_turn(conversation, Role.ASSISTANT)
            continue

        if state.role is not None:
            state.buffer.append(line + '\n')

    state.close_turn(conversation)

    if not any(message.content for message in conversation.messages):
        raise EmptyConversationError('no messages found in content')

    if not conversation.project_directory and default_project_directory:
        conversation.project_directory = default_project_directory

    log.debug(
        'Parsed conversation: %d messages, %d resource requests, model=%r',
        len(conversation.messages),
        len(conversation.resource_requests),
        conversation.model,
    )
    return conversation
