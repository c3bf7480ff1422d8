"""Use case: build the starting text of a fresh conversation document."""

from __future__ import annotations

from ai_stdio.l2_use_cases.utils.conversation_serializer import USER_TURN_HEADING

DEFAULT_TITLE = 'Title Here'


def build_new_conversation(project_directory: str, model: str | None = None, prompt: str = '') -> str:
    """Return a document with front matter, a placeholder title, an optional prompt and an open user turn."""
    front_matter = f'---\nproject_directory: {project_directory}\n'
    if model:
        front_matter += f'model: {model}\n'
    front_matter += '---\n'

    prompt_section = f'## Prompt\n\n{prompt.strip()}\n\n' if prompt.strip() else ''
    return f'{front_matter}\n# {DEFAULT_TITLE}\n\n{prompt_section}{USER_TURN_HEADING}'
