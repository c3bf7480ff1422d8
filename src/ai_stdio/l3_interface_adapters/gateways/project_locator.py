"""Gateway: locate the project directory and its optional prompt file."""

from __future__ import annotations

from pathlib import Path

from ai_stdio.l3_interface_adapters.gateways.paths import PROMPT_FILENAME


def _ancestors(start: Path) -> list[Path]:
    start = start.resolve()
    return [start, *start.parents]


def find_git_dir(start: Path) -> Path | None:
    """Nearest ancestor of *start* (inclusive) containing a ``.git`` entry."""
    for directory in _ancestors(start):
        if (directory / '.git').exists():
            return directory
    return None


def find_project_directory(start: Path) -> Path:
    """Git root above *start*, else *start* itself."""
    return find_git_dir(start) or start.resolve()


def find_prompt(start: Path) -> str:
    """Contents of the nearest ``.prompt`` file above *start*, or empty string."""
    for directory in _ancestors(start):
        prompt_path = directory / PROMPT_FILENAME
        if prompt_path.is_file():
            return prompt_path.read_text(encoding='utf-8').strip()
    return ''
