"""Record modules for the markdown layout and the file-backed repository."""

from .repository import EntryRepository
from .template import parse_markdown, render_markdown

__all__ = [
    'EntryRepository',
    'parse_markdown',
    'render_markdown'
]
