"""Services modules for editor launching and editing sessions."""

from .editor import EditorLauncher, EditorSession

__all__ = [
    'EditorLauncher',
    'EditorSession'
]
