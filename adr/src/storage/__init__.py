"""Storage modules for the project settings file."""

from .settings_store import SettingsStore

__all__ = [
    'SettingsStore'
]
