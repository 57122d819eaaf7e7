"""Error kinds raised by the adr tool.

Everything derives from ``AdrError`` so the command dispatcher can report a
single line and pick the exit code. ``UsageError`` is the only non-fatal kind:
it brings up the help banner and exits successfully.
"""


class AdrError(RuntimeError):
    """Base class for all errors reported to the user."""


class UsageError(AdrError):
    """Missing or malformed command-line arguments."""


class ConfigurationError(AdrError):
    """Settings file absent or missing its 'path' entry."""


class NumberingError(AdrError):
    """A record filename does not start with a four digit number."""


class EntryNotFoundError(AdrError):
    """No record carries the requested number."""


class EntrySupersededError(AdrError):
    """The requested record has already been superseded."""


class MalformedEntryError(AdrError):
    """A record file lacks the headings the tool relies on."""


class EditorLaunchError(AdrError):
    """The editor process could not be started."""


__all__ = [
    "AdrError",
    "UsageError",
    "ConfigurationError",
    "NumberingError",
    "EntryNotFoundError",
    "EntrySupersededError",
    "MalformedEntryError",
    "EditorLaunchError",
]
