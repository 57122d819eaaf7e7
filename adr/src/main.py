"""Command-line entry point for the adr tool.

Usage:
    adr init <path-to-documentation>
    adr new [-s <number>] <title words...>
    adr list
    adr help
"""

from __future__ import annotations

import contextlib
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence

from loguru import logger

from .config import Config
from .errors import AdrError, UsageError
from .models import AdrEntry
from .records import EntryRepository
from .services import EditorLauncher, EditorSession
from .storage import SettingsStore
from .utils import TextUtils

BANNER = (
    "\nADR - A command-line tool for working with Architecture Decision Records (ADRs).\n"
    "Based on adr-tools (https://github.com/npryce/adr-tools).\n"
)
SUPERSEDE_FLAG = "-s"
# Titles become filenames
TITLE_FORBIDDEN = ("/", "\\")


@dataclass(slots=True)
class CommandContext:
    store: SettingsStore = field(default_factory=SettingsStore)
    launcher: Optional[EditorLauncher] = None
    temp_dir: Optional[Path] = None


class Command(NamedTuple):
    description: str
    handler: Callable[[List[str], CommandContext], None]


def setup_logging():
    """Configure application logging."""
    logger.remove()
    _ = logger.add(sys.stderr, level=Config.LOG_LEVEL, format="{level: <8} | {message}")

    if Config.LOG_FILE:
        with contextlib.suppress(Exception):
            Path(Config.LOG_FILE).parent.mkdir(parents=True, exist_ok=True)
        _ = logger.add(
            Config.LOG_FILE,
            level="DEBUG",
            rotation="1 MB",
            retention="10 days",
            backtrace=True,
            diagnose=False,
        )


def adr_init(args: List[str], ctx: CommandContext) -> None:
    if len(args) < 2:
        raise UsageError("adr init requires the parameter 'path-to-documentation'")

    settings = ctx.store.write(args[1])
    EntryRepository(settings).bootstrap()

    print("Adr initialised in current directory\n")
    print(
        "NOTE: Please ensure you have a registered editor for Markdown (.md) files, "
        "or set ADR_EDITOR to the editor command to use."
    )


def parse_new_args(args: List[str]) -> tuple[Optional[int], str]:
    """Split ``new`` arguments into (supersede target, title)."""
    title_starts = 1
    target: Optional[int] = None

    # The supersede flag must immediately follow 'new'
    if len(args) > 1 and args[1] == SUPERSEDE_FLAG:
        if len(args) < 3:
            raise UsageError("adr new -s requires the number of the entry to supercede")
        try:
            target = int(args[2])
        except ValueError:
            raise AdrError(
                "When attempting to supercede an entry, you must specify which entry to supercede!"
            ) from None
        title_starts = 3

    title = " ".join(args[title_starts:])
    if not title.strip():
        raise UsageError("adr new requires a title")
    if any(sep in title for sep in TITLE_FORBIDDEN):
        raise UsageError("adr new titles cannot contain '/' or '\\'")
    return target, title


def adr_new(args: List[str], ctx: CommandContext) -> None:
    target, title = parse_new_args(args)
    settings = ctx.store.read()
    repository = EntryRepository(settings)

    superseded = repository.find_entry(target) if target is not None else None

    entry = AdrEntry(title=title)
    session = EditorSession(repository, ctx.launcher, ctx.temp_dir)
    if not session.edit(entry):
        print(f"No changes made to {entry.filename}; nothing was added.")
        return

    print(f"Created {settings.directory / entry.filename}")
    if superseded is not None:
        renamed = repository.supersede(superseded, entry)
        print(f"Superceded {renamed.name}")


def list_adrs(args: List[str], ctx: CommandContext) -> None:
    settings = ctx.store.read()
    files = EntryRepository(settings).list_files()

    print(f"Contents of {settings.path}:\n")
    for filename in files:
        print(TextUtils.display_name(filename))


def show_usage(args: Optional[List[str]] = None, ctx: Optional[CommandContext] = None) -> None:
    print(BANNER)
    print("Usage:\n\nadr <command> <params>, where <command> is one of:")
    for name, command in COMMANDS.items():
        print(f"\t{name} \t\t- {command.description}")


COMMANDS: Dict[str, Command] = {
    "init": Command("Initialise adr for this project.", adr_init),
    "new": Command("Add or supercede an adr record.", adr_new),
    "list": Command("List all ADRs", list_adrs),
    "help": Command("List available commands", show_usage),
}


def dispatch(argv: Sequence[str], ctx: Optional[CommandContext] = None) -> int:
    """Run one command and return the process exit code."""
    args = list(argv)
    ctx = ctx or CommandContext()

    try:
        if not args:
            show_usage()
            return 0

        command = COMMANDS.get(args[0].lower())
        if command is None:
            print(f"ERROR: unknown command {args[0]}. \n\nTry adr help for a list of valid commands.")
            return 0

        logger.debug(f"[cli] {args[0].lower()} args={args[1:]}")
        command.handler(args, ctx)
    except UsageError as e:
        logger.debug(f"[cli] usage error: {e}")
        print(f"ERROR: {e}")
        show_usage()
        return 0
    except AdrError as e:
        print(str(e))
        return 1
    except Exception as e:
        logger.exception("Unexpected error")
        print(str(e) or e.__class__.__name__)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None, ctx: Optional[CommandContext] = None) -> int:
    setup_logging()
    try:
        return dispatch(sys.argv[1:] if argv is None else argv, ctx)
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        return 130


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
