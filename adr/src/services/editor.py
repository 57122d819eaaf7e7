"""Editing sessions for new records.

A record is first written to a temporary directory and handed to an external
editor. Only when the editor leaves the file with a newer modification time
is it moved into the records directory; otherwise it is thrown away.

Waiting on the editor has no timeout and cannot be cancelled: an editor that
never exits keeps the tool blocked.
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from ..config import Config
from ..errors import EditorLaunchError
from ..models import AdrEntry
from ..records import EntryRepository


class EditorLauncher:
    """Starts an editor on a file and blocks until it exits.

    ``command`` (``ADR_EDITOR``, ``VISUAL`` or ``EDITOR`` by default) is split
    shell-style and the file path appended. Without a command the platform's
    handler for ``.md`` files is used, asked to wait where it can.
    """

    def __init__(self, command: Optional[str] = None, platform: Optional[str] = None):
        self.command = command if command is not None else Config.EDITOR
        self.platform = platform or sys.platform

    def build_command(self, path: Path) -> List[str]:
        if self.command:
            return [*shlex.split(self.command), str(path)]
        if self.platform.startswith("win"):
            return ["cmd", "/c", "start", "", "/wait", str(path)]
        if self.platform == "darwin":
            return ["open", "-W", str(path)]
        return ["xdg-open", str(path)]

    def launch_and_wait(self, path: Path) -> int:
        cmd = self.build_command(path)
        logger.info(f"[editor] executing: {' '.join(cmd)}")
        try:
            return subprocess.call(cmd)
        except FileNotFoundError as e:
            raise EditorLaunchError(f"Could not start editor {cmd[0]!r}: {e}") from e


class EditorSession:
    """Runs one edit of a record and decides whether to keep it."""

    def __init__(
        self,
        repository: EntryRepository,
        launcher: Optional[EditorLauncher] = None,
        temp_dir: Optional[Path] = None,
    ):
        self.repository = repository
        self.launcher = launcher or EditorLauncher()
        self.temp_dir = Path(temp_dir) if temp_dir is not None else Config.TEMP_DIR

    def edit(self, entry: AdrEntry) -> bool:
        """Let the user edit ``entry``; True when it was committed."""
        # Numbering may have moved since the entry was built.
        entry.number = self.repository.next_number()

        self.temp_dir.mkdir(parents=True, exist_ok=True)
        temp = self.repository.render(entry, self.temp_dir)
        created = temp.stat().st_mtime_ns

        try:
            exit_code = self.launcher.launch_and_wait(temp)
        except BaseException:
            temp.unlink(missing_ok=True)
            raise
        if exit_code:
            logger.warning(f"[editor] editor exited with status {exit_code}")

        if not temp.exists():
            logger.warning(f"[editor] {temp} disappeared while editing; nothing to commit")
            return False

        written = temp.stat().st_mtime_ns
        if written > created:
            target = self.repository.directory / entry.filename
            shutil.move(str(temp), str(target))
            logger.info(f"[editor] committed {target}")
            return True

        temp.unlink()
        logger.info(f"[editor] {entry.filename} unchanged; discarded")
        return False
