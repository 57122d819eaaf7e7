from pathlib import Path
from typing import List

from loguru import logger

from ..errors import EntryNotFoundError, EntrySupersededError, NumberingError
from ..models import STATUS_ACCEPTED, AdrEntry, AdrSettings
from ..utils import TextUtils
from .template import parse_markdown, render_markdown, splice_status

BOOTSTRAP_TITLE = "Record architectural decisions"
BOOTSTRAP_CONTEXT = "We need to record the architectural decisions made on this project."
BOOTSTRAP_DECISION = (
    "We will use Architecture Decision Records, as described by Michael Nygard in this article: "
    "http://thinkrelevance.com/blog/2011/11/15/documenting-architecture-decisions"
)
BOOTSTRAP_CONSEQUENCES = "See Michael Nygard's article, linked above."


class EntryRepository:
    """File-backed store of records inside the configured directory."""

    def __init__(self, settings: AdrSettings):
        self.settings = settings

    @property
    def directory(self) -> Path:
        return self.settings.directory

    def list_files(self) -> List[str]:
        """Names of the files directly inside the directory, ascending.

        Zero padded prefixes make lexicographic order the numeric order.
        """
        if not self.directory.is_dir():
            return []
        return sorted(p.name for p in self.directory.iterdir() if p.is_file())

    def next_number(self) -> int:
        files = self.list_files()
        if not files:
            logger.debug(f"[repo] {self.directory} is empty; starting at 1")
            return 1
        last = files[-1]
        number = TextUtils.parse_number(last)
        if number is None:
            raise NumberingError(f"Couldn't get last number from file name {last}!")
        return number + 1

    def render(self, entry: AdrEntry, directory: Path) -> Path:
        """Write ``entry`` to ``directory``, replacing any file of the same name."""
        target = Path(directory) / entry.filename
        target.write_text(render_markdown(entry), encoding="utf-8")
        logger.debug(f"[repo] wrote {target}")
        return target

    def bootstrap(self) -> Path:
        entry = AdrEntry(
            number=1,
            title=BOOTSTRAP_TITLE,
            status=STATUS_ACCEPTED,
            context=BOOTSTRAP_CONTEXT,
            decision=BOOTSTRAP_DECISION,
            consequences=BOOTSTRAP_CONSEQUENCES,
        )
        self.settings.ensure_directory()
        path = self.render(entry, self.directory)
        logger.info(f"[repo] bootstrap record written: {path}")
        return path

    def find_entry(self, number: int) -> AdrEntry:
        """Build the record carrying ``number`` from its filename."""
        prefix = TextUtils.number_prefix(number)
        for filename in self.list_files():
            if not filename.startswith(prefix):
                continue
            if TextUtils.is_superseded(filename):
                raise EntrySupersededError(
                    f"The adr entry {number} has already been superceded ({filename})!"
                )
            return AdrEntry(number=number, title=TextUtils.title_from_filename(filename))
        raise EntryNotFoundError(f"The adr entry {number} does not exist to be deprecated!")

    def load(self, filename: str) -> AdrEntry:
        return parse_markdown((self.directory / filename).read_text(encoding="utf-8"))

    def supersede(self, old: AdrEntry, new: AdrEntry) -> Path:
        """Point ``old`` at ``new`` in its Status section and rename its file.

        The rewrite and the rename are two separate steps; a crash between
        them leaves the content updated under the old name.
        """
        old_path = self.directory / old.filename
        contents = old_path.read_text(encoding="utf-8")

        old.mark_superseded_by(new)
        old_path.write_text(splice_status(contents, old.status_text), encoding="utf-8")

        new_path = self.directory / old.superseded_filename
        old_path.rename(new_path)
        logger.info(f"[repo] {old.filename} superceded by {new.filename} -> {new_path.name}")
        return new_path
