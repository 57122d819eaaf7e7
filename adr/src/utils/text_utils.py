from pathlib import Path
from typing import Optional

SUPERSEDED_SUFFIX = "-(superceded)"
NUMBER_WIDTH = 4


class TextUtils:
    """Utility class for record filename handling."""

    @staticmethod
    def title_to_slug(title: str) -> str:
        """Replace spaces with hyphens, keeping the title's casing."""
        return title.replace(" ", "-")

    @staticmethod
    def slug_to_title(slug: str) -> str:
        return slug.replace("-", " ")

    @staticmethod
    def number_prefix(number: int) -> str:
        """Zero padded prefix used by every record filename."""
        return f"{number:0{NUMBER_WIDTH}d}-"

    @staticmethod
    def parse_number(filename: str) -> Optional[int]:
        """Return the leading four digit number of a filename, if any."""
        head = filename[:NUMBER_WIDTH]
        if len(head) == NUMBER_WIDTH and head.isascii() and head.isdigit():
            return int(head)
        return None

    @staticmethod
    def title_from_filename(filename: str) -> str:
        """Extract the title embedded between the first hyphen and the extension."""
        start = filename.index("-") + 1
        end = filename.rfind(".")
        if end < start:
            end = len(filename)
        return TextUtils.slug_to_title(filename[start:end])

    @staticmethod
    def display_name(filename: str) -> str:
        """Filename without extension, hyphens shown as spaces."""
        return TextUtils.slug_to_title(Path(filename).stem)

    @staticmethod
    def is_superseded(filename: str) -> bool:
        return Path(filename).stem.endswith(SUPERSEDED_SUFFIX)
