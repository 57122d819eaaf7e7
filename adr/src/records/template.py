"""Markdown layout of a record file.

The section headings are load-bearing: superseding a record splices the text
between ``## Status`` and ``## Context``, and ``parse_markdown`` relies on all
four headings being present in order.
"""

from __future__ import annotations

import datetime as dt
import re

from ..config import Config
from ..errors import MalformedEntryError
from ..models import STATUS_SUPERSEDED, SUPERSEDED_BY_PREFIX, AdrEntry

STATUS_MARKER = "## Status"
CONTEXT_MARKER = "## Context"
SECTIONS = ("Status", "Context", "Decision", "Consequences")

_HEADING_RE = re.compile(r"^# (\d+)\. (.*)$", re.MULTILINE)
_DATE_RE = re.compile(r"^Date: (.*)$", re.MULTILINE)
_SECTION_RE = re.compile(r"^## (" + "|".join(SECTIONS) + r")[ \t]*$", re.MULTILINE)


def render_markdown(entry: AdrEntry) -> str:
    parts = [
        f"# {entry.number}. {entry.title}",
        f"Date: {entry.date.strftime(Config.DATE_FORMAT)}",
        STATUS_MARKER,
        entry.status_text,
        CONTEXT_MARKER,
        entry.context,
        "## Decision",
        entry.decision,
        "## Consequences",
        entry.consequences,
    ]
    return "".join(f"{part}\n\n" for part in parts)


def parse_markdown(text: str) -> AdrEntry:
    """Rebuild an ``AdrEntry`` from a rendered record.

    Each section body is returned exactly as rendered: only the two newlines
    the layout puts on either side of it are removed, so bodies that start or
    end with their own newlines round-trip unchanged.
    A status of ``Superceded by <file>`` is read back into ``superseded_by``.
    """
    text = text.replace("\r\n", "\n")
    heading = _HEADING_RE.search(text)
    if heading is None:
        raise MalformedEntryError("Record has no '# <number>. <title>' heading")

    matches = list(_SECTION_RE.finditer(text))
    found = [m.group(1) for m in matches]
    if found != list(SECTIONS):
        raise MalformedEntryError(
            f"Expected sections {', '.join(SECTIONS)} in order, found {', '.join(found) or 'none'}"
        )

    bodies = {}
    for index, match in enumerate(matches):
        end = matches[index + 1].start() if index + 1 < len(matches) else len(text)
        bodies[match.group(1)] = _unframe(text[match.end():end])

    entry = AdrEntry(
        number=int(heading.group(1)),
        title=heading.group(2).strip(),
        context=bodies["Context"],
        decision=bodies["Decision"],
        consequences=bodies["Consequences"],
    )

    date_match = _DATE_RE.search(text, heading.end(), matches[0].start())
    if date_match:
        try:
            entry.date = dt.datetime.strptime(date_match.group(1).strip(), Config.DATE_FORMAT).date()
        except ValueError as exc:
            raise MalformedEntryError(f"Unreadable date line: {date_match.group(1)!r}") from exc

    status = bodies["Status"]
    if status.startswith(SUPERSEDED_BY_PREFIX):
        entry.superseded_by = status[len(SUPERSEDED_BY_PREFIX):].strip()
        entry.status = STATUS_SUPERSEDED
    else:
        entry.status = status
    return entry


def _unframe(segment: str) -> str:
    """Drop up to two framing newlines from each end of a section segment."""
    for _ in range(2):
        if segment.startswith("\n"):
            segment = segment[1:]
    for _ in range(2):
        if segment.endswith("\n"):
            segment = segment[:-1]
    return segment


def splice_status(contents: str, status_text: str) -> str:
    """Replace the Status section body of rendered record text."""
    start = contents.find(STATUS_MARKER)
    end = contents.find(CONTEXT_MARKER)
    if start < 0 or end < 0 or end < start:
        raise MalformedEntryError(
            f"Could not find '{STATUS_MARKER}' followed by '{CONTEXT_MARKER}'"
        )
    head = contents[: start + len(STATUS_MARKER)]
    return f"{head}\n\n{status_text}\n\n{contents[end:]}"


__all__ = [
    "STATUS_MARKER",
    "CONTEXT_MARKER",
    "render_markdown",
    "parse_markdown",
    "splice_status",
]
