"""JSON helpers for the settings file using orjson.

- safe_loads: parse str or bytes with orjson.
- dumps: serialize to indented UTF-8 text with a trailing newline.
- legacy_value: pull a quoted value out of the hand-written settings shape
  of older versions, which did not escape backslashes in Windows paths.
- is_unescaped: tell whether such a raw value holds backslashes that are not
  JSON escapes of a backslash or a quote.
"""

from __future__ import annotations

import re
from typing import Any, Optional

import orjson

_JSON_QUOTED_ESCAPE_RE = re.compile(r'\\[\\"]')


def safe_loads(data: str | bytes) -> Any:
    """Parse JSON with orjson, dropping a leading BOM."""
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")
    return orjson.loads(data.lstrip("\ufeff"))


def dumps(obj: Any) -> str:
    return orjson.dumps(obj, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n"


def legacy_value(text: str, key: str) -> Optional[str]:
    """Return the quoted value following ``key`` (case-insensitive), or None.

    Tolerates any whitespace or newline style between the tokens and does not
    interpret escapes, so ``{"path":"C:\\docs"}`` written verbatim still reads.
    """
    pattern = re.compile(
        r'"?' + re.escape(key) + r'"?\s*:\s*"((?:\\[^\r\n]|[^"\\\r\n])*)"', re.IGNORECASE
    )
    match = pattern.search(text)
    return match.group(1) if match else None


def is_unescaped(raw: str) -> bool:
    """True when ``raw`` contains a backslash other than ``\\\\`` or ``\\"``.

    Older settings files wrote paths verbatim, so ``docs\\new`` must not be
    decoded as ``docs`` + newline + ``ew``.
    """
    return "\\" in _JSON_QUOTED_ESCAPE_RE.sub("", raw)


__all__ = ["safe_loads", "dumps", "legacy_value", "is_unescaped"]
