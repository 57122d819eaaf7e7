"""Utility modules for JSON settings and record filename handling."""

from .text_utils import TextUtils
from .json_utils import dumps, is_unescaped, legacy_value, safe_loads

__all__ = ["TextUtils", "dumps", "is_unescaped", "legacy_value", "safe_loads"]
