"""Primary source package for the adr command-line tool.

Tests import modules as 'adr.src.records.repository' and so on. All
intra-package imports should use relative form (e.g. 'from ..config import Config').
"""

__all__ = []
