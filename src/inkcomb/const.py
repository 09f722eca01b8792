"""
General use constants.
"""

from __future__ import annotations
from typing import Final

DOUBLE_QUOTE: Final[str] = '"'
IDENTIFIER_EXTRA: Final[frozenset[str]] = frozenset({"-"})
"""Non-alphanumeric characters allowed after the first character of an identifier."""
