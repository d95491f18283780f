"""Scanning layer for the strict HTML parser.

Key Components:
    Cursor: Forward-only source cursor with line/column tracking
    SourcePosition: Immutable line/column/offset triple
    Scanner: Cursor extended with the tokenizing primitives of the grammar
"""

from .cursor import Cursor, SourcePosition
from .primitives import Scanner

__all__ = [
    "Cursor",
    "Scanner",
    "SourcePosition",
]
