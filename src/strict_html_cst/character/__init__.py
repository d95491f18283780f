"""Character input layer for the strict HTML parser.

Turns byte payloads into source text before scanning starts.
"""

from .encoding import (
    BOM_PATTERNS,
    DetectedEncoding,
    decode_source,
    detect_bom,
    detect_encoding,
)

__all__ = [
    "BOM_PATTERNS",
    "DetectedEncoding",
    "decode_source",
    "detect_bom",
    "detect_encoding",
]
