"""Decoding of byte input into the text the parser consumes.

The parser itself only ever sees ``str``. Bytes are decoded strictly: a byte
order mark wins, then the caller supplied encoding, then UTF-8. Undecodable
input raises ``UnicodeDecodeError``.
"""

from dataclasses import dataclass
from typing import Dict, Optional

FALLBACK_ENCODING = "utf-8"

# Longest patterns first: the UTF-32-LE mark starts with the UTF-16-LE one
BOM_PATTERNS: Dict[bytes, str] = {
    b"\xff\xfe\x00\x00": "utf-32-le",
    b"\x00\x00\xfe\xff": "utf-32-be",
    b"\xef\xbb\xbf": "utf-8",
    b"\xff\xfe": "utf-16-le",
    b"\xfe\xff": "utf-16-be",
}


@dataclass(frozen=True)
class DetectedEncoding:
    """Encoding chosen for a byte payload.

    Attributes:
        encoding: Codec name passed to ``bytes.decode``
        bom_length: Number of leading bytes to drop before decoding
    """

    encoding: str
    bom_length: int = 0

    @property
    def from_bom(self) -> bool:
        return self.bom_length > 0


def detect_bom(data: bytes) -> Optional[DetectedEncoding]:
    """Detect an encoding from a leading byte order mark, if any."""
    for bom_bytes, encoding in BOM_PATTERNS.items():
        if data.startswith(bom_bytes):
            return DetectedEncoding(encoding, len(bom_bytes))
    return None


def detect_encoding(data: bytes, encoding: Optional[str] = None) -> DetectedEncoding:
    """Choose the codec for ``data``: BOM, then ``encoding``, then UTF-8."""
    return detect_bom(data) or DetectedEncoding(encoding or FALLBACK_ENCODING)


def decode_source(data: bytes, encoding: Optional[str] = None) -> str:
    """Decode raw HTML bytes into text.

    Args:
        data: Raw document bytes
        encoding: Codec to use when the data carries no byte order mark

    Returns:
        Decoded source text without the byte order mark
    """
    detected = detect_encoding(data, encoding)
    return data[detected.bom_length:].decode(detected.encoding)
