"""Decode uploaded extracts that may be Latin-1 family text labelled as UTF-8."""

from __future__ import annotations

import codecs
import logging
import re

logger = logging.getLogger(__name__)

REPLACEMENT_CHAR = "�"

# UTF-8 lead byte 0xC2/0xC3 read as Latin text is "Â"/"Ã", and the continuation
# byte (0x80-0xBF) becomes one of these characters: "Ã©", "Ã£", "Âº", "Ã‡".
_CONTINUATION_CHARS = "".join(
    sorted(set(bytes(range(0x80, 0xC0)).decode("cp1252", errors="ignore")) | {chr(b) for b in range(0x80, 0xC0)})
)
_DOUBLE_ENCODED = re.compile("[ÂÃ][" + re.escape(_CONTINUATION_CHARS) + "]")

FALLBACK_ENCODINGS = ("cp1252", "latin-1")


def looks_mojibaked(text: str) -> bool:
    """Heuristic for broken accents.

    "JOÃO" is legitimate Portuguese, only an "Ã"/"Â" followed by a
    continuation-byte character is treated as double-encoded text.
    """
    if not text:
        return False
    if REPLACEMENT_CHAR in text:
        return True
    return bool(_DOUBLE_ENCODED.search(text))


def decode_bytes(data: bytes) -> str:
    """Decode file bytes, preferring UTF-8 and falling back to Windows-1252.

    Never raises: when no fallback decoder manages the bytes, the lossy UTF-8
    text is returned so the rest of the file is still usable.
    """
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]

    text = data.decode("utf-8", errors="replace")
    if not looks_mojibaked(text):
        return text

    for encoding in FALLBACK_ENCODINGS:
        try:
            decoded = data.decode(encoding)
        except UnicodeDecodeError:
            # cp1252 leaves 0x81, 0x8D, 0x8F, 0x90 and 0x9D undefined.
            continue
        logger.warning("CSV is not valid UTF-8, decoded as %s", encoding)
        return decoded

    logger.warning("No fallback encoding could decode the CSV, keeping lossy UTF-8 text")
    return text
