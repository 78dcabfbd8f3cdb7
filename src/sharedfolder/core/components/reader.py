from __future__ import annotations

"""
Content Sniffing Component.

Classifies files as binary or text by inspecting their leading bytes rather
than their names. Only a bounded prefix is read so large artifacts cost the
same as small ones.
"""

import codecs

SNIFF_BYTES = 512

# Byte-order marks announce text in a multi-byte encoding (UTF-16 text is
# full of NUL bytes and would otherwise look binary)
_TEXT_BOMS = (
    codecs.BOM_UTF8,
    codecs.BOM_UTF32_LE,
    codecs.BOM_UTF32_BE,
    codecs.BOM_UTF16_LE,
    codecs.BOM_UTF16_BE,
)

# Binary formats whose header is plain ASCII
_BINARY_SIGNATURES = (b"%PDF-",)

_SUSPICIOUS_RATIO = 0.1

# Control characters tolerated in text: BEL..CR, plus ESC for ANSI sequences
_TEXT_CONTROLS = frozenset(range(7, 14)) | {27}


# -----------------------------------------------------------------------------
# CLASSIFICATION OPERATIONS
# -----------------------------------------------------------------------------

def is_binary_file(file_path: str) -> bool:
    """
    Determine whether a file holds binary data.

    Read errors (missing file, permission denied) propagate to the caller.

    Args:
        file_path: Absolute path to the target file.

    Returns:
        bool: True for binary content, False for text.
    """
    with open(file_path, "rb") as f:
        chunk = f.read(SNIFF_BYTES)
    return is_binary_content(chunk)


def is_binary_content(chunk: bytes) -> bool:
    """
    Classify a byte sample as binary or text.

    Args:
        chunk: Leading bytes of a file.

    Returns:
        bool: True when the sample looks like binary data.
    """
    if not chunk:
        return False

    if chunk.startswith(_TEXT_BOMS):
        return False

    if chunk.startswith(_BINARY_SIGNATURES):
        return True

    if b"\x00" in chunk:
        return True

    suspicious = sum(1 for b in chunk if b < 32 and b not in _TEXT_CONTROLS)
    if not _is_utf8(chunk):
        suspicious += sum(1 for b in chunk if b > 127)

    return suspicious / len(chunk) > _SUSPICIOUS_RATIO


def _is_utf8(chunk: bytes) -> bool:
    """Validate UTF-8, tolerating a multi-byte sequence cut off by the sample."""
    try:
        chunk.decode("utf-8")
        return True
    except UnicodeDecodeError as e:
        if e.reason == "unexpected end of data" and e.start >= len(chunk) - 3:
            return True
        return False
