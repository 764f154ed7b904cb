"""
Base64 text codec for image payloads
"""

import base64
from typing import Optional

_LINE_BREAKS = str.maketrans("", "", "\r\n")


def decode(blob: str) -> Optional[bytes]:
    """
    Decodes standard padded base64 into raw bytes.

    Surrounding whitespace and embedded CR/LF are ignored. Any other
    non-alphabet character, misplaced padding or a length that is not a
    multiple of four makes the input malformed and None is returned.
    Empty input decodes to b"" (rejecting it is the caller's call).
    """
    clean = blob.strip().translate(_LINE_BREAKS)
    if not clean:
        return b""
    try:
        return base64.b64decode(clean, validate=True)
    except ValueError:
        # binascii.Error, or non-ASCII characters in the text
        return None


def encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
