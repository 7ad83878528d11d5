from __future__ import annotations

import filetype

DEFAULT_EXTENSION = "bin"


def sniff_extension(payload: bytes) -> str:
    """Guess a file extension from the payload's leading bytes."""
    if not payload:
        return DEFAULT_EXTENSION
    return filetype.guess_extension(payload) or DEFAULT_EXTENSION
