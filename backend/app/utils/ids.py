"""Random names for uploaded files and fallback repositories."""

import secrets
import time

GENERATED_REPO_PREFIX = "dat-"


def new_hex_code(num_bytes: int = 3) -> str:
    """Return ``2 * num_bytes`` random lowercase hex characters."""
    return secrets.token_hex(num_bytes)


def new_repo_name() -> str:
    """Return a fresh repository name, e.g. ``dat-1f9a0c``."""
    return f"{GENERATED_REPO_PREFIX}{new_hex_code()}"


def epoch_millis() -> int:
    return time.time_ns() // 1_000_000
