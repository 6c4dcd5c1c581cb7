"""
Job ID generator

- 8 characters from a fixed 62-character alphanumeric alphabet
- rejection sampling over secure random bytes so every character is equally likely
- no uniqueness guarantee: 62^8 is large enough for the expected load
"""

from __future__ import annotations

import secrets
from typing import Callable

from backend.app.core.errors import RandomSourceError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
ID_LENGTH = 8

# 248: bytes at or above this would over-represent the first 8 characters
_MAX_UNBIASED = 256 - (256 % len(ALPHABET))


def generate_id(
    length: int = ID_LENGTH,
    read_random: Callable[[int], bytes] = secrets.token_bytes,
) -> str:
    """Return a random ID of `length` characters drawn from ALPHABET.

    `read_random(n)` must return n random bytes; it is read in batches a
    quarter larger than the target so one batch is usually enough.
    """
    batch = length + length // 4
    out: list[str] = []
    while True:
        try:
            chunk = read_random(batch)
        except (OSError, NotImplementedError) as e:
            raise RandomSourceError(f"uuid generation failed: {e}") from e

        for b in chunk:
            if b >= _MAX_UNBIASED:
                continue
            out.append(ALPHABET[b % len(ALPHABET)])
            if len(out) == length:
                return "".join(out)
