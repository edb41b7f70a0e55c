"""Random tokens drawn from a cryptographically secure source."""

import os

from core.errors import EntropySourceError, PreconditionError
from rnd.charset import encode, is_base32

TOKEN_BYTES = 7
TOKEN_MIN_SIZE = 1
TOKEN_MAX_SIZE = 10


def random_bytes(size, source=None):
    """Read `size` bytes from the random source, os.urandom by default.

    There is no fallback: a failing source raises EntropySourceError.
    """
    source = source or os.urandom
    try:
        data = source(size)
    except (OSError, NotImplementedError) as exc:
        raise EntropySourceError(f"random source failed: {exc}", requested=size, cause=exc) from exc

    if data is None or len(data) != size:
        got = 0 if data is None else len(data)
        raise EntropySourceError(f"random source returned {got} of {size} bytes", requested=size)

    return bytes(data)


def generate_token(size, source=None):
    """Return a random token with a length of 1 to 10 characters."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise PreconditionError(f"size must be an integer: {size!r}", argument="size", value=size)
    if size < TOKEN_MIN_SIZE or size > TOKEN_MAX_SIZE:
        raise PreconditionError(f"size out of range: {size}", argument="size", value=size)

    return encode(random_bytes(TOKEN_BYTES, source))[:size]


def is_token(value, size=None):
    if not isinstance(value, str) or not TOKEN_MIN_SIZE <= len(value) <= TOKEN_MAX_SIZE:
        return False
    if size is not None and len(value) != size:
        return False
    return is_base32(value)
