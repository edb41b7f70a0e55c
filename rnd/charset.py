"""Crockford base32 codec shared by tokens and unique ids."""

import base64
import binascii

from core.errors import PreconditionError

# Crockford variant: no I, L, O or U.
CHARSET_BASE32 = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

_RFC4648 = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
_TO_CROCKFORD = bytes.maketrans(_RFC4648, CHARSET_BASE32.encode("ascii"))
_FROM_CROCKFORD = bytes.maketrans(CHARSET_BASE32.encode("ascii"), _RFC4648)


def encode(data):
    """Encode bytes as unpadded Crockford base32 (RFC 4648 bit grouping)."""
    return base64.b32encode(data).translate(_TO_CROCKFORD).decode("ascii").rstrip("=")


def decode(text):
    """Decode unpadded Crockford base32 back into bytes."""
    if not is_base32(text):
        raise PreconditionError(f"not base32: {text!r}", argument="text", value=text)

    padded = text.encode("ascii").translate(_FROM_CROCKFORD)
    padded += b"=" * (-len(padded) % 8)
    try:
        return base64.b32decode(padded)
    except binascii.Error as exc:
        raise PreconditionError(f"invalid base32 length: {text!r}", argument="text", value=text, cause=exc) from exc


def decode_int(text):
    """Interpret a run of base32 characters as an unsigned big-endian integer."""
    n = 0
    for char in text:
        index = CHARSET_BASE32.find(char)
        if index < 0:
            raise PreconditionError(f"not base32: {text!r}", argument="text", value=text)
        n = (n << 5) | index
    return n


def is_base32(text):
    return isinstance(text, str) and all(char in CHARSET_BASE32 for char in text)
