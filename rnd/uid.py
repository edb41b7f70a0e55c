"""
UID - short time-bucketed unique identifier.

Format: 1 prefix byte + 3 base32 chars of time + 5 random base32 chars = 9 chars.
The time chars carry the top 15 bits of the seconds elapsed since EPOCH, so
ids sort by buckets of 2**17 seconds (about 36 hours); within a bucket only
the random suffix tells them apart.

These constants are part of the storage format of every issued id.
"""

import struct

from core.errors import PreconditionError
from rnd.charset import decode_int, encode, is_base32
from rnd.token import generate_token
from utils.timestamp import from_unix, unix_seconds

PREFIX_NONE = "\x00"
PREFIX_MIXED = "*"

# 2020-01-01 UTC
EPOCH = 1577836800

UID_LENGTH = 9
UID_TIME_CHARS = 3
UID_RANDOM_CHARS = UID_LENGTH - 1 - UID_TIME_CHARS
UID_BUCKET_SECONDS = 1 << (32 - 5 * UID_TIME_CHARS)


def prefix_char(prefix):
    """Normalize a prefix given as str, bytes or int to a single character."""
    if isinstance(prefix, (bytes, bytearray)) and len(prefix) == 1:
        return chr(prefix[0])
    if isinstance(prefix, int) and not isinstance(prefix, bool) and 0 <= prefix <= 255:
        return chr(prefix)
    if isinstance(prefix, str) and len(prefix) == 1 and ord(prefix) <= 255:
        return prefix
    raise PreconditionError(f"prefix must be a single byte: {prefix!r}", argument="prefix", value=prefix)


def encode_time(elapsed):
    """Encode seconds since EPOCH as 7 base32 chars (4 bytes, big-endian)."""
    return encode(struct.pack(">I", elapsed & 0xFFFFFFFF))


def generate_uid(prefix, source=None, clock=None):
    """Return a unique id starting with the raw prefix character."""
    prefix = prefix_char(prefix)
    elapsed = unix_seconds(clock) - EPOCH

    return prefix + encode_time(elapsed)[:UID_TIME_CHARS] + generate_token(UID_RANDOM_CHARS, source)


def uid_elapsed(uid):
    """Seconds since EPOCH at the start of the uid's time bucket."""
    if not is_uid(uid):
        raise PreconditionError(f"invalid uid: {uid!r}", argument="uid", value=uid)
    return decode_int(uid[1:1 + UID_TIME_CHARS]) << (32 - 5 * UID_TIME_CHARS)


def uid_time(uid):
    """Start of the uid's time bucket as UTC datetime."""
    return from_unix(EPOCH + uid_elapsed(uid))


def is_uid(value, prefix=None):
    if not isinstance(value, str) or len(value) != UID_LENGTH:
        return False
    if prefix is not None and value[0] != prefix_char(prefix):
        return False
    return is_base32(value[1:])
