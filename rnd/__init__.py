from rnd.charset import CHARSET_BASE32, encode, decode
from rnd.token import generate_token, is_token, random_bytes
from rnd.uid import (
    EPOCH,
    PREFIX_MIXED,
    PREFIX_NONE,
    UID_LENGTH,
    UID_RANDOM_CHARS,
    UID_TIME_CHARS,
    generate_uid,
    is_uid,
    uid_elapsed,
    uid_time,
)

__all__ = [
    "CHARSET_BASE32",
    "EPOCH",
    "PREFIX_MIXED",
    "PREFIX_NONE",
    "UID_LENGTH",
    "UID_RANDOM_CHARS",
    "UID_TIME_CHARS",
    "decode",
    "encode",
    "generate_token",
    "generate_uid",
    "is_token",
    "is_uid",
    "random_bytes",
    "uid_elapsed",
    "uid_time",
]
