"""File name helpers."""

import os
import re

_GENERATED_PATTERNS = [
    # md5 / sha1 / sha256 hex digests
    re.compile(r"[0-9a-fA-F]{32}|[0-9a-fA-F]{40}|[0-9a-fA-F]{64}"),
    # uuid
    re.compile(r"[0-9a-fA-F]{8}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{12}"),
    # canonical library names, e.g. 20200101_120000_7F3A9C21
    re.compile(r"\d{8}_\d{6}_[0-9A-Fa-f]{8}"),
]


def strip_ext(name):
    return os.path.splitext(os.path.basename(name))[0]


def is_generated(name):
    """Whether a file name was generated by software rather than chosen by a person."""
    if not name:
        return False

    base = strip_ext(name)
    # Sidecar and edited copies such as "abc123.jpg.json" or "name(1)".
    base = re.sub(r"(\.\w+)+$|\s*\(\d+\)$", "", base)

    return any(pattern.fullmatch(base) for pattern in _GENERATED_PATTERNS)
