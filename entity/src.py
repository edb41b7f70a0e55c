"""Metadata sources and their priorities."""

SRC_AUTO = ""
SRC_DEFAULT = "default"
SRC_ESTIMATE = "estimate"
SRC_FILE = "file"
SRC_NAME = "name"
SRC_IMAGE = "image"
SRC_LOCATION = "location"
SRC_MARKER = "marker"
SRC_KEYWORD = "keyword"
SRC_META = "meta"
SRC_XMP = "xmp"
SRC_MANUAL = "manual"

SRC_PRIORITY = {
    SRC_AUTO: 1,
    SRC_DEFAULT: 1,
    SRC_ESTIMATE: 2,
    SRC_FILE: 2,
    SRC_NAME: 4,
    SRC_IMAGE: 8,
    SRC_LOCATION: 8,
    SRC_MARKER: 8,
    SRC_KEYWORD: 16,
    SRC_META: 16,
    SRC_XMP: 32,
    SRC_MANUAL: 64,
}


def src_priority(source):
    return SRC_PRIORITY.get(source, 0)


def src_string(source):
    """Human readable source name for log messages."""
    return source or "auto"
