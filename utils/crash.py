"""Crash logging for uncaught exceptions, entropy source failures included."""

import json
import os
import sys
import traceback

from core.errors import BaseError, EntropySourceError
from rnd.uid import generate_uid
from utils.timestamp import format_timestamp

CRASH_UID_PREFIX = "c"

# Default crash log path, can be overridden by configure()
_crash_log = "logs/crash.log"


def configure(crash_file):
    """Set crash log file path from config."""
    global _crash_log
    _crash_log = crash_file


def _crash_id():
    try:
        return generate_uid(CRASH_UID_PREFIX)
    except EntropySourceError:
        # Nothing random left to name the crash with.
        return "unknown"


def crash_record(exc_type, exc_value, exc_tb, context=None):
    record = {
        "id": _crash_id(),
        "timestamp": format_timestamp(),
        "type": exc_type.__name__ if exc_type else "Unknown",
        "msg": str(exc_value) if exc_value else "",
        "traceback": "".join(traceback.format_exception(exc_type, exc_value, exc_tb)) if exc_type else None,
    }
    if isinstance(exc_value, BaseError) and exc_value.context:
        record["error_context"] = exc_value.context
    if context:
        record["context"] = context
    return record


def _write_crash(record):
    """Append crash record to file. Never raises."""
    try:
        log_dir = os.path.dirname(_crash_log)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        with open(_crash_log, "a") as f:
            f.write(json.dumps(record, default=str) + "\n")
    except OSError:
        pass


def log_crash(exc_type, exc_value, exc_tb):
    """Log an uncaught exception to stderr and the crash file."""
    record = crash_record(exc_type, exc_value, exc_tb)
    sys.stderr.write(f"\n{'=' * 60}\nCRASH [{record['id']}] {record['timestamp']}\n{'=' * 60}\n")
    sys.stderr.write(f"{record['type']}: {record['msg']}\n{'-' * 60}\n{record['traceback'] or ''}{'=' * 60}\n\n")
    _write_crash(record)
    return record


def log_async_crash(exc, context_dict, logger=None):
    """Log an exception that escaped an asyncio task."""
    if exc is not None:
        record = crash_record(type(exc), exc, exc.__traceback__, str(context_dict))
    else:
        record = crash_record(None, context_dict.get("message", "Unknown"), None, str(context_dict))
        record["type"] = "AsyncError"

    if logger:
        logger.error("Async exception", error=record["msg"], task=str(context_dict.get("future", "unknown")))

    _write_crash(record)
    return record


def create_async_handler(logger=None):
    """Create async exception handler for event loop."""
    def handler(loop, context):
        log_async_crash(context.get("exception"), context, logger)
    return handler


def install_crash_handler():
    """Install global sync exception handler."""
    sys.excepthook = log_crash
