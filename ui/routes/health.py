"""Health and observability routes."""

import time

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core.health import Status
from rnd import EPOCH, UID_LENGTH, UID_RANDOM_CHARS, UID_TIME_CHARS
from utils.timestamp import format_timestamp

router = APIRouter(prefix="/api/v1", tags=["health"])

# These will be set by app.py
_health_checker = None
_file_logger = None
_started = time.time()


def init(health_checker, file_logger):
    """Initialize with health checker and audit logger references."""
    global _health_checker, _file_logger, _started
    _health_checker = health_checker
    _file_logger = file_logger
    _started = time.time()


@router.get("/health")
async def health():
    """Health check with component status."""
    report = await _health_checker.check()
    status_code = 200 if report.status != Status.FAIL else 503
    return JSONResponse(content=report.to_dict(), status_code=status_code)


@router.get("/heartbeat")
async def heartbeat():
    """Lightweight heartbeat for frequent polling."""
    return {
        "status": "ok",
        "timestamp": format_timestamp(),
        "uptime_s": round(time.time() - _started, 1),
        "audit_log": _file_logger.get_stats(),
        "uid_format": {
            "epoch": EPOCH,
            "length": UID_LENGTH,
            "time_chars": UID_TIME_CHARS,
            "random_chars": UID_RANDOM_CHARS,
        },
    }
