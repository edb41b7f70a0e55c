import asyncio
import time
from enum import Enum

from core.errors import EntropySourceError, HealthCheckError
from rnd import EPOCH, generate_token
from utils.timestamp import format_timestamp, unix_seconds


class Status(Enum):
    OK = "healthy"
    DEGRADED = "degraded"
    FAIL = "unhealthy"


class CheckResult:
    __slots__ = ("name", "status", "msg")

    def __init__(self, name, status, msg=""):
        self.name = name
        self.status = status
        self.msg = msg

    def to_dict(self):
        return {"name": self.name,
                "status": self.status.value,
                "msg": self.msg}


class HealthReport:
    __slots__ = ("status", "checks", "uptime", "timestamp")

    def __init__(self, status, checks, uptime=0):
        self.status = status
        self.checks = checks
        self.uptime = uptime
        self.timestamp = format_timestamp()

    def to_dict(self):
        return {"status": self.status.value,
                "timestamp": self.timestamp,
                "uptime": round(self.uptime, 1),
                "checks": [check.to_dict() for check in self.checks]}


class HealthChecker:
    def __init__(self, ttl=1.0, timeout=5.0):
        self._checks = {}
        self._cache = None
        self._cache_time = 0
        self._ttl = ttl
        self._timeout = timeout
        self._start_time = time.time()

    def register(self, name, check_fn, critical=True):
        self._checks[name] = (check_fn, critical)

    async def check(self):
        now = time.time()
        if self._cache and now - self._cache_time < self._ttl:
            return self._cache

        results = []
        for name, (check_fn, is_critical) in self._checks.items():
            try:
                result = await asyncio.wait_for(check_fn(), timeout=self._timeout)
            except asyncio.TimeoutError:
                result = CheckResult(name, Status.FAIL, "timeout")
            except Exception as exc:
                result = CheckResult(name, Status.FAIL, str(exc))
            results.append((result, is_critical))

        status = Status.OK
        for result, is_critical in results:
            if result.status == Status.FAIL and is_critical:
                status = Status.FAIL
            elif result.status != Status.OK and status == Status.OK:
                status = Status.DEGRADED

        self._cache = HealthReport(status, [result for result, _ in results], now - self._start_time)
        self._cache_time = now
        return self._cache


# Checks
async def check_event_loop():
    await asyncio.sleep(0)
    return CheckResult("loop", Status.OK)


def create_entropy_check(source=None):
    """Draw a token; the service cannot issue ids without entropy."""
    async def check():
        try:
            generate_token(1, source)
        except EntropySourceError as exc:
            raise HealthCheckError(str(exc), component="entropy", cause=exc) from exc
        return CheckResult("entropy", Status.OK)
    return check


def create_clock_check(clock=None):
    """The uid time component only covers 2**32 seconds after EPOCH."""
    async def check():
        elapsed = unix_seconds(clock) - EPOCH
        if elapsed < 0:
            raise HealthCheckError(f"clock before epoch by {-elapsed}s", component="clock")
        if elapsed > 0xFFFFFFFF:
            return CheckResult("clock", Status.DEGRADED, "uid time wrapped")
        return CheckResult("clock", Status.OK, f"+{elapsed}s")
    return check


def create_logger_check(logger):
    async def check():
        queue_size, max_size = logger.queue.qsize(), logger.queue.maxsize

        if not logger.running:
            return CheckResult("log", Status.DEGRADED, "stopped")

        if queue_size / max_size > 0.9:
            return CheckResult("log", Status.DEGRADED, f"{queue_size}/{max_size}")

        return CheckResult("log", Status.OK)
    return check
