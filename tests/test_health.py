"""Unit tests for health checks."""

import asyncio

import pytest

from conftest import FixedClock
from core.health import (
    CheckResult,
    HealthChecker,
    Status,
    check_event_loop,
    create_clock_check,
    create_entropy_check,
    create_logger_check,
)
from internal.logging import AsyncFileLogger
from rnd import EPOCH


def broken_source(size):
    raise OSError("no entropy")


class TestChecks:
    """Tests for individual checks."""

    @pytest.mark.asyncio
    async def test_event_loop(self):
        result = await check_event_loop()
        assert result.status == Status.OK

    @pytest.mark.asyncio
    async def test_entropy_ok(self):
        result = await create_entropy_check()()
        assert result.status == Status.OK

    @pytest.mark.asyncio
    async def test_clock_ok(self):
        result = await create_clock_check(FixedClock(EPOCH + 60))()
        assert result.status == Status.OK
        assert result.msg == "+60s"

    @pytest.mark.asyncio
    async def test_clock_wrapped(self):
        result = await create_clock_check(FixedClock(EPOCH + (1 << 32)))()
        assert result.status == Status.DEGRADED

    @pytest.mark.asyncio
    async def test_logger_stopped(self, tmp_path):
        logger = AsyncFileLogger(str(tmp_path / "audit.log"))
        result = await create_logger_check(logger)()
        assert result.status == Status.DEGRADED


class TestHealthChecker:
    """Tests for HealthChecker aggregation."""

    @pytest.mark.asyncio
    async def test_all_ok(self):
        checker = HealthChecker(ttl=0)
        checker.register("event_loop", check_event_loop)
        checker.register("entropy", create_entropy_check())
        report = await checker.check()
        assert report.status == Status.OK
        assert [check["name"] for check in report.to_dict()["checks"]] == ["loop", "entropy"]

    @pytest.mark.asyncio
    async def test_entropy_failure_is_critical(self):
        checker = HealthChecker(ttl=0)
        checker.register("entropy", create_entropy_check(broken_source), critical=True)
        report = await checker.check()
        assert report.status == Status.FAIL
        assert "no entropy" in report.checks[0].msg

    @pytest.mark.asyncio
    async def test_clock_before_epoch_fails(self):
        checker = HealthChecker(ttl=0)
        checker.register("clock", create_clock_check(FixedClock(EPOCH - 10)))
        report = await checker.check()
        assert report.status == Status.FAIL

    @pytest.mark.asyncio
    async def test_non_critical_degrades(self):
        async def degraded():
            return CheckResult("log", Status.DEGRADED, "full")

        checker = HealthChecker(ttl=0)
        checker.register("event_loop", check_event_loop)
        checker.register("log", degraded, critical=False)
        report = await checker.check()
        assert report.status == Status.DEGRADED

    @pytest.mark.asyncio
    async def test_timeout(self):
        async def slow():
            await asyncio.sleep(1)

        checker = HealthChecker(ttl=0, timeout=0.01)
        checker.register("slow", slow)
        report = await checker.check()
        assert report.status == Status.FAIL
        assert report.checks[0].msg == "timeout"

    @pytest.mark.asyncio
    async def test_cached(self):
        calls = []

        async def counted():
            calls.append(1)
            return CheckResult("counted", Status.OK)

        checker = HealthChecker(ttl=60)
        checker.register("counted", counted)
        first = await checker.check()
        second = await checker.check()
        assert first is second
        assert len(calls) == 1
