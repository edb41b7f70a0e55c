"""Pytest fixtures for all tests."""

import base64
from datetime import datetime, timezone

import pytest
from httpx import AsyncClient, ASGITransport

from config import ApiConfig, Config, LoggingConfig
from entity.cell import Cell
from entity.photo import Photo
from entity.store import MemoryStore
from rnd import EPOCH
from ui.app import create_app


class FixedSource:
    """Deterministic random source returning the same byte pattern."""

    def __init__(self, pattern=b"\x00"):
        self.pattern = pattern
        self.calls = 0

    def __call__(self, size):
        self.calls += 1
        return (self.pattern * size)[:size]


class FixedClock:
    """Clock returning a settable unix time."""

    def __init__(self, now=EPOCH):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def zero_source():
    return FixedSource(b"\x00")


@pytest.fixture
def clock():
    return FixedClock(EPOCH + 1_000_000)


@pytest.fixture
def taken_at():
    return datetime(2019, 7, 14, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def berlin():
    """Create a test location."""
    return Cell(id="s2:47a85a", name="Brandenburger Tor", street="Pariser Platz",
                district="Mitte", city="Berlin", state="Berlin", country="de")


@pytest.fixture
def photo(taken_at):
    """Create a test photo without location, people or labels."""
    return Photo("20190714_123000_7F3A9C21.jpg", taken_at=taken_at)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def app_config(tmp_path):
    """Create test config writing logs to a temp dir."""
    return Config(
        logging=LoggingConfig(level="ERROR", file=str(tmp_path / "audit.log"), crash_file=str(tmp_path / "crash.log")),
        api=ApiConfig(token_size=8, max_batch=5, username="admin", password="secret"),
    )


@pytest.fixture
async def app(app_config):
    """Create test FastAPI app."""
    return create_app(app_config)


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_header():
    credentials = base64.b64encode(b"admin:secret").decode()
    return {"Authorization": f"Basic {credentials}"}
