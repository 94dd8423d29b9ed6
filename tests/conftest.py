"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from ui.app import create_app
from config import Config, GeneratorConfig, LoggingConfig


@pytest.fixture
def fixed_random():
    """Deterministic random source returning a repeated byte."""
    def source(n):
        return b"\xab" * n
    return source


@pytest.fixture
def zero_random():
    """Random source returning only zero bytes."""
    def source(n):
        return bytes(n)
    return source


@pytest.fixture
def test_config(tmp_path):
    """Create test config with a small batch limit."""
    return Config(
        generator=GeneratorConfig(max_batch=5),
        logging=LoggingConfig(level="ERROR", crash_file=str(tmp_path / "crash.log")),
    )


@pytest.fixture
async def app(test_config):
    """Create test FastAPI app."""
    return create_app(test_config)


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
