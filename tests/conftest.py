"""Shared test fixtures for apiwrap.

Provides fixtures for isolated config environments, output state, mock
HTTP transports, and running CLI commands. They are discovered by pytest
and available to all test modules without explicit imports.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from apiwrap.models import AuthConfig, RequestConfig, VendorProfile
from apiwrap.output import OutputFormat, OutputManager, reset_output, set_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When Typer's CliRunner redirects those streams during
    a test, the cached references become stale once the test finishes.
    """
    yield
    reset_output()


@pytest.fixture(autouse=True)
def _no_backoff(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Make retry backoff instant; the requested delays are recorded."""
    delays: list[float] = []

    async def _sleep(delay: float) -> None:
        delays.append(delay)

    monkeypatch.setattr("apiwrap.client.async_client.asyncio.sleep", _sleep)
    return delays


# ---------------------------------------------------------------------------
# Profiles and transports
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_profile() -> VendorProfile:
    """A bearer-token profile pointing at a fake API host."""
    return VendorProfile(
        name="test-api",
        base_url="https://api.example.com",
        auth=AuthConfig(type="bearer", source="env:TEST_API_TOKEN"),
        request=RequestConfig(timeout=5, max_retries=2),
    )


def _json_response(data: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code=status_code,
        headers={"content-type": "application/json"},
        content=json.dumps(data).encode(),
    )


@pytest.fixture
def json_response() -> Callable[..., httpx.Response]:
    """Build an httpx.Response with a JSON body: ``json_response(data, status)``."""
    return _json_response


class RecordingTransport(httpx.MockTransport):
    """MockTransport that also keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    return RecordingTransport


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Sets XDG_CONFIG_HOME and XDG_DATA_HOME to subdirectories of tmp_path
    and clears vendor environment variables so tests never touch real
    user config or credentials.
    """
    monkeypatch.setattr("apiwrap.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    for var in [
        "RIPPLING_API_TOKEN",
        "RIPPLING_BASE_URL",
        "REMOTE_API_TOKEN",
        "REMOTE_BASE_URL",
        "VERCEL_API_TOKEN",
        "VERCEL_BASE_URL",
        "DISCOURSE_API_KEY",
        "DISCOURSE_API_USERNAME",
        "DISCOURSE_BASE_URL",
        "COMMONROOM_API_TOKEN",
        "COMMONROOM_BASE_URL",
    ]:
        monkeypatch.delenv(var, raising=False)

    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a PLAIN-format, quiet OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, quiet=True)
    set_output(output)
    yield output
    reset_output()


@pytest.fixture
def cli_runner(isolated_config: Path):
    """Typer CLI test runner capturing stdout/stderr, reading an isolated config."""
    from typer.testing import CliRunner

    return CliRunner()
