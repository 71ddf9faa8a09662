"""Shared fixtures: a stand-in for aiohttp.ClientSession."""

from dataclasses import dataclass, field
from typing import Any

import pytest

from pwcheck.config import CheckerConfig
from pwcheck.hibp.client import PwnedPasswordsClient


class FakeResponse:
    def __init__(self, status: int = 200, body: str | bytes = "", headers: dict | None = None):
        self.status = status
        self._body = body.encode("utf-8") if isinstance(body, str) else body
        self.headers = headers or {}

    async def read(self) -> bytes:
        return self._body


class _RequestContext:
    def __init__(self, outcome: FakeResponse | BaseException):
        self._outcome = outcome

    async def __aenter__(self) -> FakeResponse:
        if isinstance(self._outcome, BaseException):
            raise self._outcome
        return self._outcome

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        return None


@dataclass
class FakeSession:
    """Replays one canned response (or exception) per request."""

    outcomes: list[Any] = field(default_factory=list)
    calls: list[dict[str, Any]] = field(default_factory=list)
    closed: bool = False

    def request(self, method: str, url: str, **kwargs: Any) -> _RequestContext:
        self.calls.append({"method": method, "url": url, **kwargs})
        return _RequestContext(self.outcomes.pop(0))

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def config() -> CheckerConfig:
    return CheckerConfig(api_url="https://pwned.test", timeout=10.0, user_agent="pwcheck-tests")


@pytest.fixture
def make_client(config):
    """Build a client whose session returns the given outcomes in order."""
    def _make(*outcomes: Any) -> tuple[PwnedPasswordsClient, FakeSession]:
        session = FakeSession(outcomes=list(outcomes))
        client = PwnedPasswordsClient(config)
        client._session = session
        return client, session

    return _make
