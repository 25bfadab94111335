"""Pytest hooks and fixtures."""

import json
import os
from typing import Any, Callable

import httpx
import pytest

from factom import Factom
from factom.config.schema import FactomSettings


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line(
        "markers",
        "requires_daemon: talks to a running factomd/factom-walletd (skipped in CI)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip requires_daemon tests unless FACTOM_LIVE=1 (never in CI)."""
    if os.environ.get("FACTOM_LIVE") == "1" and os.environ.get("CI") != "true":
        return
    skip = pytest.mark.skip(reason="Requires running Factom daemons (set FACTOM_LIVE=1)")
    for item in items:
        if "requires_daemon" in item.keywords:
            item.add_marker(skip)


def ok(result: Any) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": 0, "result": result}


def err(code: int, message: str) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": 0, "error": {"code": code, "message": message}}


class StubRemote:
    """Stands in for both daemons: records each request and answers from ``reply``."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.reply: Callable[[dict[str, Any]], Any] = lambda payload: ok({})
        self.status_code = 200

    def respond(self, body: Any) -> None:
        self.reply = lambda payload: body

    def respond_result(self, result: Any) -> None:
        self.respond(ok(result))

    def respond_error(self, code: int, message: str) -> None:
        self.respond(err(code, message))

    def echo_params(self) -> None:
        self.reply = lambda payload: ok(payload["params"])

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        payload = json.loads(request.content)
        return httpx.Response(self.status_code, json=self.reply(payload))

    @property
    def last(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)

    @property
    def last_url(self) -> str:
        return str(self.requests[-1].url)


@pytest.fixture
def remote() -> StubRemote:
    return StubRemote()


@pytest.fixture
def api(remote: StubRemote) -> Factom:
    return Factom(transport=httpx.MockTransport(remote.handler))


@pytest.fixture
def clean_env(monkeypatch) -> None:
    """Drop FACTOM_* variables so settings come only from defaults and files."""
    for name in FactomSettings.model_fields:
        monkeypatch.delenv(f"FACTOM_{name.upper()}", raising=False)
