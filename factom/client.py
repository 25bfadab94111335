"""
Transport client for the factomd and factom-walletd JSON-RPC APIs.

A ``Factom`` handle is an immutable pair of base URIs. Each call opens its own
HTTP client, POSTs one envelope and hands the body to the codec.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Coroutine, TypeVar

import httpx
from loguru import logger

from factom.config.schema import FactomSettings
from factom.envelope import ApiResponse, Envelope, decode, encode
from factom.errors import TransportError

WALLET_URI = "http://localhost:8088/v2"
FACTOMD_URI = "http://localhost:8089/v2"
WALLET_PORT = 8088
FACTOMD_PORT = 8089
API_VERSION = 2

HEADERS = {"Content-Type": "application/json"}

T = TypeVar("T")


@dataclass(frozen=True)
class Factom:
    """Handle holding the node daemon (``uri``) and wallet daemon (``wallet_uri``) endpoints."""

    uri: str = FACTOMD_URI
    wallet_uri: str = WALLET_URI
    timeout: float | None = None
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False, compare=False)

    @classmethod
    def new(cls) -> "Factom":
        return cls()

    @classmethod
    def from_host(cls, host: str) -> "Factom":
        """Both daemons on ``host`` at their default ports, over http."""
        return cls(
            uri=f"http://{host}:{FACTOMD_PORT}/v{API_VERSION}",
            wallet_uri=f"http://{host}:{WALLET_PORT}/v{API_VERSION}",
        )

    @classmethod
    def from_https_host(cls, host: str) -> "Factom":
        """Both daemons on ``host`` at their default ports, over https."""
        return cls(
            uri=f"https://{host}:{FACTOMD_PORT}/v{API_VERSION}",
            wallet_uri=f"https://{host}:{WALLET_PORT}/v{API_VERSION}",
        )

    @classmethod
    def from_config(cls, settings: FactomSettings | None = None) -> "Factom":
        settings = settings or FactomSettings()
        return cls(
            uri=settings.resolve_factomd_uri(),
            wallet_uri=settings.resolve_walletd_uri(),
            timeout=settings.timeout,
        )


async def send(
    base_uri: str,
    body: bytes,
    *,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bytes:
    """POST ``body`` to ``base_uri`` and return the raw response body.

    The HTTP status is not inspected; the daemons answer errors with a
    JSON-RPC error envelope.
    """
    try:
        url = httpx.URL(base_uri)
    except httpx.InvalidURL as exc:
        raise TransportError(f"Unable to parse URI: {base_uri}", uri=base_uri) from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise TransportError(f"Unable to parse URI: {base_uri}", uri=base_uri)

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            resp = await client.post(url, content=body, headers=HEADERS)
            return resp.content
    except httpx.HTTPError as exc:
        logger.warning(f"Factom request to {base_uri} failed: {exc}")
        raise TransportError(f"Request to {base_uri} failed: {exc}", uri=base_uri) from exc


async def _call(api: Factom, uri: str, method: str, params: dict[str, Any] | None) -> Envelope:
    body = encode(method, params)
    logger.debug(f"Factom call {method} -> {uri}")
    raw = await send(uri, body, timeout=api.timeout, transport=api.transport)
    return decode(raw)


async def factomd_call(api: Factom, method: str, params: dict[str, Any] | None = None) -> Envelope:
    """Call ``method`` on the node daemon."""
    return await _call(api, api.uri, method, params)


async def walletd_call(api: Factom, method: str, params: dict[str, Any] | None = None) -> Envelope:
    """Call ``method`` on the wallet daemon."""
    return await _call(api, api.wallet_uri, method, params)


def parse(envelope: Envelope, result_type: Any) -> ApiResponse[Any]:
    """Decode the envelope's result into ``result_type``."""
    response = envelope.into(result_type)
    if response.is_err():
        logger.debug(f"Factom daemon returned error {response.error.code}: {response.error.message}")
    return response


def fetch(coro: Coroutine[Any, Any, T]) -> T:
    """Run a call to completion, blocking until it returns."""
    return asyncio.run(coro)
