import asyncio
import dataclasses

import httpx
import pytest

import factom.client as client_module
from factom import Factom, FactomError, TransportError, factomd_call, fetch, send, walletd_call
from factom.api import chain, wallet
from factom.config.schema import FactomSettings


def _with_transport(api: Factom, remote) -> Factom:
    return dataclasses.replace(api, transport=httpx.MockTransport(remote.handler))


def test_default_handle_points_at_localhost() -> None:
    api = Factom.new()
    assert api.uri == "http://localhost:8089/v2"
    assert api.wallet_uri == "http://localhost:8088/v2"
    assert api.timeout is None


def test_from_host_uses_default_ports() -> None:
    api = Factom.from_host("10.0.0.5")
    assert api.uri == "http://10.0.0.5:8089/v2"
    assert api.wallet_uri == "http://10.0.0.5:8088/v2"


def test_handle_is_immutable() -> None:
    api = Factom()
    with pytest.raises(dataclasses.FrozenInstanceError):
        api.uri = "http://elsewhere:8089/v2"


@pytest.mark.asyncio
async def test_https_host_routes_both_daemons(remote) -> None:
    api = _with_transport(Factom.from_https_host("node.example.com"), remote)

    await chain.heights(api)
    assert remote.last_url == "https://node.example.com:8089/v2"

    await wallet.wallet_height(api)
    assert remote.last_url == "https://node.example.com:8088/v2"


@pytest.mark.asyncio
async def test_request_is_json_post(api, remote) -> None:
    await factomd_call(api, "heights")
    request = remote.requests[-1]
    assert request.method == "POST"
    assert request.headers["content-type"] == "application/json"
    assert remote.last == {"jsonrpc": "2.0", "id": 0, "method": "heights", "params": {}}


@pytest.mark.asyncio
async def test_params_round_trip_through_echoing_remote(api, remote) -> None:
    remote.echo_params()
    params = {
        "hash": "6ecd7c6c40d0e9dbb52457343e083d4306c5b4cd2d6e623ba67cf9d18b39faa7",
        "range": {"start": 1, "end": 2},
        "addresses": ["FA2jK2HcLnRdS94dEcU27rF3meoJfpUcZPSinpb7AwQvPRY6RL1Q"],
        "force": False,
    }
    envelope = await factomd_call(api, "anything", params)
    assert envelope.result == params
    envelope = await walletd_call(api, "anything", params)
    assert envelope.result == params


@pytest.mark.asyncio
@pytest.mark.parametrize("daemon", ["factomd", "walletd"])
async def test_connection_refused_raises_transport_error_without_decoding(monkeypatch, daemon) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    def must_not_decode(body: bytes):
        raise AssertionError("decode called after transport failure")

    monkeypatch.setattr(client_module, "decode", must_not_decode)
    api = Factom(transport=httpx.MockTransport(refuse))
    rpc = factomd_call if daemon == "factomd" else walletd_call

    with pytest.raises(TransportError) as exc_info:
        await rpc(api, "properties")
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert exc_info.value.uri == (api.uri if daemon == "factomd" else api.wallet_uri)
    assert exc_info.value.code == "TRANSPORT_ERROR"


@pytest.mark.asyncio
@pytest.mark.parametrize("uri", ["not a uri", "ftp://localhost:8089/v2", "http://", ""])
async def test_unparseable_uri_is_transport_error(remote, uri) -> None:
    api = Factom(uri=uri, transport=httpx.MockTransport(remote.handler))
    with pytest.raises(TransportError):
        await chain.properties(api)
    assert remote.requests == []


@pytest.mark.asyncio
async def test_http_status_is_not_inspected(api, remote) -> None:
    remote.status_code = 500
    remote.respond_error(-32603, "Internal error")
    response = await chain.heights(api)
    assert response.is_err()
    assert response.error.message == "Internal error"


@pytest.mark.asyncio
async def test_send_returns_raw_body(remote) -> None:
    remote.respond_result({"a": 1})
    body = await send("http://localhost:8089/v2", b"{}", transport=httpx.MockTransport(remote.handler))
    assert b'"result"' in body


@pytest.mark.asyncio
async def test_concurrent_calls_share_one_handle(api, remote) -> None:
    remote.echo_params()
    results = await asyncio.gather(*(factomd_call(api, "entry", {"hash": str(i)}) for i in range(5)))
    assert sorted(envelope.result["hash"] for envelope in results) == ["0", "1", "2", "3", "4"]
    assert len(remote.requests) == 5


def test_from_config_prefers_explicit_uris() -> None:
    settings = FactomSettings(
        host="node.example.com",
        https=True,
        walletd_uri="http://127.0.0.1:9999/v2",
        timeout=3.5,
    )
    api = Factom.from_config(settings)
    assert api.uri == "https://node.example.com:8089/v2"
    assert api.wallet_uri == "http://127.0.0.1:9999/v2"
    assert api.timeout == 3.5


def test_fetch_runs_call_synchronously(api, remote) -> None:
    remote.respond_result({"factomdversion": "6.9.0", "factomdapiversion": "2.0"})
    response = fetch(chain.properties(api))
    assert response.result.factomdversion == "6.9.0"


def test_transport_error_is_factom_error() -> None:
    exc = TransportError("boom", uri="http://x")
    assert isinstance(exc, FactomError)
    assert exc.to_dict() == {"error": "TRANSPORT_ERROR", "message": "boom", "details": {"uri": "http://x"}}
