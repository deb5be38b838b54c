"""Unit tests for the JSON-RPC client."""

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from solders.hash import Hash
from solders.pubkey import Pubkey

from solana_txparse.errors import KnownTransactionError, TransactionErrorType
from solana_txparse.rpc import RpcClient, parse_signature_error
from solana_txparse.utils.config import SolanaSettings
from solana_txparse.utils.error_handling import RPCError, ValidationError

RPC_URL = "http://localhost:8899"


def rpc_response(result=None, error=None, status_code=200):
    """Create a mock HTTP response carrying a JSON-RPC body."""
    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    body = {"jsonrpc": "2.0", "id": 1}
    if error is not None:
        body["error"] = error
    else:
        body["result"] = result
    response.json.return_value = body
    return response


def signature_page(*signatures):
    return [{"signature": signature, "slot": 1, "err": None} for signature in signatures]


@pytest.fixture
def http_client():
    return AsyncMock(spec=httpx.AsyncClient)


@pytest.fixture
def client(http_client):
    settings = SolanaSettings(RPC_URL=RPC_URL, MAX_RETRIES=2, RETRY_DELAY=0.0)
    return RpcClient(settings=settings, http_client=http_client)


def sent_params(http_client, call=0):
    return http_client.post.call_args_list[call].kwargs["json"]["params"]


@pytest.mark.asyncio
async def test_get_signatures_for_address(client, http_client):
    address = Pubkey.new_unique()
    http_client.post.return_value = rpc_response(signature_page("a", "b"))

    result = await client.get_signatures_for_address(address, limit=2, before="z")

    assert [entry["signature"] for entry in result] == ["a", "b"]
    payload = http_client.post.call_args.kwargs["json"]
    assert payload["method"] == "getSignaturesForAddress"
    assert payload["params"] == [str(address), {"commitment": "finalized", "limit": 2, "before": "z"}]
    assert http_client.post.call_args.args[0] == RPC_URL


@pytest.mark.asyncio
async def test_get_all_signatures_pages_backwards(client, http_client):
    http_client.post.side_effect = [
        rpc_response(signature_page("s1", "s2")),
        rpc_response(signature_page("s3", "s4")),
        rpc_response(signature_page("s5")),
    ]

    result = await client.get_all_signatures_for_address(
        Pubkey.new_unique(), until="s9", per_request_limit=2, commitment="confirmed"
    )

    assert [entry["signature"] for entry in result] == ["s1", "s2", "s3", "s4", "s5"]
    assert "before" not in sent_params(http_client, 0)[1]
    assert sent_params(http_client, 1)[1]["before"] == "s2"
    assert sent_params(http_client, 2)[1] == {
        "commitment": "confirmed", "limit": 2, "before": "s4", "until": "s9"
    }


@pytest.mark.asyncio
async def test_get_all_signatures_stops_on_empty_page(client, http_client):
    http_client.post.side_effect = [rpc_response(signature_page("s1", "s2")), rpc_response([])]

    result = await client.get_all_signatures_for_address(Pubkey.new_unique(), per_request_limit=2)

    assert len(result) == 2
    assert http_client.post.call_count == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("kwargs", [
    {"commitment": "processed"},
    {"commitment": "max"},
    {"per_request_limit": 1001},
    {"per_request_limit": -5},
    {"per_request_limit": 0},
])
async def test_get_all_signatures_rejects_options(client, http_client, kwargs):
    with pytest.raises(ValidationError):
        await client.get_all_signatures_for_address(Pubkey.new_unique(), **kwargs)

    http_client.post.assert_not_called()


@pytest.mark.asyncio
async def test_is_blockhash_valid(client, http_client):
    blockhash = Hash.new_unique()
    http_client.post.return_value = rpc_response({"context": {"slot": 10}, "value": False})

    assert await client.is_blockhash_valid(blockhash, commitment="processed", min_context_slot=5) is False
    assert sent_params(http_client) == [str(blockhash), {"commitment": "processed", "minContextSlot": 5}]


@pytest.mark.asyncio
async def test_retries_retriable_status(client, http_client):
    http_client.post.side_effect = [
        rpc_response(status_code=503),
        rpc_response({"context": {"slot": 1}, "value": True}),
    ]

    assert await client.is_blockhash_valid(Hash.new_unique()) is True
    assert http_client.post.call_count == 2


@pytest.mark.asyncio
async def test_retries_rate_limit(client, http_client):
    http_client.post.side_effect = [
        rpc_response(error={"code": -32005, "message": "Node is behind"}),
        rpc_response(signature_page()),
    ]

    assert await client.get_signatures_for_address(Pubkey.new_unique()) == []
    assert http_client.post.call_count == 2


@pytest.mark.asyncio
async def test_retries_transport_errors_then_fails(client, http_client):
    http_client.post.side_effect = httpx.ConnectError("connection refused")

    with pytest.raises(RPCError) as exc_info:
        await client.get_signatures_for_address(Pubkey.new_unique())

    assert http_client.post.call_count == 3
    assert exc_info.value.details["endpoint"] == RPC_URL


@pytest.mark.asyncio
async def test_rpc_error_is_raised(client, http_client):
    http_client.post.return_value = rpc_response(
        error={"code": -32602, "message": "Invalid params", "data": {"field": "limit"}}
    )

    with pytest.raises(RPCError) as exc_info:
        await client.get_signatures_for_address(Pubkey.new_unique())

    error = exc_info.value
    assert error.details["rpc_error_code"] == -32602
    assert "Invalid params" in error.message
    assert http_client.post.call_count == 1


@pytest.mark.asyncio
async def test_http_error_is_raised(client, http_client):
    http_client.post.return_value = rpc_response(status_code=404)

    with pytest.raises(RPCError) as exc_info:
        await client.get_signatures_for_address(Pubkey.new_unique())

    assert exc_info.value.details["status_code"] == 404


@pytest.mark.asyncio
async def test_invalid_json(client, http_client):
    response = rpc_response()
    response.json.side_effect = json.JSONDecodeError("Expecting value", "", 0)
    http_client.post.return_value = response

    with pytest.raises(RPCError):
        await client.get_signatures_for_address(Pubkey.new_unique())


@pytest.mark.asyncio
async def test_close_releases_http_client(client, http_client):
    async with client:
        pass

    http_client.aclose.assert_awaited_once()


def test_parse_signature_error():
    assert parse_signature_error({"signature": "a", "err": None}) is None

    error = parse_signature_error({"signature": "b", "err": "BlockhashNotFound"})

    assert error.cause == KnownTransactionError(TransactionErrorType.BLOCKHASH_NOT_FOUND)
