"""Async JSON-RPC helpers for the transaction history endpoints.

Only what is needed to fetch signatures and their error payloads is
provided; the payloads are fed into the error taxonomy with
``parse_signature_error``.
"""

import asyncio
import json
from typing import Any, Dict, List, Optional

import httpx
from solders.hash import Hash
from solders.pubkey import Pubkey

from solana_txparse.errors.registry import CustomErrorResolverRegistry
from solana_txparse.errors.transaction_error import TransactionError, parse_transaction_error
from solana_txparse.logging_config import get_logger, log_with_context
from solana_txparse.utils.config import VALID_COMMITMENTS, SolanaSettings, get_solana_settings
from solana_txparse.utils.error_handling import RPCError, ValidationError, handle_errors

logger = get_logger(__name__)

# Node side cap of getSignaturesForAddress
MAX_SIGNATURES_PER_REQUEST = 1000

RETRIABLE_STATUS_CODES = {408, 429, 500, 502, 503, 504}
RATE_LIMIT_RPC_CODE = -32005
MAX_RETRY_DELAY = 10.0


class RpcClient:
    """Minimal async Solana JSON-RPC client."""

    def __init__(self, settings: Optional[SolanaSettings] = None, http_client: Optional[httpx.AsyncClient] = None):
        """Initialize the client.

        Args:
            settings: Connection settings. Defaults to environment-based settings.
            http_client: Shared ``httpx.AsyncClient``; one is created on first use
                if not given
        """
        self.settings = settings or get_solana_settings()
        self.headers = {"Content-Type": "application/json"}
        self._http_client = http_client
        self._request_id = 0

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close the client and release resources."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    def _backoff(self, attempt: int) -> float:
        return min(self.settings.RETRY_DELAY * (2 ** attempt), MAX_RETRY_DELAY)

    async def _make_request(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """Make a JSON-RPC request to the Solana node.

        Retriable HTTP statuses, transport errors and rate limiting are retried
        with exponential backoff up to ``MAX_RETRIES`` times.

        Args:
            method: The RPC method to call
            params: The parameters to pass to the method

        Returns:
            The ``result`` member of the JSON-RPC response

        Raises:
            RPCError: If the request fails or the node returns an error
        """
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.settings.REQUEST_TIMEOUT)

        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "id": self._request_id,
            "method": method,
            "params": params or [],
        }
        max_retries = self.settings.MAX_RETRIES
        endpoint = self.settings.RPC_URL

        for attempt in range(max_retries + 1):
            if attempt > 0:
                logger.info(f"Retry attempt {attempt}/{max_retries} for {method}")

            try:
                response = await self._http_client.post(endpoint, headers=self.headers, json=payload)
            except httpx.TransportError as e:
                if attempt < max_retries:
                    wait_time = self._backoff(attempt)
                    logger.warning(f"Request failed, retrying in {wait_time}s: {e}")
                    await asyncio.sleep(wait_time)
                    continue
                raise RPCError(f"{method} request failed: {e}", endpoint=endpoint) from e

            if response.status_code in RETRIABLE_STATUS_CODES and attempt < max_retries:
                wait_time = self._backoff(attempt)
                logger.warning(f"HTTP status {response.status_code}, retrying in {wait_time}s: {method}")
                await asyncio.sleep(wait_time)
                continue

            if response.status_code >= 400:
                raise RPCError(
                    f"{method} failed with HTTP status {response.status_code}",
                    status_code=response.status_code,
                    endpoint=endpoint
                )

            try:
                body = response.json()
            except json.JSONDecodeError as e:
                raise RPCError(f"{method} returned invalid JSON", endpoint=endpoint) from e

            if "error" in body:
                error = body["error"]
                code = error.get("code")
                message = f"Solana RPC error: {error.get('message', 'Unknown error')}"
                if "data" in error:
                    message += f" - {json.dumps(error['data'])}"

                if code == RATE_LIMIT_RPC_CODE and attempt < max_retries:
                    wait_time = self._backoff(attempt)
                    logger.warning(f"Rate limited, retrying in {wait_time}s: {method}")
                    await asyncio.sleep(wait_time)
                    continue

                raise RPCError(message, rpc_error_code=code, endpoint=endpoint)

            return body["result"]

        raise RPCError(f"{method} failed after {max_retries} retries", endpoint=endpoint)

    @handle_errors(logger_instance=logger)
    async def get_signatures_for_address(
        self,
        address: Pubkey,
        before: Optional[str] = None,
        until: Optional[str] = None,
        limit: Optional[int] = None,
        commitment: Optional[str] = None,
        min_context_slot: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """Get signatures of transactions involving an address, newest first.

        Args:
            address: The account address
            before: Signature to start searching backwards from
            until: Signature to search until
            limit: Maximum number of signatures to return (at most 1000)
            commitment: Commitment level, defaults to the configured one
            min_context_slot: Minimum slot the request can be evaluated at

        Returns:
            Signature entries (``signature``, ``slot``, ``err``, ``memo``, ``blockTime``)
        """
        options: Dict[str, Any] = {"commitment": commitment or self.settings.COMMITMENT}
        if limit is not None:
            options["limit"] = limit
        if before:
            options["before"] = before
        if until:
            options["until"] = until
        if min_context_slot is not None:
            options["minContextSlot"] = min_context_slot

        return await self._make_request("getSignaturesForAddress", [str(address), options])

    @handle_errors(logger_instance=logger)
    async def get_all_signatures_for_address(
        self,
        address: Pubkey,
        before: Optional[str] = None,
        until: Optional[str] = None,
        per_request_limit: Optional[int] = None,
        commitment: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Get every signature of an address within ``before``/``until``.

        Pages backwards from ``before``, each page starting before the last
        signature of the previous one, until a page comes back short.

        Args:
            address: The account address
            before: Signature to start searching backwards from
            until: Signature to search until
            per_request_limit: Page size, defaults to the configured one
            commitment: "confirmed" or "finalized" (default); "processed"
                is not supported by the node for this method

        Raises:
            ValidationError: If the page size or commitment is not supported
        """
        limit = per_request_limit
        if limit is None:
            limit = self.settings.SIGNATURES_PER_REQUEST
        if not 0 < limit <= MAX_SIGNATURES_PER_REQUEST:
            raise ValidationError(
                f"per request limit must be between 1 and {MAX_SIGNATURES_PER_REQUEST}",
                {"per_request_limit": limit}
            )
        commitment = commitment or "finalized"
        if commitment not in VALID_COMMITMENTS or commitment == "processed":
            raise ValidationError(
                f"unsupported commitment for getSignaturesForAddress: {commitment}",
                {"commitment": commitment}
            )

        signatures: List[Dict[str, Any]] = []
        while True:
            page = await self.get_signatures_for_address(
                address, before=before, until=until, limit=limit, commitment=commitment
            )
            signatures.extend(page)
            if len(page) < limit:
                break
            before = page[-1]["signature"]

        log_with_context(logger, "debug", "Fetched signatures", address=str(address), count=len(signatures))
        return signatures

    @handle_errors(logger_instance=logger)
    async def is_blockhash_valid(
        self,
        blockhash: Hash,
        commitment: Optional[str] = None,
        min_context_slot: Optional[int] = None
    ) -> bool:
        """Check whether a blockhash can still be used in a transaction.

        Args:
            blockhash: Blockhash to check
            commitment: Commitment level, defaults to the configured one
            min_context_slot: Minimum slot the request can be evaluated at

        Returns:
            True if the blockhash is still valid
        """
        options: Dict[str, Any] = {"commitment": commitment or self.settings.COMMITMENT}
        if min_context_slot is not None:
            options["minContextSlot"] = min_context_slot

        result = await self._make_request("isBlockhashValid", [str(blockhash), options])
        return bool(result["value"])


def parse_signature_error(
    entry: Dict[str, Any],
    transaction: Any = None,
    registry: Optional[CustomErrorResolverRegistry] = None
) -> Optional[TransactionError]:
    """Parse the ``err`` member of a signature entry.

    Args:
        entry: One entry of ``getSignaturesForAddress``
        transaction: The entry's transaction, to resolve custom error codes
        registry: Custom error resolvers, defaults to the process-wide registry

    Returns:
        The parsed error, or None if the transaction succeeded or the error
        is not understood
    """
    raw = entry.get("err")
    if raw is None:
        return None
    return parse_transaction_error(transaction, raw, registry)
