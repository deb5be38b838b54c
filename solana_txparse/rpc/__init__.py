"""JSON-RPC helpers."""

from solana_txparse.rpc.client import RpcClient, parse_signature_error
