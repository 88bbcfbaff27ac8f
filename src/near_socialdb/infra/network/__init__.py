from __future__ import annotations

"""
Network Communication Infrastructure.

Exposes the JSON-RPC client and the RPC-backed signer.
"""

from near_socialdb.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT
from near_socialdb.infra.network.rpc_client import JsonRpcClient
from near_socialdb.infra.network.rpc_signer import RpcSigner, Submitter

__all__ = [
    "JsonRpcClient",
    "RpcSigner",
    "Submitter",
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
]
