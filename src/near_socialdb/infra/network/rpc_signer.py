from __future__ import annotations

"""
RPC-backed Signer.

Implements the Signer contract on top of a JSON-RPC node. Views go straight
to the node. Signing is outside the scope of this package, so function calls
are forwarded to an optional `submitter` callable (for example a wallet or
key-store integration) and fail when none is configured.
"""

import logging
from typing import Any, Callable, Dict, Optional

from near_socialdb.domain.errors import TransportError
from near_socialdb.infra.network.rpc_client import JsonRpcClient
from near_socialdb.signer import Signer

logger = logging.getLogger(__name__)

Submitter = Callable[[str, str, Dict[str, Any], str, str], Any]


class RpcSigner(Signer):
    """
    Signer reading through a NEAR RPC node.

    Args:
        client: JSON-RPC client used for view calls.
        account_id: Account the caller acts as, None for anonymous reads.
        submitter: Callable receiving (contract, method, args, gas, deposit).
    """

    def __init__(
            self,
            client: JsonRpcClient,
            account_id: Optional[str] = None,
            submitter: Optional[Submitter] = None,
    ) -> None:
        self._client = client
        self._account_id = account_id
        self._submitter = submitter

    def get_account_id(self) -> Optional[str]:
        return self._account_id

    def view(self, contract_name: str, method_name: str, args: Dict[str, Any]) -> Any:
        return self._client.call_function(contract_name, method_name, args)

    def call(
            self,
            contract_name: str,
            method_name: str,
            args: Dict[str, Any],
            gas: str,
            deposit: str,
    ) -> Any:
        if self._submitter is None:
            raise TransportError(
                f"No transaction submitter configured for {contract_name}.{method_name}"
            )
        logger.debug(f"Network: Submitting {contract_name}.{method_name} (gas {gas}, deposit {deposit}).")
        return self._submitter(contract_name, method_name, args, gas, deposit)
