from __future__ import annotations

"""
NEAR JSON-RPC Client.

Runs read-only contract methods through the `query` RPC endpoint with the
`call_function` request type. Arguments travel base64-encoded and results
come back as a JSON document serialized into a byte array.
"""

import base64
import itertools
import json
import logging
from typing import Any, Dict, Optional

import requests

from near_socialdb.domain.errors import TransportError
from near_socialdb.infra.network.common import DEFAULT_FINALITY, DEFAULT_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


class JsonRpcClient:
    """
    Minimal JSON-RPC 2.0 client for a NEAR RPC node.

    Args:
        rpc_url: Endpoint of the RPC node.
        timeout: Per-request timeout in seconds.
        session: Optional shared requests session.
    """

    def __init__(
            self,
            rpc_url: str,
            timeout: float = DEFAULT_TIMEOUT,
            session: Optional[requests.Session] = None,
    ) -> None:
        self.rpc_url = rpc_url
        self.timeout = timeout
        self._session = session
        self._ids = itertools.count(1)

    def call_function(
            self,
            contract_name: str,
            method_name: str,
            args: Dict[str, Any],
            finality: str = DEFAULT_FINALITY,
    ) -> Any:
        """
        Run a view method and decode its JSON result.

        Raises:
            TransportError: On HTTP failures, RPC errors or undecodable results.
        """
        args_base64 = base64.b64encode(
            json.dumps(args, separators=(",", ":")).encode("utf-8")
        ).decode("ascii")

        result = self.request("query", {
            "request_type": "call_function",
            "finality": finality,
            "account_id": contract_name,
            "method_name": method_name,
            "args_base64": args_base64,
        })

        if not isinstance(result, dict) or "result" not in result:
            message = result.get("error") if isinstance(result, dict) else None
            raise TransportError(
                f"View call {contract_name}.{method_name} failed: {message or 'malformed result'}"
            )

        try:
            raw = bytes(result["result"])
            return json.loads(raw.decode("utf-8")) if raw else None
        except (TypeError, ValueError) as e:
            raise TransportError(
                f"View call {contract_name}.{method_name} returned undecodable data: {e}"
            ) from e

    def request(self, method: str, params: Any) -> Any:
        """Send one JSON-RPC request and return its `result` member."""
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        headers = {"User-Agent": USER_AGENT}
        logger.debug(f"Network: RPC '{method}' -> {self.rpc_url}")

        try:
            poster = self._session.post if self._session is not None else requests.post
            response = poster(self.rpc_url, json=payload, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
        except requests.exceptions.Timeout as e:
            logger.warning(f"Network: RPC '{method}' timed out after {self.timeout}s.")
            raise TransportError(f"RPC request timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Network: Communication error during RPC '{method}': {e}")
            raise TransportError(f"RPC communication error: {e}") from e
        except ValueError as e:
            raise TransportError(f"RPC node returned a non-JSON response: {e}") from e

        if not isinstance(body, dict):
            raise TransportError("RPC node returned a malformed response")

        if body.get("error"):
            error = body["error"]
            detail = error.get("data") or error.get("message") if isinstance(error, dict) else error
            logger.error(f"Network: RPC '{method}' rejected: {detail}")
            raise TransportError(f"RPC error: {detail}")

        return body.get("result")
