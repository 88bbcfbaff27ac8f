from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An in-memory SocialDB store exposed through the Signer contract.
3. Isolation of the user data directory from the real home folder.
"""

import copy
import os
import sys
from typing import Any, Dict, List, Optional, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from near_socialdb.core.tree.utils import build_from_path, lookup  # noqa: E402
from near_socialdb.signer import Signer  # noqa: E402


# -----------------------------------------------------------------------------
# In-Memory Store
# -----------------------------------------------------------------------------
def deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> Dict[str, Any]:
    """Merge `source` into `target` recursively and return `target`."""
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            deep_merge(target[key], value)
        else:
            target[key] = copy.deepcopy(value)
    return target


class FakeSigner(Signer):
    """
    Signer backed by a nested dict emulating the SocialDB contract.

    Supports exact key paths and the '/**' subtree suffix for `get`.
    `keys` returns the canned `keys_response`. Every interaction is
    appended to `calls` as (operation, details).
    """

    def __init__(
            self,
            account_id: Optional[str] = "alice.near",
            data: Optional[Dict[str, Any]] = None,
            storage: Optional[Dict[str, Dict[str, int]]] = None,
    ) -> None:
        self.account_id = account_id
        self.data: Dict[str, Any] = data or {}
        self.storage: Dict[str, Dict[str, int]] = storage or {}
        self.keys_response: Any = {}
        self.calls: List[Tuple[str, Any]] = []
        self.writes: List[Dict[str, Any]] = []

    def get_account_id(self) -> Optional[str]:
        self.calls.append(("get_account_id", None))
        return self.account_id

    def view(self, contract_name: str, method_name: str, args: Dict[str, Any]) -> Any:
        self.calls.append(("view", (contract_name, method_name, copy.deepcopy(args))))
        if method_name == "get":
            return self._get(args["keys"])
        if method_name == "keys":
            return self.keys_response
        if method_name == "get_account_storage":
            return self.storage.get(args["account_id"])
        raise AssertionError(f"Unexpected view method {method_name}")

    def call(self, contract_name: str, method_name: str, args: Dict[str, Any], gas: str, deposit: str) -> Any:
        self.calls.append(("call", (contract_name, method_name, copy.deepcopy(args), gas, deposit)))
        self.writes.append({"args": copy.deepcopy(args), "gas": gas, "deposit": deposit})
        deep_merge(self.data, args["data"])
        return None

    def view_methods(self) -> List[str]:
        return [details[1] for op, details in self.calls if op == "view"]

    def _get(self, keys: List[str]) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key in keys:
            parts = key.split("/")
            if parts[-1] == "**":
                parts = parts[:-1]
            value = lookup(parts, self.data)
            if value is not None:
                deep_merge(result, build_from_path(parts, copy.deepcopy(value)))
        return result


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def fake_signer() -> FakeSigner:
    """Signer for 'alice.near' over an empty store without storage record."""
    return FakeSigner()


@pytest.fixture
def make_signer():
    """Factory building FakeSigner instances with custom state."""
    return FakeSigner


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch) -> str:
    """Point the user data directory at a temporary folder."""
    home = tmp_path / "near-socialdb-home"
    monkeypatch.setenv("NEAR_SOCIALDB_HOME", str(home))
    for name in ("NEAR_SOCIALDB_NETWORK", "NEAR_SOCIALDB_RPC_URL",
                 "NEAR_SOCIALDB_CONTRACT", "NEAR_SOCIALDB_ACCOUNT_ID"):
        monkeypatch.delenv(name, raising=False)
    return str(home)
