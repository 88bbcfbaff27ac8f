from __future__ import annotations

"""
Storage and Write Plan Data Models.

Defines the immutable records exchanged between the estimation services and
the client facade: the account storage allowance reported by the contract
and the fully prepared write that results from diffing and costing a request.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from near_socialdb.domain.tree_models import Tree


@dataclass(frozen=True)
class StorageView:
    """
    Ledger storage allowance of an account.

    Attributes:
        used_bytes: Bytes already consumed by the account's data.
        available_bytes: Bytes paid for but not yet used.
    """
    used_bytes: int = 0
    available_bytes: int = 0

    @classmethod
    def from_response(cls, response: Any) -> Optional["StorageView"]:
        """
        Build a view from a `get_account_storage` response.

        Returns None when the contract has no storage record for the account.
        """
        if not response:
            return None
        return cls(
            used_bytes=int(response.get("used_bytes") or 0),
            available_bytes=int(response.get("available_bytes") or 0),
        )


@dataclass(frozen=True)
class WritePlan:
    """
    Result of preparing a write: what would be sent and what it costs.

    Attributes:
        account_id: Account being written.
        data: Minimal tree of changed leaves, or None when nothing changed.
        current: Remote data that overlapped the request at preparation time.
        estimated_bytes: Signed change in storage footprint.
        deposit: Attached deposit in yoctoNEAR.
        gas: Gas allowance for the `set` call.
        storage: Storage allowance of the account, None on first write.
    """
    account_id: str
    data: Optional[Dict[str, Tree]]
    current: Any
    estimated_bytes: int
    deposit: int
    gas: int
    storage: Optional[StorageView] = None

    @property
    def is_noop(self) -> bool:
        return self.data is None

    def to_call_args(self) -> Dict[str, Any]:
        return {"data": self.data}

    def summary(self) -> Dict[str, Any]:
        """Render the plan with amounts as decimal strings (JSON friendly)."""
        return {
            "account_id": self.account_id,
            "data": self.data,
            "estimated_bytes": self.estimated_bytes,
            "deposit": str(self.deposit),
            "gas": str(self.gas),
            "first_write": self.storage is None,
        }
