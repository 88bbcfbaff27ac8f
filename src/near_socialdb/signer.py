from __future__ import annotations

"""
Signer Collaborator Contract.

The client never talks to the network or signs transactions itself. It
delegates identity resolution, view calls and function calls to a Signer
supplied at construction time.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class Signer(ABC):
    """Capability interface consumed by SocialDb."""

    @abstractmethod
    def get_account_id(self) -> Optional[str]:
        """Return the authenticated account, or None when signed out."""

    @abstractmethod
    def view(self, contract_name: str, method_name: str, args: Dict[str, Any]) -> Any:
        """Run a read-only contract method and return its decoded result."""

    @abstractmethod
    def call(
            self,
            contract_name: str,
            method_name: str,
            args: Dict[str, Any],
            gas: str,
            deposit: str,
    ) -> Any:
        """
        Submit a state-changing contract call.

        Args:
            contract_name: Target contract account.
            method_name: Contract method.
            args: JSON arguments.
            gas: Gas allowance as a decimal integer string.
            deposit: Attached yoctoNEAR as a decimal integer string.
        """
