from __future__ import annotations

"""
SocialDB Client Facade.

Sequences the read-modify-write cycle against the SocialDB contract:
ownership checks, storage allowance lookup, fetching the data a write
overlaps, diffing, cost estimation and the final `set` call. Every call is
independent; the client keeps no state besides its signer and contract name.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from near_socialdb.core.services.deposit import calculate_deposit, format_amount
from near_socialdb.core.services.diff import diff
from near_socialdb.core.services.estimator import estimate_bytes
from near_socialdb.core.tree import utils as tree_utils
from near_socialdb.domain.constants import (
    METHOD_GET,
    METHOD_GET_ACCOUNT_STORAGE,
    METHOD_KEYS,
    METHOD_SET,
    SET_GAS,
)
from near_socialdb.domain.errors import AuthenticationError, AuthorizationError
from near_socialdb.domain.storage_models import StorageView, WritePlan
from near_socialdb.domain.tree_models import Path, validate_write_request
from near_socialdb.signer import Signer

logger = logging.getLogger(__name__)


class SocialDb:
    """
    Read and write hierarchical data stored in the SocialDB contract.

    Args:
        signer: Collaborator performing identity lookup, views and calls.
        contract_name: Account hosting the SocialDB contract.
    """

    def __init__(self, signer: Signer, contract_name: str) -> None:
        self._signer = signer
        self._contract_name = contract_name

    @property
    def contract_name(self) -> str:
        return self._contract_name

    # -------------------------------------------------------------------------
    # READS
    # -------------------------------------------------------------------------

    def get(self, keys: Sequence[str]) -> Any:
        """Fetch the data stored under the given key patterns."""
        return self._signer.view(self._contract_name, METHOD_GET, {"keys": list(keys)})

    def keys(self, keys: Sequence[str]) -> List[str]:
        """List the existing paths matching the given key patterns."""
        response = self._signer.view(self._contract_name, METHOD_KEYS, {"keys": list(keys)})
        return tree_utils.collect_keys(response)

    def get_account_storage(self, account_id: str) -> Optional[StorageView]:
        """Storage allowance of an account, None if it never stored data."""
        response = self._signer.view(
            self._contract_name,
            METHOD_GET_ACCOUNT_STORAGE,
            {"account_id": account_id},
        )
        return StorageView.from_response(response)

    # -------------------------------------------------------------------------
    # WRITES
    # -------------------------------------------------------------------------

    def prepare_set(self, data: Dict[str, Any]) -> WritePlan:
        """
        Validate, diff and cost a write without submitting it.

        Args:
            data: Tree keyed by exactly one account identifier.

        Returns:
            WritePlan: Minimal data to send and the deposit it requires.

        Raises:
            ValidationError: If the request spans zero or several accounts.
            AuthenticationError: If the signer has no account.
            AuthorizationError: If the signer does not own the account.
        """
        account_id = validate_write_request(data)

        signed_account_id = self._signer.get_account_id()
        if not signed_account_id:
            raise AuthenticationError("User is not logged in")
        if account_id != signed_account_id:
            raise AuthorizationError("Only the owner can update the account")

        storage = self.get_account_storage(signed_account_id)
        current = self._fetch_current_data(data)

        diffed = diff(data, current)
        estimated = estimate_bytes(diffed, current)
        deposit = calculate_deposit(estimated, storage)

        return WritePlan(
            account_id=account_id,
            data=diffed,
            current=current,
            estimated_bytes=estimated,
            deposit=deposit,
            gas=SET_GAS,
            storage=storage,
        )

    def set(self, data: Dict[str, Any]) -> Optional[WritePlan]:
        """
        Write only the changed leaves of `data`, attaching the storage deposit.

        Returns:
            Optional[WritePlan]: The submitted plan, or None when nothing changed.
        """
        plan = self.prepare_set(data)

        if plan.is_noop:
            logger.info("SocialDb: Nothing to update.")
            return None

        logger.info(
            f"SocialDb: Writing {len(tree_utils.flatten(plan.data))} value(s) for "
            f"'{plan.account_id}' (~{plan.estimated_bytes} bytes, "
            f"deposit {format_amount(plan.deposit)})."
        )
        self._signer.call(
            self._contract_name,
            METHOD_SET,
            plan.to_call_args(),
            format_amount(plan.gas),
            format_amount(plan.deposit),
        )
        return plan

    def delete(self, keys: Sequence[str]) -> Optional[WritePlan]:
        """Overwrite every value stored under the given keys with null."""
        data = self.get(keys)
        return self.set(self.nullify_data(data))

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _fetch_current_data(self, data: Dict[str, Any]) -> Any:
        keys = tree_utils.extract_keys(data)
        return self._signer.view(self._contract_name, METHOD_GET, {"keys": keys})

    # -------------------------------------------------------------------------
    # STATIC UTILITIES
    # -------------------------------------------------------------------------

    @staticmethod
    def nullify_data(data: Any) -> Any:
        return tree_utils.nullify(data)

    @staticmethod
    def build_nested_data(keys: Path, data: Any) -> Dict[str, Any]:
        return tree_utils.build_from_path(keys, data)

    @staticmethod
    def split_object_by_depth(obj: Any, depth: int = 0) -> Dict[str, Any]:
        return tree_utils.split_by_depth(obj, depth)

    @staticmethod
    def get_value_by_key(keys: Path, obj: Any) -> Any:
        return tree_utils.lookup(keys, obj)
