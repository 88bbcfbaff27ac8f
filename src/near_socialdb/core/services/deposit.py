from __future__ import annotations

"""
Storage Deposit Calculation Service.

Converts a storage byte estimate into the yoctoNEAR deposit attached to a
`set` call, net of the allowance the account has already paid for. Accounts
without a storage record pay the registration floor. Any non-zero deposit
carries an extra session cushion so the next small writes need no deposit.

All amounts are Python integers; floats never enter the computation.
"""

import logging
from typing import Optional

from near_socialdb.domain.constants import (
    EXTRA_STORAGE_BALANCE,
    EXTRA_STORAGE_FOR_SESSION,
    INITIAL_ACCOUNT_STORAGE_BALANCE,
    MIN_STORAGE_BALANCE,
    STORAGE_COST_PER_BYTE,
)
from near_socialdb.domain.storage_models import StorageView

logger = logging.getLogger(__name__)


def calculate_deposit(estimated_bytes: int, storage: Optional[StorageView]) -> int:
    """
    Compute the deposit for a write.

    Args:
        estimated_bytes: Signed storage delta from the estimator.
        storage: Current allowance of the account, None if it has no record.

    Returns:
        int: Deposit in yoctoNEAR, never negative.
    """
    first_write = storage is None
    available_bytes = 0 if first_write else storage.available_bytes

    expected_balance = (
        STORAGE_COST_PER_BYTE * int(estimated_bytes)
        + (INITIAL_ACCOUNT_STORAGE_BALANCE if first_write else 0)
        + EXTRA_STORAGE_BALANCE
    )
    shortfall = expected_balance - available_bytes * STORAGE_COST_PER_BYTE
    floor = MIN_STORAGE_BALANCE if first_write else 0

    deposit = max(shortfall, floor)
    if deposit != 0:
        deposit += EXTRA_STORAGE_FOR_SESSION

    logger.debug(
        f"DepositCalculator: {estimated_bytes} bytes, "
        f"{available_bytes} available, deposit {format_amount(deposit)}."
    )
    return deposit


def format_amount(value: int) -> str:
    """Render an amount as a base-10 integer string."""
    return str(int(value))
