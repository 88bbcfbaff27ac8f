from __future__ import annotations

"""
Unit tests for the Storage Deposit Calculation Service.

Verifies the first-write floor, netting against the available allowance,
the session cushion rule and integer-only arithmetic.
"""

import pytest

from near_socialdb.core.services.deposit import calculate_deposit, format_amount
from near_socialdb.domain.constants import (
    EXTRA_STORAGE_BALANCE,
    EXTRA_STORAGE_FOR_SESSION,
    INITIAL_ACCOUNT_STORAGE_BALANCE,
    MIN_STORAGE_BALANCE,
    STORAGE_COST_PER_BYTE,
)
from near_socialdb.domain.storage_models import StorageView


def test_constants_magnitudes() -> None:
    assert STORAGE_COST_PER_BYTE == 10 ** 19
    assert MIN_STORAGE_BALANCE == 2 * 10 ** 22
    assert INITIAL_ACCOUNT_STORAGE_BALANCE == 5 * 10 ** 21
    assert EXTRA_STORAGE_BALANCE == 5 * 10 ** 21
    assert EXTRA_STORAGE_FOR_SESSION == 5 * 10 ** 22


def test_first_small_write_is_dominated_by_floor() -> None:
    deposit = calculate_deposit(100, None)
    assert deposit == MIN_STORAGE_BALANCE + EXTRA_STORAGE_FOR_SESSION
    assert format_amount(deposit) == "70000000000000000000000"


def test_first_large_write_pays_bytes_above_floor() -> None:
    deposit = calculate_deposit(5000, None)
    expected = (
        STORAGE_COST_PER_BYTE * 5000
        + INITIAL_ACCOUNT_STORAGE_BALANCE
        + EXTRA_STORAGE_BALANCE
        + EXTRA_STORAGE_FOR_SESSION
    )
    assert deposit == expected


def test_existing_account_with_enough_allowance_pays_nothing() -> None:
    storage = StorageView(used_bytes=5000, available_bytes=10_000)
    assert calculate_deposit(100, storage) == 0


def test_existing_account_without_allowance() -> None:
    storage = StorageView(used_bytes=5000, available_bytes=0)
    deposit = calculate_deposit(100, storage)
    assert deposit == STORAGE_COST_PER_BYTE * 600 + EXTRA_STORAGE_FOR_SESSION
    assert format_amount(deposit) == "56000000000000000000000"


def test_allowance_is_netted_from_expected_balance() -> None:
    storage = StorageView(used_bytes=0, available_bytes=550)
    deposit = calculate_deposit(100, storage)
    assert deposit == STORAGE_COST_PER_BYTE * 50 + EXTRA_STORAGE_FOR_SESSION


@pytest.mark.parametrize("estimated", [-10_000, -1, 0, 1, 99, 10_000])
@pytest.mark.parametrize("available", [None, 0, 300, 1_000_000])
def test_deposit_is_never_negative_and_zero_has_no_cushion(estimated, available) -> None:
    storage = None if available is None else StorageView(available_bytes=available)
    deposit = calculate_deposit(estimated, storage)

    assert isinstance(deposit, int)
    assert deposit >= 0
    if deposit != 0:
        assert deposit >= EXTRA_STORAGE_FOR_SESSION


def test_format_amount_has_no_fraction_or_exponent() -> None:
    assert format_amount(10 ** 24) == "1" + "0" * 24
    assert format_amount(0) == "0"
