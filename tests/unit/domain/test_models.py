from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. Write request validation (exactly one account).
2. StorageView construction from contract responses.
3. Immutability and rendering of WritePlan.
"""

import dataclasses

import pytest

from near_socialdb.domain.errors import SocialDbError, ValidationError
from near_socialdb.domain.storage_models import StorageView, WritePlan
from near_socialdb.domain.tree_models import MISSING, is_node, validate_write_request


def test_validate_write_request_returns_account() -> None:
    assert validate_write_request({"alice.near": {"profile": {}}}) == "alice.near"


@pytest.mark.parametrize("data", [
    {},
    {"alice.near": {}, "bob.near": {}},
    None,
    "alice.near",
])
def test_validate_write_request_rejects_other_shapes(data) -> None:
    with pytest.raises(ValidationError, match="Only one account"):
        validate_write_request(data)


def test_validation_error_is_a_socialdb_error() -> None:
    assert issubclass(ValidationError, SocialDbError)


def test_is_node_only_for_dicts() -> None:
    assert is_node({})
    assert not is_node([])
    assert not is_node(None)
    assert not is_node("x")


def test_missing_sentinel_is_falsy_singleton() -> None:
    assert not MISSING
    assert MISSING is type(MISSING)()
    assert repr(MISSING) == "MISSING"


def test_storage_view_from_response() -> None:
    view = StorageView.from_response({"used_bytes": 1200, "available_bytes": 300})
    assert view == StorageView(used_bytes=1200, available_bytes=300)


def test_storage_view_from_empty_response_is_none() -> None:
    assert StorageView.from_response(None) is None


def test_storage_view_tolerates_missing_fields() -> None:
    assert StorageView.from_response({"used_bytes": 10}) == StorageView(10, 0)


def test_write_plan_is_frozen_and_renders_amounts_as_strings() -> None:
    plan = WritePlan(
        account_id="alice.near",
        data={"alice.near": {"name": "Alice"}},
        current={},
        estimated_bytes=400,
        deposit=7 * 10 ** 22,
        gas=300 * 10 ** 12,
        storage=None,
    )

    with pytest.raises(dataclasses.FrozenInstanceError):
        plan.deposit = 0  # type: ignore[misc]

    assert not plan.is_noop
    assert plan.to_call_args() == {"data": {"alice.near": {"name": "Alice"}}}
    summary = plan.summary()
    assert summary["deposit"] == "70000000000000000000000"
    assert summary["gas"] == "300000000000000"
    assert summary["first_write"] is True


def test_write_plan_without_data_is_noop() -> None:
    plan = WritePlan("alice.near", None, {}, 0, 0, 0, StorageView(1, 1))
    assert plan.is_noop
    assert plan.summary()["first_write"] is False
