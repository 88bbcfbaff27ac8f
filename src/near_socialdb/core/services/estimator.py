from __future__ import annotations

"""
Storage Cost Estimation Service.

Estimates how many bytes of contract storage a write will add (or release),
using the contract's per-node and per-key/value bookkeeping overheads and
the length of scalar values. The result is a signed delta relative to the
data already stored, not an absolute size.
"""

import logging
from typing import Any

from near_socialdb.domain.constants import (
    ESTIMATED_KEY_VALUE_SIZE,
    ESTIMATED_NODE_SIZE,
    MIN_SCALAR_SIZE,
)
from near_socialdb.domain.tree_models import MISSING, is_node

logger = logging.getLogger(__name__)


def estimate_bytes(data: Any, current: Any) -> int:
    """
    Estimate the storage delta of writing diffed data over current data.

    Args:
        data: Output of the diff service, None when nothing changed.
        current: Remote data overlapping the write.

    Returns:
        int: Signed byte estimate (negative when values shrink).
    """
    if data is None:
        return 0
    size = estimate_data_size(data, current)
    logger.debug(f"StorageEstimator: Write estimated at {size} bytes.")
    return size


def estimate_data_size(data: Any, prev: Any = MISSING) -> int:
    """
    Recursive size delta of `data` written over `prev`.

    A node costs ESTIMATED_NODE_SIZE unless it replaces an existing node.
    A new key costs twice its length plus ESTIMATED_KEY_VALUE_SIZE on top
    of its value. Keys stored as null still count as existing.
    """
    if not is_node(data):
        return _leaf_size(data) - (_js_length(prev) if isinstance(prev, str) else 0)

    prev_is_node = is_node(prev)
    size = 0 if prev_is_node else ESTIMATED_NODE_SIZE

    for key, value in data.items():
        prev_value = prev.get(key, MISSING) if prev_is_node else MISSING
        if prev_value is not MISSING:
            size += estimate_data_size(value, prev_value)
        else:
            size += (
                _js_length(key) * 2
                + estimate_data_size(value, MISSING)
                + ESTIMATED_KEY_VALUE_SIZE
            )
    return size


def _leaf_size(value: Any) -> int:
    if isinstance(value, str):
        return _js_length(value) or MIN_SCALAR_SIZE
    if isinstance(value, list):
        return len(value) or MIN_SCALAR_SIZE
    return MIN_SCALAR_SIZE


def _js_length(text: str) -> int:
    """Length in UTF-16 code units, the unit the contract accounting uses."""
    return len(text.encode("utf-16-le")) // 2
