from __future__ import annotations

"""
Write Diffing Service.

Reduces a proposed write to the leaves that actually differ from the data
already stored by the contract. Unchanged leaves and subtrees left empty
after diffing are dropped, so only new or modified values are transmitted.
"""

from typing import Any, Dict, Optional

from near_socialdb.domain.tree_models import MISSING, is_node


def diff(proposed: Dict[str, Any], current: Any = MISSING) -> Optional[Dict[str, Any]]:
    """
    Compute the minimal tree of changed leaves.

    When a proposed node meets a stored leaf (or nothing), it is diffed
    against `{"": stored_leaf}` so that a value promoted from scalar to
    object keeps the scalar under the empty key instead of losing it.

    Args:
        proposed: Node being written.
        current: Stored data at the same position, MISSING if absent.

    Returns:
        Optional[Dict[str, Any]]: Changed leaves, or None when nothing changed.
    """
    result: Dict[str, Any] = {}

    for key, value in proposed.items():
        prev = current.get(key, MISSING) if is_node(current) else MISSING

        if is_node(value):
            comparand = prev if is_node(prev) else {"": prev}
            sub_diff = diff(value, comparand)
            if sub_diff is not None:
                result[key] = sub_diff
        elif not leaves_equal(value, prev):
            result[key] = value

    return result or None


def leaves_equal(a: Any, b: Any) -> bool:
    """
    Strict leaf equality following JSON semantics.

    Booleans never equal numbers, `1` equals `1.0`, and an absent value
    never equals a stored null.
    """
    if a is MISSING or b is MISSING:
        return a is b
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(leaves_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(leaves_equal(a[k], b[k]) for k in a)
    if type(a) is not type(b):
        return False
    return a == b
