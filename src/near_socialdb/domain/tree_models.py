from __future__ import annotations

"""
Hierarchical Data Models.

Provides the recursive type definitions for SocialDB trees. A tree is the
JSON shape exchanged with the contract: a node is a dict of string keys, and
everything else (strings, numbers, booleans, null and lists) is an opaque leaf.
"""

from typing import Any, Dict, List, Sequence, Union

from near_socialdb.domain.errors import ValidationError

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

Leaf = Union[str, int, float, bool, None, List[Any]]
Tree = Union[Dict[str, "Tree"], Leaf]
Path = Sequence[str]


class _Missing:
    """Marker for a key that is absent, as opposed to stored as null."""

    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def is_node(value: Any) -> bool:
    """Return True when the value is an object node rather than a leaf."""
    return isinstance(value, dict)


# -----------------------------------------------------------------------------
# WRITE REQUESTS
# -----------------------------------------------------------------------------

def validate_write_request(data: Any) -> str:
    """
    Enforce that a write request targets exactly one account.

    Args:
        data: Tree keyed by the account identifier being written.

    Returns:
        str: The account identifier.

    Raises:
        ValidationError: If the root is not a node or holds zero or several keys.
    """
    if not is_node(data) or len(data) != 1:
        raise ValidationError("Only one account can be updated at a time")
    [account_id] = data.keys()
    return account_id
