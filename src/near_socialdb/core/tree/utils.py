from __future__ import annotations

"""
Tree Manipulation Utilities.

Pure functions over SocialDB trees: flattening to key paths, rebuilding
nested data from a path, splitting at a fixed depth, path lookups and
leaf rewriting (string serialization and nullification for deletes).
None of these functions mutate their input.
"""

import json
from typing import Any, Dict, Iterator, List, Optional, Tuple

from near_socialdb.domain.constants import KEY_DELIMITER
from near_socialdb.domain.tree_models import Path, Tree, is_node

# -----------------------------------------------------------------------------
# PATH EXTRACTION
# -----------------------------------------------------------------------------

def flatten(tree: Tree) -> List[Tuple[str, ...]]:
    """
    List the path of every leaf, depth-first in key order.

    Args:
        tree: Root node to traverse.

    Returns:
        List[Tuple[str, ...]]: One path per leaf.
    """
    return list(_iter_leaf_paths(tree, ()))


def extract_keys(tree: Tree) -> List[str]:
    """Slash-joined leaf paths, as expected by the contract `get` method."""
    return [KEY_DELIMITER.join(path) for path in flatten(tree)]


def collect_keys(response: Any) -> List[str]:
    """
    Gather every path marked `true` in a `keys` response.

    Values other than `true` are not matches themselves; nodes among them
    are descended into as further path segments.

    Args:
        response: Nested structure returned by the contract `keys` method.

    Returns:
        List[str]: Slash-joined matching paths.
    """
    keys: List[str] = []
    if not is_node(response):
        return keys

    for key, value in response.items():
        if value is True:
            keys.append(key)
        else:
            keys.extend(
                f"{key}{KEY_DELIMITER}{sub_key}" for sub_key in collect_keys(value)
            )
    return keys


# -----------------------------------------------------------------------------
# CONSTRUCTION & LOOKUP
# -----------------------------------------------------------------------------

def build_from_path(path: Path, value: Any) -> Dict[str, Any]:
    """
    Wrap a value at the end of a path of single-key nodes.

    Raises:
        ValueError: If the path is empty.
    """
    if not path:
        raise ValueError("Cannot build nested data from an empty path")

    result: Any = value
    for key in reversed(list(path)):
        result = {key: result}
    return result


def lookup(path: Path, tree: Any) -> Optional[Any]:
    """
    Follow a path through nested nodes.

    Absence is an expected outcome: a missing segment or a leaf met
    before the end of the path yields None rather than an error.
    """
    node = tree
    for key in path:
        if not is_node(node) or key not in node:
            return None
        node = node[key]
    return node


def split_by_depth(tree: Any, depth: int = 0) -> Dict[str, Any]:
    """
    Cut a tree at a fixed depth.

    Each slash-joined prefix of length `depth` maps to its remaining subtree.
    Branches ending earlier map their leaf (or empty node) under the
    shorter prefix.
    A depth of 0 returns the whole tree under the empty key.

    Args:
        tree: Data to split.
        depth: Number of levels to keep in the prefixes.

    Returns:
        Dict[str, Any]: Prefix to subtree mapping.
    """
    result: Dict[str, Any] = {}
    _split(tree, depth, [], result)
    return result


# -----------------------------------------------------------------------------
# LEAF REWRITING
# -----------------------------------------------------------------------------

def nullify(tree: Any) -> Any:
    """Copy the tree shape with every leaf replaced by None."""
    if not is_node(tree):
        return None
    return {key: nullify(value) for key, value in tree.items()}


def to_string_leaves(tree: Any) -> Any:
    """Serialize every non-string, non-null leaf to compact JSON."""
    if is_node(tree):
        return {key: to_string_leaves(value) for key, value in tree.items()}
    return _stringify(tree)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _iter_leaf_paths(tree: Any, prefix: Tuple[str, ...]) -> Iterator[Tuple[str, ...]]:
    for key, value in tree.items():
        path = prefix + (key,)
        if is_node(value):
            yield from _iter_leaf_paths(value, path)
        else:
            yield path


def _split(tree: Any, depth: int, path: List[str], out: Dict[str, Any]) -> None:
    if depth == 0 or not is_node(tree) or not tree:
        out[KEY_DELIMITER.join(path)] = tree
        return
    for key, value in tree.items():
        _split(value, depth - 1, path + [key], out)


def _stringify(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
