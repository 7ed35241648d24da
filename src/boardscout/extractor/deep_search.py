"""
Depth-first key lookup over decoded JSON of unknown shape.
"""

from __future__ import annotations

from typing import Any, Optional, Set

DEFAULT_MAX_DEPTH = 64


def find_key(root: Any, key: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Optional[str]:
    """
    Return the first truthy scalar stored under ``key`` anywhere in ``root``.

    Traversal is pre-order: a mapping that owns ``key`` wins before any of its
    children are visited, and children are walked in insertion order. Lists and
    tuples are walked element by element. A truthy container stored under
    ``key`` is not an identifier, so the search carries on into it.

    Containers already on the visited set are skipped and nothing deeper than
    ``max_depth`` is inspected, so self-referential data terminates.

    Args:
        root: Decoded JSON (dicts, lists, scalars) or any similar nesting
        key: Property name to look for
        max_depth: Maximum nesting depth to descend into

    Returns:
        The matched value as a string, or None
    """
    visited: Set[int] = set()
    return _search(root, key, 0, max_depth, visited)


def _search(node: Any, key: str, depth: int, max_depth: int, visited: Set[int]) -> Optional[str]:
    if not isinstance(node, (dict, list, tuple)) or depth > max_depth:
        return None
    if id(node) in visited:
        return None
    visited.add(id(node))

    if isinstance(node, dict):
        value = node.get(key)
        if value and not isinstance(value, (dict, list, tuple)):
            return str(value)
        children = node.values()
    else:
        children = node

    for child in children:
        found = _search(child, key, depth + 1, max_depth, visited)
        if found is not None:
            return found
    return None
