"""Tree helpers for resource values: path lookup, copy, and deep merge.

Resource values are JSON-like trees of dicts, lists and scalars. These helpers
implement the read and write semantics shared by ResourceStore.get() and
ResourceStore.load():

    resolve_path  - walk a dotted path, returning MISSING when a segment is absent
    is_falsy      - JavaScript-style truthiness used for "not found" on read
    is_plain_object - values that get() deep-copies
    deep_merge    - recursive merge used by load()

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any, Final

from i18nstore.constants import PATH_SEPARATOR

__all__ = [
    "MISSING",
    "deep_merge",
    "is_falsy",
    "is_plain_object",
    "resolve_path",
]

logger = logging.getLogger(__name__)


class _Missing:
    """Sentinel for an absent path segment (distinct from a stored None)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def is_plain_object(value: object) -> bool:
    """Check if value is a plain mapping node (a dict, not a list or scalar)."""
    return isinstance(value, dict)


def is_falsy(value: object) -> bool:
    """Check if value counts as "not found" on read.

    Mirrors JavaScript truthiness rather than Python's: None, False, numeric
    zero, NaN and the empty string are falsy, while empty dicts and empty
    lists are values like any other.

    Args:
        value: Resolved value (or MISSING)

    Returns:
        True if get() should return the caller's default instead
    """
    match value:
        case _Missing() | None:
            return True
        case bool():
            return not value
        case int():
            return value == 0
        case float():
            return value == 0 or math.isnan(value)
        case str():
            return value == ""
        case _:
            return False


def _step(node: Any, segment: str) -> Any:
    """Descend one path segment into a dict (by key) or list (by index)."""
    if isinstance(node, Mapping):
        return node.get(segment, MISSING)
    if isinstance(node, str) or not isinstance(node, Sequence):
        return MISSING
    # str.isdigit() also accepts non-ASCII digits such as "²", which int() rejects
    if segment.isascii() and segment.isdigit():
        index = int(segment)
        return node[index] if index < len(node) else MISSING
    return MISSING


def resolve_path(root: Any, path: str) -> Any:
    """Walk a dotted path from root.

    Args:
        root: Tree to read from
        path: Dotted key path (e.g., "buttons.save"). A path without
            separators is a single key.

    Returns:
        The value at path, or MISSING if any segment is absent

    Example:
        >>> resolve_path({"a": {"b": [10, 20]}}, "a.b.1")
        20
        >>> resolve_path({"a": {}}, "a.b.c")
        MISSING
    """
    node = root
    for segment in path.split(PATH_SEPARATOR):
        node = _step(node, segment)
        if node is MISSING:
            return MISSING
    return node


def deep_merge(
    target: MutableMapping[str, Any], source: Mapping[str, Any]
) -> MutableMapping[str, Any]:
    """Merge source into target in place.

    For each key in source:
    - dict into an existing dict: merged recursively
    - anything else: overwrites the target value (lists are replaced, not
      concatenated)
    - keys absent from target are assigned by reference, without copying

    Args:
        target: Tree that receives the data (mutated)
        source: Incoming tree

    Returns:
        target, for chaining

    Example:
        >>> existing = {"greet": {"hello": "hi"}}
        >>> deep_merge(existing, {"greet": {"bye": "later"}})
        {'greet': {'hello': 'hi', 'bye': 'later'}}
    """
    for key, incoming in source.items():
        current = target.get(key, MISSING)
        if is_plain_object(incoming) and is_plain_object(current):
            deep_merge(current, incoming)
        else:
            if current is not MISSING:
                logger.debug("Overwriting key during merge: %s", key)
            target[key] = incoming
    return target
