"""Type aliases for the resource store domain.

Provides semantic type aliases used throughout the store package
and by user code when annotating ResourceStore call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from typing import Any, TypeAlias

__all__ = [
    "LocaleCode",
    "Namespace",
    "OnLoad",
    "ResourceValue",
    "Resources",
]

LocaleCode: TypeAlias = str
"""Locale identifier (e.g., 'en-us', 'fr'). Stored lower-cased."""

Namespace: TypeAlias = str
"""Namespace key (e.g., 'buttons'). Dotted paths are accepted on read."""

ResourceValue: TypeAlias = Any
"""Value held under a namespace, typically a dict of translated strings."""

Resources: TypeAlias = dict[LocaleCode, dict[Namespace, ResourceValue]]
"""Full store contents: locale -> namespace -> value."""

OnLoad: TypeAlias = Callable[[Any], Any]
"""Transform applied to a parsed document before it is merged."""
