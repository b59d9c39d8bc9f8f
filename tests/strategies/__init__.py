"""Hypothesis strategies for i18nstore property-based testing.

Usage:
    from tests.strategies import locale_codes, namespace_keys, resource_trees
"""

from .resources import (
    falsy_values,
    locale_codes,
    namespace_keys,
    resource_trees,
    translated_strings,
)

__all__ = [
    "falsy_values",
    "locale_codes",
    "namespace_keys",
    "resource_trees",
    "translated_strings",
]
