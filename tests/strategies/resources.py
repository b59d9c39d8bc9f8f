"""Hypothesis strategies for resource store test data.

Event-Emitting Strategies (HypoFuzz-Optimized):
- locale_codes: Emits locale_case=lower|upper|mixed
- resource_trees: Emits resource_tree_depth=flat|nested

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING, Any

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

_LOCALE_POOL = [
    "en", "en-us", "en-gb",
    "de", "de-de", "de-at",
    "fr", "fr-fr", "fr-ca",
    "es", "es-mx",
    "lv", "lv-lv",
    "pt-br", "zh-hans-cn",
    "ja", "ar",
]

# Namespace keys never contain the path separator; get() would split them.
_KEY_ALPHABET = string.ascii_letters + string.digits + "_-"


@st.composite
def locale_codes(draw: DrawFn) -> str:
    """Locale codes from a realistic pool in random letter case.

    Events emitted:
    - locale_case=lower|upper|mixed
    """
    base = draw(st.sampled_from(_LOCALE_POOL))
    style = draw(st.sampled_from(["lower", "upper", "mixed"]))
    event(f"locale_case={style}")
    match style:
        case "lower":
            return base
        case "upper":
            return base.upper()
        case _:
            flips = draw(st.lists(st.booleans(), min_size=len(base), max_size=len(base)))
            return "".join(c.upper() if f else c for c, f in zip(base, flips, strict=True))


def namespace_keys() -> SearchStrategy[str]:
    """Non-empty namespace keys without dots."""
    return st.text(alphabet=_KEY_ALPHABET, min_size=1, max_size=16)


def translated_strings() -> SearchStrategy[str]:
    """Non-empty translated text, including non-ASCII."""
    return st.text(min_size=1, max_size=40)


def falsy_values() -> SearchStrategy[Any]:
    """Values get() treats as not found."""
    return st.sampled_from([None, False, 0, 0.0, float("nan"), ""])


@st.composite
def resource_trees(draw: DrawFn, max_depth: int = 3) -> dict[str, Any]:
    """JSON-like resource dicts: string leaves, nested dicts, string lists.

    Events emitted:
    - resource_tree_depth=flat|nested
    """
    leaves = st.one_of(
        translated_strings(),
        st.integers(min_value=1, max_value=1000),
        st.lists(translated_strings(), max_size=3),
    )
    tree = draw(
        st.recursive(
            st.dictionaries(namespace_keys(), leaves, max_size=4),
            lambda children: st.dictionaries(
                namespace_keys(), st.one_of(leaves, children), max_size=4
            ),
            max_leaves=max_depth * 4,
        )
    )
    nested = any(isinstance(v, dict) for v in tree.values())
    event(f"resource_tree_depth={'nested' if nested else 'flat'}")
    return tree
