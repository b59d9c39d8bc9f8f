"""Locale utilities for case normalization and platform locale detection.

Centralizes locale key handling used throughout the store. Locale keys are
compared by exact string match after lower-casing; no BCP-47/POSIX
conversion or negotiation is performed.

Python 3.13+.
"""

from __future__ import annotations

import os

from i18nstore.constants import DEFAULT_LOCALE

__all__ = [
    "get_browser_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str | None) -> str:
    """Lower-case a locale code for use as a storage key.

    This is the canonical normalization function. Every operation that reads
    or writes a locale key normalizes at the entry point with this function,
    so "en-US", "EN-us" and "en-us" address the same partition.

    Args:
        locale_code: Locale code in any case. Empty or None selects the
            fallback locale.

    Returns:
        Lower-cased locale code

    Example:
        >>> normalize_locale("en-US")
        'en-us'
        >>> normalize_locale("")
        'en-us'
        >>> normalize_locale("pt_BR")  # separators are not converted
        'pt_br'
    """
    return (locale_code or DEFAULT_LOCALE).lower()


def get_browser_locale() -> str | None:
    """Return the platform's preferred locale for user-facing messages.

    Detection order:
    1. LANGUAGE environment variable (first entry of the colon-separated list)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Empty values and the "C"/"POSIX" pseudo-locales are skipped. Only the
    encoding suffix is stripped; the value is otherwise returned as the
    platform reports it, so callers that want a storage key must pass it
    through normalize_locale().

    Pure query: reads the environment on every call, holds no state.

    Returns:
        Locale identifier (e.g., 'de_DE', 'en-US'), or None if nothing is
        configured

    Example:
        >>> import os
        >>> os.environ["LANG"] = "de_DE.UTF-8"
        >>> get_browser_locale()
        'de_DE'
    """
    candidates = [os.environ.get("LANGUAGE", "").split(":")[0]]
    candidates.extend(os.environ.get(var, "") for var in ("LC_ALL", "LC_MESSAGES", "LANG"))

    for value in candidates:
        # Strip encoding suffix (e.g., ".UTF-8")
        locale_code = value.split(".")[0]
        if locale_code and locale_code not in ("C", "POSIX"):
            return locale_code
    return None
