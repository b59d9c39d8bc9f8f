"""Shared constants for i18nstore.

Centralizes the fallback locale and the defaults used by the store, its
configuration, and the HTTP fetcher. Placing constants here avoids circular
imports between the store package and its collaborators.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    # Namespace paths
    "PATH_SEPARATOR",
    # Transport defaults
    "DEFAULT_TIMEOUT",
    "DEFAULT_HEADERS",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Fixed fallback locale. Used when no locale is supplied at construction,
# when set_default_locale() receives an empty value, and as the implicit
# locale for store() and load().
DEFAULT_LOCALE: str = "en-us"

# ============================================================================
# NAMESPACE PATHS
# ============================================================================

# Separator for dotted namespace paths on read (e.g. "buttons.save.label").
# store() and load() treat namespace keys as opaque and never split them.
PATH_SEPARATOR: str = "."

# ============================================================================
# TRANSPORT DEFAULTS
# ============================================================================

# Seconds before an HTTP request for a remote bundle is abandoned.
DEFAULT_TIMEOUT: float = 10.0

DEFAULT_HEADERS: dict[str, str] = {"Accept": "application/json"}
