"""Store configuration.

Provides a single frozen dataclass that encapsulates the construction-time
options of ResourceStore and the request options of HttpJSONFetcher.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from i18nstore.constants import DEFAULT_HEADERS, DEFAULT_LOCALE, DEFAULT_TIMEOUT

__all__ = ["StoreConfig"]


@dataclass(frozen=True, slots=True)
class StoreConfig:
    """Immutable configuration for ResourceStore.

    All fields have sensible defaults; constructing ``StoreConfig()`` with
    no arguments produces the configuration used by ``ResourceStore.defaults``.

    Attributes:
        locale: Initial default locale (default: "en-us"). Lower-cased by the
            store; an explicit ``locale`` argument to the store wins.
        timeout: Seconds before an HTTP request is abandoned (default: 10.0).
        headers: Extra request headers sent with every load
            (default: ``Accept: application/json``).
        follow_redirects: Follow HTTP redirects when loading (default: True).

    Example:
        >>> from i18nstore import ResourceStore, StoreConfig
        >>> config = StoreConfig(locale="lv", timeout=2.5)
        >>> store = ResourceStore(config=config)
        >>> store.get_default_locale()
        'lv'
    """

    locale: str = DEFAULT_LOCALE
    timeout: float = DEFAULT_TIMEOUT
    headers: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    follow_redirects: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If timeout is not positive
        """
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
