"""Per-instance i18n resource store with remote bundle loading.

Holds translated resources as a two-level mapping (locale -> namespace ->
value). UI components register their default text with store(); host
applications later merge additional locales fetched at runtime with load().
Lookups go through get(), which applies default-locale fallback and returns
isolated copies.

Key behaviours:
- Locale keys are lower-cased on every read and write
- store() keeps values by reference and replaces; load() deep-merges
- get() deep-copies dict values unless original=True
- get() and store() never raise for empty namespaces (soft failure)
- load() leaves the store untouched when fetching, parsing or the on_load
  transform fails

Concurrency:
    Designed for a single asyncio event loop. load() suspends only while
    awaiting the fetcher; the merge that follows runs without an await, so
    each merge is atomic. Concurrent loads are not serialized: the last one
    to complete wins on overlapping fields.

Implicit locale asymmetry:
    get() defaults to the instance's default locale, while store() and
    load() default to DEFAULT_LOCALE. Components register their built-in
    text under the fallback locale regardless of what the host application
    later selects.

Python 3.13+.
"""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, ClassVar

from i18nstore.config import StoreConfig
from i18nstore.constants import DEFAULT_LOCALE
from i18nstore.errors import ParseError, StoreDestroyedError
from i18nstore.locale_utils import get_browser_locale, normalize_locale
from i18nstore.store.loading import LoadSummary, ResourceLoadResult, status_for
from i18nstore.store.merge import deep_merge, is_falsy, is_plain_object, resolve_path
from i18nstore.store.transport import HttpJSONFetcher, JSONFetcher

if TYPE_CHECKING:
    from i18nstore.store.disposal import Disposer
    from i18nstore.types import LocaleCode, Namespace, OnLoad, Resources, ResourceValue

__all__ = ["ResourceStore", "create"]

logger = logging.getLogger(__name__)


class ResourceStore:
    """In-memory i18n resource store.

    Each instance owns independent state; there is no process-wide instance.
    Construct one at application start-up and pass it to the components that
    need it.

    Example - Component defaults plus a runtime bundle:
        >>> store = ResourceStore(locale="lv")
        >>> store.store("buttons", {"save": "Save", "cancel": "Cancel"})
        >>> store.get("buttons.save", locale="en-us")
        'Save'
        >>> await store.load("https://cdn.example.com/i18n/lv.json", "lv")
        >>> store.get("buttons.save")  # default locale "lv"
        'Saglabāt'

    Example - Scoped lifetime:
        >>> with ResourceStore() as store:
        ...     store.store("ui", {"title": "Hello"})
        ... # destroy() runs on exit

    Attributes:
        defaults: Class-level configuration used when none is supplied
    """

    __slots__ = (
        "_config",
        "_default_locale",
        "_destroyed",
        "_disposers",
        "_fetcher",
        "_load_results",
        "_resources",
    )

    defaults: ClassVar[StoreConfig] = StoreConfig()

    def __init__(
        self,
        locale: LocaleCode | None = None,
        *,
        config: StoreConfig | None = None,
        fetcher: JSONFetcher | None = None,
    ) -> None:
        """Initialize an empty store.

        Args:
            locale: Initial default locale. Falls back to config.locale, then
                to DEFAULT_LOCALE. Lower-cased.
            config: Store configuration (default: ResourceStore.defaults)
            fetcher: Retrieves remote JSON for load(). Defaults to an
                HttpJSONFetcher built from config.
        """
        self._config = config if config is not None else self.defaults
        self._default_locale: LocaleCode = normalize_locale(locale or self._config.locale)
        self._fetcher: JSONFetcher = (
            fetcher if fetcher is not None else HttpJSONFetcher(self._config)
        )
        # Structure: {"en-us": {namespace: value}}
        self._resources: Resources = {}
        self._load_results: list[ResourceLoadResult] = []
        self._disposers: list[Disposer] = []
        self._destroyed = False

    @classmethod
    def create(
        cls,
        locale: LocaleCode | None = None,
        *,
        config: StoreConfig | None = None,
        fetcher: JSONFetcher | None = None,
    ) -> ResourceStore:
        """Construct a store. Equivalent to calling the class."""
        return cls(locale, config=config, fetcher=fetcher)

    def __repr__(self) -> str:
        if self._destroyed:
            return "ResourceStore(destroyed)"
        return (
            f"ResourceStore(default_locale={self._default_locale!r}, "
            f"locales={len(self._resources)})"
        )

    def __enter__(self) -> ResourceStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Destroy the store on exit. Does not suppress exceptions."""
        self.destroy()

    def _live_resources(self) -> Resources:
        if self._destroyed:
            msg = "ResourceStore has been destroyed"
            raise StoreDestroyedError(msg)
        return self._resources

    # ------------------------------------------------------------------
    # Lookup and registration
    # ------------------------------------------------------------------

    def get(
        self,
        namespace: Namespace,
        locale: LocaleCode | None = None,
        default: ResourceValue = None,
        *,
        original: bool = False,
    ) -> ResourceValue:
        """Return the resource stored for a namespace.

        Args:
            namespace: Namespace to read. May be a dotted path into the
                stored value (e.g., "buttons.save").
            locale: Locale to read (e.g., "en" or "en-US"). Defaults to the
                instance's default locale.
            default: Returned when the namespace is empty or the resolved
                value is missing or falsy (None, False, 0, NaN, "").
            original: By default dict values are returned as deep copies.
                Set to True to receive the stored object itself.

        Returns:
            The resolved value, a copy of it, or default
        """
        resources = self._live_resources()
        if not namespace:
            return default

        locale_code = normalize_locale(locale or self._default_locale)
        value = resolve_path(resources.get(locale_code), namespace)

        if is_falsy(value):
            return default
        if is_plain_object(value) and not original:
            return copy.deepcopy(value)
        return value

    def store(
        self,
        namespace: Namespace,
        data: ResourceValue,
        locale: LocaleCode = DEFAULT_LOCALE,
    ) -> None:
        """Store resource data under a namespace.

        The data is kept as given: later changes to the object are visible
        through the store, and a second store() for the same locale and
        namespace replaces the first without merging.

        Args:
            namespace: Unique namespace key. Not split on dots.
            data: Value to store, normally a dict of strings
            locale: Target locale (default: DEFAULT_LOCALE, not the
                instance's default locale)
        """
        resources = self._live_resources()
        if not namespace:
            return

        locale_code = normalize_locale(locale)
        resources.setdefault(locale_code, {})[namespace] = data
        logger.debug("Stored namespace '%s' for locale %s", namespace, locale_code)

    def to_json(self) -> Resources:
        """Return a deep, independent copy of all stored resources.

        Returns:
            {locale: {namespace: value}} sharing no objects with the store
        """
        return copy.deepcopy(self._live_resources())

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Locale keys currently holding resources, in insertion order."""
        return tuple(self._live_resources())

    # ------------------------------------------------------------------
    # Remote loading
    # ------------------------------------------------------------------

    async def load(
        self,
        url: str,
        locale: LocaleCode | None = None,
        *,
        on_load: OnLoad | None = None,
    ) -> None:
        """Fetch a JSON document and merge it into a locale.

        Each top-level key of the document is a namespace. Existing dict
        namespaces are merged field by field (incoming scalars and lists
        win); new namespaces are added as-is.

        Args:
            url: Location of the JSON document
            locale: Target locale (default: DEFAULT_LOCALE)
            on_load: Called with the parsed document before it is merged.
                A truthy return value replaces the document.

        Raises:
            TransportError: Network failure or HTTP error status
            ParseError: Body is not valid JSON, or the document is not an object
            StoreDestroyedError: The store was destroyed before or during the load
            Exception: Anything raised by on_load, unchanged

        On any failure the store's resources are left unchanged.
        """
        self._live_resources()
        locale_code = normalize_locale(locale)

        try:
            data = await self._fetcher.fetch_json(url)
            if on_load is not None:
                transformed = on_load(data)
                if not is_falsy(transformed):
                    data = transformed
            if not is_plain_object(data):
                msg = (
                    f"Document from '{url}' must be a JSON object, "
                    f"got {type(data).__name__}"
                )
                raise ParseError(msg, url=url)
        except Exception as e:
            logger.warning("Failed to load %s for locale %s: %s", url, locale_code, e)
            self._load_results.append(
                ResourceLoadResult(url=url, locale=locale_code, status=status_for(e), error=e)
            )
            raise

        # No await between here and the end of the merge.
        resources = self._live_resources()
        deep_merge(resources.setdefault(locale_code, {}), data)

        namespaces = tuple(data)
        self._load_results.append(
            ResourceLoadResult(
                url=url,
                locale=locale_code,
                status=status_for(None),
                namespaces=namespaces,
            )
        )
        logger.info(
            "Loaded %s into locale %s (%d namespaces)", url, locale_code, len(namespaces)
        )

    def get_load_summary(self) -> LoadSummary:
        """Get a summary of every load() attempt made on this store.

        Resources registered with store() are not included.

        Returns:
            LoadSummary with results in completion order
        """
        return LoadSummary(results=tuple(self._load_results))

    # ------------------------------------------------------------------
    # Locale management
    # ------------------------------------------------------------------

    def set_default_locale(self, locale: LocaleCode | None) -> None:
        """Set the locale used by get() when none is given.

        Args:
            locale: New default, lower-cased. Empty resets to DEFAULT_LOCALE.
        """
        self._live_resources()
        self._default_locale = normalize_locale(locale)

    def get_default_locale(self) -> LocaleCode:
        """Return the current default locale."""
        self._live_resources()
        return self._default_locale

    @property
    def default_locale(self) -> LocaleCode:
        """Current default locale (read-only; use set_default_locale)."""
        return self.get_default_locale()

    get_browser_locale = staticmethod(get_browser_locale)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def own(self, disposer: Disposer) -> Disposer:
        """Register a resource to release when the store is destroyed.

        Args:
            disposer: Release action, usually from Disposer.destroy(),
                Disposer.remove() or Disposer.unsubscribe()

        Returns:
            The disposer, for chaining
        """
        self._live_resources()
        self._disposers.append(disposer)
        return disposer

    def destroy(self) -> None:
        """Release owned resources and drop all stored data.

        Disposers run in registration order. A failing disposer is logged and
        the rest still run; the first failure is re-raised once teardown is
        complete. Calling destroy() again is a no-op.

        Raises:
            Exception: The first exception raised by a disposer
        """
        if self._destroyed:
            return
        self._destroyed = True

        disposers, self._disposers = self._disposers, []
        first_error: Exception | None = None
        for disposer in disposers:
            try:
                disposer()
            except Exception as e:
                logger.warning(
                    "Disposer %s (%s) failed during destroy: %s", disposer.label, disposer.kind, e
                )
                if first_error is None:
                    first_error = e

        self._resources.clear()
        self._load_results.clear()
        logger.debug("ResourceStore destroyed (%d disposers released)", len(disposers))

        if first_error is not None:
            raise first_error


def create(
    locale: LocaleCode | None = None,
    *,
    config: StoreConfig | None = None,
    fetcher: JSONFetcher | None = None,
) -> ResourceStore:
    """Construct a ResourceStore.

    Args:
        locale: Initial default locale (default: config.locale, then "en-us")
        config: Store configuration
        fetcher: JSON fetcher for load()

    Returns:
        A new, empty store
    """
    return ResourceStore.create(locale, config=config, fetcher=fetcher)
