"""i18nstore - In-memory i18n resource store with remote JSON bundles.

Stores translated resource bundles keyed by locale and namespace, merges
bundles loaded asynchronously from remote JSON documents, and serves lookups
with default-locale fallback and copy-on-read isolation.

Public API:
    ResourceStore - Per-instance resource store
    create - Construct a ResourceStore
    StoreConfig - Construction and transport configuration
    HttpJSONFetcher - httpx-based fetcher used by ResourceStore.load()
    Disposer - Owned-resource release action for ResourceStore.destroy()
    get_browser_locale - Platform preferred locale
    DEFAULT_LOCALE - Fixed fallback locale ("en-us")

Exceptions:
    ResourceStoreError - Base exception class
    TransportError - Network failure or HTTP error status during load()
    ParseError - Remote document is not a JSON object
    StoreDestroyedError - Operation on a destroyed store

Submodules:
    i18nstore.store - Store, transport, load bookkeeping, teardown
    i18nstore.locale_utils - Locale normalization and detection
"""

from .config import StoreConfig
from .constants import DEFAULT_LOCALE
from .errors import ParseError, ResourceStoreError, StoreDestroyedError, TransportError
from .locale_utils import get_browser_locale
from .store import Disposer, HttpJSONFetcher, ResourceStore, create

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nstore")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_LOCALE",
    "Disposer",
    "HttpJSONFetcher",
    "ParseError",
    "ResourceStore",
    "ResourceStoreError",
    "StoreConfig",
    "StoreDestroyedError",
    "TransportError",
    "__version__",
    "create",
    "get_browser_locale",
]
