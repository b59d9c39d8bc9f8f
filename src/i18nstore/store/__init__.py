"""Resource store package.

Provides the store itself together with its collaborators: remote JSON
fetching, load bookkeeping, owned-resource teardown, and tree helpers.

Submodules:
    resource_store - ResourceStore and create()
    transport      - JSONFetcher protocol, HttpJSONFetcher
    loading        - ResourceLoadResult, LoadSummary
    disposal       - Disposer and the capability protocols it binds
    merge          - resolve_path, deep_merge, truthiness helpers

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from i18nstore.enums import DisposerKind, LoadStatus
from i18nstore.store.disposal import Disposer
from i18nstore.store.loading import LoadSummary, ResourceLoadResult
from i18nstore.store.resource_store import ResourceStore, create
from i18nstore.store.transport import HttpJSONFetcher, JSONFetcher

__all__ = [
    # Main store
    "ResourceStore",
    "create",
    # Transport
    "JSONFetcher",
    "HttpJSONFetcher",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "ResourceLoadResult",
    # Teardown
    "Disposer",
    "DisposerKind",
]
