"""Load bookkeeping for ResourceStore.load().

Every load attempt is recorded as an immutable ResourceLoadResult, whether
it merged or raised. LoadSummary aggregates the records for diagnostics.
Recording never changes the propagate-on-failure contract of load().

Components:
    ResourceLoadResult - Immutable result of a single load attempt
    LoadSummary - Immutable aggregate of all load results

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from i18nstore.enums import LoadStatus
from i18nstore.errors import ParseError, TransportError
from i18nstore.locale_utils import normalize_locale
from i18nstore.types import LocaleCode, Namespace

__all__ = [
    "LoadSummary",
    "ResourceLoadResult",
    "status_for",
]


def status_for(error: BaseException | None) -> LoadStatus:
    """Classify a load failure (or success when error is None)."""
    match error:
        case None:
            return LoadStatus.SUCCESS
        case TransportError():
            return LoadStatus.TRANSPORT_ERROR
        case ParseError():
            return LoadStatus.PARSE_ERROR
        case _:
            return LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of loading a single remote bundle.

    Attributes:
        url: Location that was requested
        locale: Normalized target locale
        status: Load status
        error: Exception if the load failed, None otherwise
        namespaces: Top-level namespace keys merged (empty on failure)
    """

    url: str
    locale: LocaleCode
    status: LoadStatus
    error: Exception | None = None
    namespaces: tuple[Namespace, ...] = ()

    @property
    def is_success(self) -> bool:
        """Check if the bundle was merged."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        """Check if the load failed for any reason."""
        return self.status != LoadStatus.SUCCESS


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of load results for one ResourceStore.

    Attributes:
        results: All individual load results, in completion order

    Example:
        >>> summary = store.get_load_summary()
        >>> for result in summary.get_errors():
        ...     print(f"{result.url} -> {result.status}: {result.error}")
    """

    results: tuple[ResourceLoadResult, ...]

    def __repr__(self) -> str:
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of loads that merged."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def errors(self) -> int:
        """Number of failed loads."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def has_errors(self) -> bool:
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """True if every attempt merged (vacuously True with no attempts)."""
        return self.errors == 0

    def get_errors(self) -> tuple[ResourceLoadResult, ...]:
        return tuple(r for r in self.results if r.is_error)

    def get_successful(self) -> tuple[ResourceLoadResult, ...]:
        return tuple(r for r in self.results if r.is_success)

    def get_by_locale(self, locale: LocaleCode) -> tuple[ResourceLoadResult, ...]:
        """Get all results for a locale, normalized the way load() records it."""
        wanted = normalize_locale(locale)
        return tuple(r for r in self.results if r.locale == wanted)
