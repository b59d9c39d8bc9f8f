"""Enumerations for i18nstore type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of a single remote bundle load.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Document fetched, parsed and merged."""

    TRANSPORT_ERROR = "transport_error"
    """Network failure or HTTP error status."""

    PARSE_ERROR = "parse_error"
    """Body was not valid JSON or its root was not an object."""

    ERROR = "error"
    """Any other failure, e.g. an on_load transform raising."""


class DisposerKind(StrEnum):
    """Capability used to release a resource owned by a store.

    StrEnum provides automatic string conversion: str(DisposerKind.DESTROY) == "destroy"
    """

    DESTROY = "destroy"
    """Composite objects (widgets, sub-stores): obj.destroy()"""

    REMOVE = "remove"
    """Attached handles (listeners, DOM-style bindings): obj.remove()"""

    UNSUBSCRIBE = "unsubscribe"
    """Event-emitter subscriptions: obj.off()"""


__all__ = [
    "DisposerKind",
    "LoadStatus",
]
