"""Owned-resource teardown for ResourceStore.

A store may own helper objects whose lifetime ends with the store: child
widgets, attached listeners, event subscriptions. Each is wrapped in a
Disposer of one of three fixed kinds and released uniformly by
ResourceStore.destroy().

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from i18nstore.enums import DisposerKind

__all__ = [
    "Destroyable",
    "Disposer",
    "Removable",
    "Unsubscribable",
]


class Destroyable(Protocol):
    def destroy(self) -> object: ...


class Removable(Protocol):
    def remove(self) -> object: ...


class Unsubscribable(Protocol):
    def off(self) -> object: ...


@dataclass(frozen=True, slots=True)
class Disposer:
    """A release action for one owned resource.

    Prefer the kind-specific constructors, which bind the right method:

        >>> store.own(Disposer.destroy(child_store))
        >>> store.own(Disposer.unsubscribe(emitter_subscription))

    Attributes:
        kind: Which capability releases the resource
        release: Zero-argument callable performing the release
        label: Short description for log messages
    """

    kind: DisposerKind
    release: Callable[[], object]
    label: str = ""

    @classmethod
    def destroy(cls, obj: Destroyable, label: str = "") -> Disposer:
        return cls(DisposerKind.DESTROY, obj.destroy, label or type(obj).__name__)

    @classmethod
    def remove(cls, obj: Removable, label: str = "") -> Disposer:
        return cls(DisposerKind.REMOVE, obj.remove, label or type(obj).__name__)

    @classmethod
    def unsubscribe(cls, obj: Unsubscribable, label: str = "") -> Disposer:
        return cls(DisposerKind.UNSUBSCRIBE, obj.off, label or type(obj).__name__)

    def __call__(self) -> None:
        self.release()
