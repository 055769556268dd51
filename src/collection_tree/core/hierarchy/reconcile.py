"""Keyed enter/update/exit matching between two render passes."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(frozen=True)
class Reconciliation(Generic[V]):
    entered: list[V] = field(default_factory=list)
    updated: list[V] = field(default_factory=list)
    exited: list[V] = field(default_factory=list)

    @property
    def present(self) -> list[V]:
        """Entered and updated values, in that order."""
        return [*self.entered, *self.updated]


def reconcile(previous: Mapping[K, V], current: Iterable[V], key: Callable[[V], K]) -> Reconciliation[V]:
    """Match ``current`` against ``previous`` by ``key``.

    ``entered`` and ``updated`` keep the order of ``current``; ``exited``
    keeps the order of ``previous`` and holds the previous values.
    """
    result: Reconciliation[V] = Reconciliation()
    seen: set[K] = set()
    for value in current:
        k = key(value)
        if k in seen:
            raise ValueError(f"Duplicate key {k!r} in render pass")
        seen.add(k)
        (result.updated if k in previous else result.entered).append(value)
    result.exited.extend(value for k, value in previous.items() if k not in seen)
    return result
