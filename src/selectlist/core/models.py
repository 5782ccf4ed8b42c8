"""Domain models for selectlist.

Both models are **frozen** dataclasses — immutable value objects with
no behaviour beyond data access.  They carry zero I/O, zero
dependencies on external packages, and must remain pure across the
entire lifecycle.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Select list
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SelectList(Generic[T]):
    """A nonempty sequence with exactly one selected element.

    The full sequence is ``before + (selected,) + after``.  Build
    instances through :func:`~selectlist.core.operations.from_lists` or
    :func:`~selectlist.core.operations.singleton`, which normalise the
    surrounding segments to tuples so that equality stays structural.
    """

    before: tuple[T, ...]
    """Elements preceding the selection, farthest first."""

    selected: T
    """The single selected element."""

    after: tuple[T, ...]
    """Elements following the selection, nearest first."""

    def __len__(self) -> int:
        return len(self.before) + 1 + len(self.after)

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[T]:
        yield from self.before
        yield self.selected
        yield from self.after


# ---------------------------------------------------------------------------
# Segments view
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Segments(Generic[T]):
    """The three parts of a :class:`SelectList` as one structure.

    Iterating yields ``before``, ``selected`` and ``after`` in that
    order, so ``from_lists(*segments(z)) == z``.
    """

    before: tuple[T, ...]
    selected: T
    after: tuple[T, ...]

    def __iter__(self) -> Iterator[object]:
        return iter((self.before, self.selected, self.after))
