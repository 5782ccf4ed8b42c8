"""Construction, access, and transformation of select lists.

Every function in this module is a **pure** transformation — no I/O,
no side effects, and no failure modes.  Functions take the select list
as their *last* argument so they compose with :func:`functools.partial`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from selectlist.core.models import Segments, SelectList

T = TypeVar("T")
U = TypeVar("U")


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def from_lists(
    before: Iterable[T],
    selected: T,
    after: Iterable[T],
) -> SelectList[T]:
    """Build a select list from its three parts.

    Any iterable is accepted for *before* and *after*; both are copied
    into tuples.
    """
    return SelectList(before=tuple(before), selected=selected, after=tuple(after))


def singleton(value: T) -> SelectList[T]:
    """Return a select list holding only *value*, selected."""
    return SelectList(before=(), selected=value, after=())


# ---------------------------------------------------------------------------
# Access
# ---------------------------------------------------------------------------

def before(zipper: SelectList[T]) -> tuple[T, ...]:
    return zipper.before


def after(zipper: SelectList[T]) -> tuple[T, ...]:
    return zipper.after


def selected(zipper: SelectList[T]) -> T:
    return zipper.selected


def segments(zipper: SelectList[T]) -> Segments[T]:
    """Return all three parts at once; the inverse of :func:`from_lists`."""
    return Segments(
        before=zipper.before,
        selected=zipper.selected,
        after=zipper.after,
    )


def to_list(zipper: SelectList[T]) -> list[T]:
    """Flatten to ``before + [selected] + after``, forgetting the selection."""
    return [*zipper.before, zipper.selected, *zipper.after]


# ---------------------------------------------------------------------------
# Transformation
# ---------------------------------------------------------------------------

def map_by(
    transform: Callable[[bool, T], U],
    zipper: SelectList[T],
) -> SelectList[U]:
    """Apply *transform* to every element, telling it which one is selected.

    ``transform(is_selected, element)`` receives ``True`` for the
    selected element only.  Each output element keeps the position of
    its input element.  No ordering of the calls is promised.
    """
    return SelectList(
        before=tuple(transform(False, elem) for elem in zipper.before),
        selected=transform(True, zipper.selected),
        after=tuple(transform(False, elem) for elem in zipper.after),
    )


def map_values(
    transform: Callable[[T], U],
    zipper: SelectList[T],
) -> SelectList[U]:
    """Apply *transform* to every element, keeping the selection in place."""
    return map_by(lambda _is_selected, elem: transform(elem), zipper)


def append(extra: Iterable[T], zipper: SelectList[T]) -> SelectList[T]:
    """Add *extra* to the end of the sequence."""
    return SelectList(
        before=zipper.before,
        selected=zipper.selected,
        after=zipper.after + tuple(extra),
    )


def prepend(extra: Iterable[T], zipper: SelectList[T]) -> SelectList[T]:
    """Add *extra* to the start of the sequence."""
    return SelectList(
        before=tuple(extra) + zipper.before,
        selected=zipper.selected,
        after=zipper.after,
    )
