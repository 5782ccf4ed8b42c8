"""Predicate search that relocates the selection.

Search order (enforced by :func:`select`):

1. **Pivot** — the currently selected element.  If it matches, the
   list is returned unchanged.
2. **Before** — scanned from the start of the sequence towards the
   pivot.
3. **After** — scanned from the pivot towards the end.

Step 1 is the one counter-intuitive rule: the selected element wins
ties, even when an element of ``before`` also matches.  A plain
left-to-right scan of the whole list gets this wrong.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from selectlist.core.models import SelectList

T = TypeVar("T")


def _split_at(items: tuple[T, ...], index: int) -> SelectList[T]:
    """Select ``items[index]``, everything around it keeping its order."""
    return SelectList(
        before=items[:index],
        selected=items[index],
        after=items[index + 1:],
    )


def select(
    predicate: Callable[[T], bool],
    zipper: SelectList[T],
) -> SelectList[T]:
    """Select the first element satisfying *predicate*.

    The currently selected element is tested first and keeps the
    selection when it matches.  Otherwise the first match in
    left-to-right order becomes selected, with ``before`` and ``after``
    rebuilt around it.  When nothing matches, *zipper* is returned
    unchanged.

    Exceptions raised by *predicate* propagate.  The predicate is
    called at most once per element.

    Examples
    --------
    >>> from selectlist import from_lists
    >>> select(lambda x: x > 1, from_lists([1, 2, 3], 4, [5, 2, 1]))
    SelectList(before=(1,), selected=2, after=(3, 4, 5, 2, 1))
    >>> select(lambda x: x > 1, from_lists([1, 2, 3], 4, []))
    SelectList(before=(1, 2, 3), selected=4, after=())
    """
    if predicate(zipper.selected):
        return zipper

    items = (*zipper.before, zipper.selected, *zipper.after)
    pivot = len(zipper.before)

    for index, item in enumerate(items):
        if index == pivot:
            continue
        if predicate(item):
            return _split_at(items, index)

    return zipper
