"""Core layer — the select-list value type and its pure operations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Every operation is total; nothing here raises on its own account.
"""

from selectlist.core.models import Segments, SelectList
from selectlist.core.operations import (
    after,
    append,
    before,
    from_lists,
    map_by,
    map_values,
    prepend,
    segments,
    selected,
    singleton,
    to_list,
)
from selectlist.core.search import select

__all__: list[str] = [
    "Segments",
    "SelectList",
    "after",
    "append",
    "before",
    "from_lists",
    "map_by",
    "map_values",
    "prepend",
    "segments",
    "select",
    "selected",
    "singleton",
    "to_list",
]
