"""selectlist — a nonempty list with exactly one selected element.

Pure, immutable value type with a small functional operation set.
The CLI layer is a thin demonstration surface over the same API.
"""

from selectlist.core import (
    Segments,
    SelectList,
    after,
    append,
    before,
    from_lists,
    map_values,
    map_by,
    prepend,
    segments,
    select,
    selected,
    singleton,
    to_list,
)
from selectlist.version import __version__

__all__: list[str] = [
    "SelectList",
    "Segments",
    "__version__",
    "after",
    "append",
    "before",
    "from_lists",
    "map_values",
    "map_by",
    "prepend",
    "segments",
    "select",
    "selected",
    "singleton",
    "to_list",
]
