"""Rendering of a select list for the CLI layer.

Two renderers are provided:

* :func:`render_plain` — one item per line, ``>`` marks the selection.
  Pure string building; needs no optional dependency.
* :func:`display_table` — a Rich table written to stdout.

Both derive their per-item presentation through
:func:`~selectlist.core.operations.map_by`, so the selection marker is
decided by the select list itself rather than by index arithmetic.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from selectlist.cli.console import output
from selectlist.core.models import SelectList
from selectlist.core.operations import map_by, to_list
from selectlist.exceptions import MissingDependencyError, install_hint

SELECTED_MARKER: str = ">"
UNSELECTED_MARKER: str = " "


def _import_rich_table() -> tuple[type[Any], Callable[[str], str]]:
    """Import rich table and markup escaping lazily."""
    try:
        from rich.markup import escape
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(install_hint("rich")) from exc
    return Table, escape


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms, no I/O)
# ---------------------------------------------------------------------------

def _marker(is_selected: bool) -> str:
    return SELECTED_MARKER if is_selected else UNSELECTED_MARKER


def _plain_line(is_selected: bool, item: str) -> str:
    """Build one plain-output line, e.g. ``"> banana"``."""
    return f"{_marker(is_selected)} {item}"


def render_plain(zipper: SelectList[str]) -> str:
    """Render *zipper* as newline-separated lines, selection marked."""
    return "\n".join(to_list(map_by(_plain_line, zipper)))


# ---------------------------------------------------------------------------
# Rich table display
# ---------------------------------------------------------------------------

def display_table(zipper: SelectList[str], *, title: str = "Items") -> None:
    """Print a Rich table of *zipper* with the selected row highlighted."""
    table_class, escape = _import_rich_table()

    table = table_class(
        title=title,
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("", justify="center", width=1)
    table.add_column("Item", justify="left", min_width=10)

    rows = to_list(map_by(lambda is_selected, item: (is_selected, item), zipper))
    for position, (is_selected, item) in enumerate(rows):
        table.add_row(
            str(position),
            _marker(is_selected),
            escape(item),
            style="bold green" if is_selected else None,
        )

    output.print(table)
