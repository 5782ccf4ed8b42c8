"""Interactive item selection for the CLI layer.

This module is responsible for:

* Prompting the user to choose an item via questionary arrow keys.
* Returning the chosen position (0-based) in the full sequence.

No select-list manipulation happens here; the caller relocates the
selection with :func:`~selectlist.core.search.select`.
"""

from __future__ import annotations

from typing import Any

from selectlist.core.models import SelectList
from selectlist.core.operations import map_by, to_list
from selectlist.exceptions import (
    MissingDependencyError,
    SelectionCancelledError,
    install_hint,
)


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(install_hint("questionary")) from exc
    return questionary


def _build_choice_label(position: int, item: str, *, is_selected: bool) -> str:
    """Build the single-line label shown in the questionary selector.

    Format: ``"  0.  banana  (current)"``
    """
    suffix = "  (current)" if is_selected else ""
    return f"  {position}.  {item}{suffix}"


def prompt_selection(zipper: SelectList[str]) -> int:
    """Prompt the user to pick one item of *zipper*.

    Returns
    -------
    int
        Position of the chosen item in ``to_list(zipper)``.

    Raises
    ------
    KeyboardInterrupt
        If the user presses Ctrl+C during selection.
    SelectionCancelledError
        If the user cancels the prompt (Esc / None return).
    """
    questionary = _import_questionary()

    flagged = to_list(map_by(lambda is_selected, item: (is_selected, item), zipper))
    choices = [
        questionary.Choice(
            title=_build_choice_label(position, item, is_selected=is_selected),
            value=position,
        )
        for position, (is_selected, item) in enumerate(flagged)
    ]

    chosen: int | None = questionary.select(
        "Select an item:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # Returns None on Ctrl+C / Esc

    if chosen is None:
        raise SelectionCancelledError(
            "No item selected.",
            hint="Use arrow keys to pick an item, then press Enter.",
        )

    return chosen
