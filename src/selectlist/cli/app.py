"""CLI application entry point and command routing for selectlist.

This module is the **sole error boundary** for the entire application.
It catches :class:`~selectlist.exceptions.SelectListError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No select-list logic lives here; construction, search and mapping
  are delegated to the core layer.
* Items are carried through the core as ``(position, item)`` pairs so
  that duplicate items can still be selected by position.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from selectlist.cli import exit_codes
from selectlist.cli.console import console
from selectlist.core.models import SelectList
from selectlist.core.operations import from_lists, map_values
from selectlist.core.search import select
from selectlist.exceptions import InvalidSelectionError, NoMatchError, SelectListError
from selectlist.version import __version__

Entry = tuple[int, str]


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``selectlist ITEM...``                  — render with item 0 selected
    * ``selectlist ITEM... --selected N``     — render with item N selected
    * ``selectlist ITEM... --match TEXT``     — move the selection by substring
    * ``selectlist ITEM... --pick``           — move the selection interactively
    * ``selectlist --version``
    """
    parser = argparse.ArgumentParser(
        prog="selectlist",
        description="Render a list with one selected item and move the selection.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "items",
        nargs="*",
        help="Items of the list, in order.",
    )
    parser.add_argument(
        "-s",
        "--selected",
        type=int,
        default=0,
        metavar="N",
        help="0-based position of the initially selected item (default: 0).",
    )
    relocate = parser.add_mutually_exclusive_group()
    relocate.add_argument(
        "-m",
        "--match",
        default=None,
        metavar="TEXT",
        help="Select the first item containing TEXT; the current item wins ties.",
    )
    relocate.add_argument(
        "-p",
        "--pick",
        action="store_true",
        help="Choose the selected item interactively.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when no item contains the --match TEXT (requires --match).",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print one item per line instead of a table.",
    )
    return parser


# ---------------------------------------------------------------------------
# Select-list wiring
# ---------------------------------------------------------------------------

def _build_select_list(items: Sequence[str], position: int) -> SelectList[Entry]:
    """Build a select list of ``(position, item)`` entries.

    Raises
    ------
    InvalidSelectionError
        If *position* does not address one of *items*.
    """
    if not 0 <= position < len(items):
        raise InvalidSelectionError(
            f"No item at position {position}.",
            hint=f"Use a position between 0 and {len(items) - 1}.",
        )
    entries = list(enumerate(items))
    return from_lists(entries[:position], entries[position], entries[position + 1:])


def _apply_match(
    zipper: SelectList[Entry],
    text: str,
    *,
    strict: bool,
) -> SelectList[Entry]:
    """Move the selection to the first entry containing *text*."""

    def contains(entry: Entry) -> bool:
        return text in entry[1]

    result = select(contains, zipper)
    if strict and not contains(result.selected):
        raise NoMatchError(
            f"No item contains {text!r}.",
            hint="Drop --strict to keep the current selection instead.",
        )
    return result


def _apply_pick(zipper: SelectList[Entry]) -> SelectList[Entry]:
    """Ask the user for an item and move the selection to it."""
    from selectlist.cli.prompt import prompt_selection

    chosen = prompt_selection(map_values(lambda entry: entry[1], zipper))
    return select(lambda entry: entry[0] == chosen, zipper)


def _render(zipper: SelectList[Entry], *, plain: bool) -> None:
    from selectlist.cli.render import display_table, render_plain

    items = map_values(lambda entry: entry[1], zipper)
    if plain:
        print(render_plain(items))
        return
    display_table(items)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the selectlist CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.strict and args.match is None:
        parser.error("--strict requires --match")

    if not args.items:
        parser.print_help()
        return exit_codes.SUCCESS

    zipper = _build_select_list(args.items, args.selected)

    if args.match is not None:
        zipper = _apply_match(zipper, args.match, strict=args.strict)
    elif args.pick:
        zipper = _apply_pick(zipper)

    _render(zipper, plain=args.plain)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _report_known_error(exc: SelectListError) -> int:
    """Show a :class:`SelectListError` and its hint; return the exit code."""
    console.print_labelled("Error:", str(exc), style="bold red")
    if exc.hint:
        console.print_labelled("Hint:", exc.hint, style="yellow")
    return exit_codes.GENERAL_ERROR


def _report_unexpected_error(exc: Exception) -> int:
    """Show an unhandled exception as a one-line report; return the exit code."""
    console.print_labelled(
        "Unexpected error.",
        f"Please report this issue.\n  {type(exc).__name__}: {exc}",
        style="bold red",
    )
    return exit_codes.UNEXPECTED_ERROR


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` so the process never exits with a raw stack trace
    during normal usage.  Error text is printed escaped: match text and
    items come straight from argv and may contain Rich markup brackets.
    """
    try:
        code = main()
    except SelectListError as exc:
        code = _report_known_error(exc)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        code = exit_codes.KEYBOARD_INTERRUPT
    except Exception as exc:  # noqa: BLE001
        code = _report_unexpected_error(exc)
    sys.exit(code)
