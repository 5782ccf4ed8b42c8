"""CLI console helpers with optional Rich support.

Two proxies are exposed:

* :data:`console` — diagnostics and error messages, written to stderr.
* :data:`output` — the rendered select list itself, written to stdout.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``, ``--plain``)
remain functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TextIO

from selectlist.exceptions import MissingDependencyError, install_hint


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(install_hint("rich")) from exc
    return Console


def _load_rich_escape() -> Callable[[str], str]:
    """Return ``rich.markup.escape`` or raise ``MissingDependencyError``."""
    try:
        from rich.markup import escape
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(install_hint("rich")) from exc
    return escape


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr or stdout."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def _stream(self) -> TextIO:
        return sys.stderr if self._stderr else sys.stdout

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain ``print``.

        String objects are interpreted as Rich markup; use
        :meth:`print_labelled` for text that may contain brackets.
        """
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except MissingDependencyError:
            print(*objects, file=self._stream())
            return
        rich_console.print(*objects)

    def print_labelled(self, label: str, text: str, *, style: str) -> None:
        """Print ``"<label> <text>"`` with only *label* styled.

        *text* is escaped, so user-supplied brackets such as ``[/x]`` are
        shown literally instead of being parsed as markup.
        """
        try:
            rich_console = get_rich_console(stderr=self._stderr)
            escape = _load_rich_escape()
        except MissingDependencyError:
            print(f"{label} {text}", file=self._stream())
            return
        rich_console.print(f"[{style}]{escape(label)}[/{style}] {escape(text)}")


console = _ConsoleProxy(stderr=True)
output = _ConsoleProxy(stderr=False)
