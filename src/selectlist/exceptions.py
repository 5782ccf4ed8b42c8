"""Custom exception hierarchy for selectlist.

The core select-list operations are total and never raise these.  They
exist for the CLI layer, where user input can be invalid and optional
UI packages can be missing.  Every exception rendered by the CLI error
boundary must inherit from :class:`SelectListError`.

Hierarchy
---------
SelectListError
├── InvalidSelectionError
├── NoMatchError
├── SelectionCancelledError
└── MissingDependencyError
"""

from __future__ import annotations


class SelectListError(Exception):
    """Base exception for all selectlist errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Selection -------------------------------------------------------------

class InvalidSelectionError(SelectListError):
    """Raised when the requested selected position does not exist."""


class NoMatchError(SelectListError):
    """Raised in strict mode when no item satisfies the match text."""


class SelectionCancelledError(SelectListError):
    """Raised when the user cancels the interactive prompt."""


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(SelectListError):
    """Raised when an optional UI dependency is not installed."""


def install_hint(package: str) -> str:
    """Return the standard install instruction for *package*."""
    return f"{package} is not installed. Install with: pip install {package}"
