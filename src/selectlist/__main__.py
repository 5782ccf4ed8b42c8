"""Allow ``python -m selectlist`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m selectlist`` behaves identically to the ``selectlist``
console script.
"""

from __future__ import annotations

from selectlist.cli.app import cli

if __name__ == "__main__":
    cli()
