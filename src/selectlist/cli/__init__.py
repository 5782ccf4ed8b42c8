"""CLI layer — argument parsing, user interaction, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, but the ``core`` layer must never import from ``cli``.
"""
