"""Shared pytest fixtures and configuration for the selectlist test suite.

Guidelines
----------
* Core tests must be pure — no side effects, no mocking.
* questionary and rich are mocked or hidden at the CLI boundary.
* Tests must not depend on terminal state.
"""

from __future__ import annotations
