"""Shared fixtures for the wren examples.

Each example directory holds an ``app.py`` that defines ``app`` at
module level. Tests get a freshly executed copy per test, so middleware
state (like the rate limiter's counters) never leaks between tests.
"""

import runpy
from pathlib import Path

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest):
    """The ``app`` defined by the sibling app.py of the requesting test."""
    namespace = runpy.run_path(str(Path(request.path).with_name("app.py")))
    return namespace["app"]
