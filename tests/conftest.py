"""Pytest configuration and shared fixtures."""

import io
import itertools

import pytest


@pytest.fixture
def id_factory():
    """Deterministic reference-name generator: ref-1, ref-2, ..."""
    counter = itertools.count(1)
    return lambda: f"ref-{next(counter)}"


@pytest.fixture
def stream():
    """In-memory text stream for console output."""
    return io.StringIO()
