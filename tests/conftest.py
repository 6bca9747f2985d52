"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest
from sample_domain import Person

from spec_query.operators_memory import build_default_registry


@pytest.fixture
def registry():
    """Fresh in-memory operator registry."""
    return build_default_registry()


@pytest.fixture
def people() -> list[Person]:
    return [
        Person("Ana", 30, True),
        Person("Bob", 70, True),
        Person("VIPCarl", 40, False),
        Person("Dana", 70, False),
    ]
