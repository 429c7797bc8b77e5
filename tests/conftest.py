"""Shared pytest fixtures for arrayof tests."""

import pytest

from arrayof import KindResolver, TypeRegistry


@pytest.fixture()
def resolver() -> KindResolver:
    """Resolver with an empty cache, isolated from the library default."""
    return KindResolver()


@pytest.fixture()
def registry() -> TypeRegistry:
    """Empty explicit type registry."""
    return TypeRegistry()
