"""
Shared test fixtures and utilities for the nestedtree test suite.
"""

import pytest

from nestedtree.core.types import TreeRole
from nestedtree.mapping import ClassMetadata, RegistryRoleResolver, TreeMetadataDriver


@pytest.fixture
def resolver():
    """Empty explicit-registration role resolver."""
    return RegistryRoleResolver()


@pytest.fixture
def driver(resolver):
    """Driver reading roles from the `resolver` fixture."""
    return TreeMetadataDriver(resolver)


@pytest.fixture
def category_meta():
    """Category type with left, right, parent and level fields (no roles registered)."""
    return (
        ClassMetadata("Category")
        .add_field("id", "integer")
        .add_field("title", "string")
        .add_field("lft", "integer")
        .add_field("rgt", "integer")
        .add_association("parent", "Category")
        .add_association("children", "Category", single_valued=False)
        .add_field("lvl", "integer")
    )


@pytest.fixture
def category_roles(resolver):
    """Register the full set of tree roles on the Category fields."""
    resolver.register("Category", "lft", TreeRole.LEFT)
    resolver.register("Category", "rgt", TreeRole.RIGHT)
    resolver.register("Category", "parent", TreeRole.PARENT)
    resolver.register("Category", "lvl", TreeRole.LEVEL)
    return resolver
