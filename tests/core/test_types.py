"""
Tests for the role vocabulary and TreeConfig.
"""

import pytest
from pydantic import ValidationError

from nestedtree.core.types import (
    MANDATORY_ROLES,
    VALID_BOUNDARY_TYPES,
    TreeConfig,
    TreeRole,
)


class TestTreeRole:
    """Tests for TreeRole."""

    def test_values(self):
        assert [role.value for role in TreeRole] == ["left", "right", "parent", "level"]

    def test_parent_label_is_ancestor(self):
        """Test the user-facing label of the parent role."""
        assert TreeRole.PARENT.label == "ancestor"
        assert TreeRole.LEFT.label == "left"
        assert TreeRole.LEVEL.label == "level"

    def test_mandatory_roles(self):
        assert MANDATORY_ROLES == (TreeRole.PARENT, TreeRole.LEFT, TreeRole.RIGHT)
        assert TreeRole.LEVEL not in MANDATORY_ROLES

    def test_valid_boundary_types(self):
        assert VALID_BOUNDARY_TYPES == {"integer", "smallint", "bigint"}


class TestTreeConfig:
    """Tests for the validated configuration object."""

    def test_as_dict_without_level(self):
        config = TreeConfig.from_mapping({"left": "lft", "right": "rgt", "parent": "parent"})

        assert config.as_dict() == {"left": "lft", "right": "rgt", "parent": "parent"}

    def test_as_dict_with_level(self):
        config = TreeConfig(left="lft", right="rgt", parent="parent", level="lvl")

        assert config.as_dict()["level"] == "lvl"

    def test_field_for(self):
        config = TreeConfig(left="lft", right="rgt", parent="up")

        assert config.field_for(TreeRole.PARENT) == "up"
        assert config.field_for(TreeRole.LEVEL) is None

    def test_frozen(self):
        """Test that a built configuration cannot be changed."""
        config = TreeConfig(left="lft", right="rgt", parent="parent")

        with pytest.raises(ValidationError):
            config.left = "other"

    def test_mandatory_fields_required(self):
        with pytest.raises(ValidationError):
            TreeConfig.from_mapping({"left": "lft"})
