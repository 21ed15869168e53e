"""
Tests for the tree metadata exception classes.

This module tests that each error carries the owning type and the offending
field or roles, and formats the expected diagnostic message.
"""

import pytest

from nestedtree.exceptions import (
    InvalidAssociationError,
    InvalidFieldTypeError,
    MissingFieldError,
    MissingRolesError,
    TreeMappingError,
)


class TestErrorHierarchy:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "error",
        [
            MissingFieldError("left", "lft", "Category"),
            InvalidFieldTypeError("right", "rgt", "Category"),
            InvalidAssociationError("parent", "Category"),
            MissingRolesError("Category", ["ancestor"]),
        ],
    )
    def test_all_errors_are_tree_mapping_errors(self, error):
        """Test every error derives from the base and carries the type name."""
        assert isinstance(error, TreeMappingError)
        assert error.type_name == "Category"


class TestMessages:
    """Tests for diagnostic messages."""

    def test_missing_field_message(self):
        error = MissingFieldError("level", "depth", "Menu")

        assert error.role == "level"
        assert error.field_name == "depth"
        assert str(error) == "Unable to find 'level' - [depth] as mapped property in entity - Menu"

    def test_invalid_field_type_message(self):
        error = InvalidFieldTypeError("left", "lft", "Menu", actual="string")

        assert error.expected == "integer"
        assert error.actual == "string"
        assert "Tree left field - [lft]" in str(error)
        assert str(error).endswith("must be 'integer' in class - Menu")

    def test_invalid_field_type_messages_distinguish_roles(self):
        """Test that the role name makes errors for different roles distinct."""
        messages = {
            str(InvalidFieldTypeError(role, "f", "Menu")) for role in ("left", "right", "level")
        }

        assert len(messages) == 3

    def test_invalid_association_message(self):
        error = InvalidAssociationError("owner", "Menu")

        assert error.field_name == "owner"
        assert "ancestor field - [owner] in class - Menu" in str(error)

    def test_missing_roles_message(self):
        error = MissingRolesError("Menu", ["ancestor", "left", "right"])

        assert error.missing == ["ancestor", "left", "right"]
        assert str(error) == "Missing properties: ancestor, left, right in class - Menu"

    def test_missing_roles_copies_list(self):
        missing = ["left"]
        error = MissingRolesError("Menu", missing)
        missing.append("right")

        assert error.missing == ["left"]
