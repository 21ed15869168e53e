"""
Exception classes for nested-set tree metadata extraction.

This module defines specific exception types for the configuration errors
that can occur while reading tree roles from a record type. All of them are
raised at mapping time and are fatal for the type being mapped.
"""


class TreeMappingError(Exception):
    """Base exception for all tree metadata errors."""

    def __init__(self, type_name: str, message: str):
        """
        Initialize the exception.

        Params:
            type_name: Name of the record type whose mapping failed
            message: Full diagnostic message
        """
        self.type_name = type_name
        super().__init__(message)


class MissingFieldError(TreeMappingError):
    """Raised when a role marker sits on a property that is not a mapped field."""

    def __init__(self, role: str, field_name: str, type_name: str):
        """
        Initialize the exception.

        Params:
            role: Role name carried by the marker ("left", "right" or "level")
            field_name: The property carrying the marker
            type_name: The record type that declares the property
        """
        self.role = role
        self.field_name = field_name
        super().__init__(
            type_name,
            f"Unable to find '{role}' - [{field_name}] as mapped property in entity - {type_name}",
        )


class InvalidFieldTypeError(TreeMappingError):
    """Raised when a boundary or level field has a non integer-like storage type."""

    def __init__(
        self,
        role: str,
        field_name: str,
        type_name: str,
        expected: str = "integer",
        actual: str | None = None,
    ):
        """
        Initialize the exception.

        Params:
            role: Role name carried by the marker ("left", "right" or "level")
            field_name: The offending field
            type_name: The record type that declares the field
            expected: Storage kind the role requires
            actual: Storage type found on the field, if any
        """
        self.role = role
        self.field_name = field_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            type_name,
            f"Tree {role} field - [{field_name}] type is not valid and must be '{expected}' in class - {type_name}",
        )


class InvalidAssociationError(TreeMappingError):
    """Raised when the parent marker is not on a single-valued association."""

    def __init__(self, field_name: str, type_name: str):
        """
        Initialize the exception.

        Params:
            field_name: The property carrying the parent marker
            type_name: The record type that declares the property
        """
        self.field_name = field_name
        super().__init__(
            type_name,
            f"Unable to find ancestor/parent child relation through ancestor field - [{field_name}] in class - {type_name}",
        )


class MissingRolesError(TreeMappingError):
    """Raised when a tree type lacks one or more mandatory roles."""

    def __init__(self, type_name: str, missing: list[str]):
        """
        Initialize the exception.

        Params:
            type_name: The record type being validated
            missing: Diagnostic labels of every absent mandatory role
        """
        self.missing = list(missing)
        super().__init__(
            type_name,
            f"Missing properties: {', '.join(self.missing)} in class - {type_name}",
        )
