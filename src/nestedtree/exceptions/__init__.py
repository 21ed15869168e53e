"""
nestedtree exception classes.

This package provides all exception types raised while extracting and
validating nested-set tree metadata.
"""

from nestedtree.exceptions.core import (
    InvalidAssociationError,
    InvalidFieldTypeError,
    MissingFieldError,
    MissingRolesError,
    TreeMappingError,
)

__all__ = [
    "TreeMappingError",
    "MissingFieldError",
    "InvalidFieldTypeError",
    "InvalidAssociationError",
    "MissingRolesError",
]
