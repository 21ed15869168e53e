"""
Core nestedtree components.

This package provides the role vocabulary and the configuration type shared
by the metadata drivers.
"""

from nestedtree.core.types import (
    MANDATORY_ROLES,
    VALID_BOUNDARY_TYPES,
    TreeConfig,
    TreeConfigDict,
    TreeRole,
)

__all__ = [
    "TreeRole",
    "TreeConfig",
    "TreeConfigDict",
    "VALID_BOUNDARY_TYPES",
    "MANDATORY_ROLES",
]
