"""
nestedtree - nested-set tree metadata for record types

nestedtree reads which fields of a record type store the left and right
boundaries, the level and the parent reference of a nested-set tree, and
rejects incomplete or ill-typed declarations.
"""

from importlib.metadata import version

from nestedtree.core.types import TreeConfig, TreeRole
from nestedtree.mapping import (
    ClassMetadata,
    Entity,
    ModelRoleResolver,
    RegistryRoleResolver,
    TreeMetadataDriver,
)

__version__ = version("nestedtree")

__all__ = [
    "__version__",
    "TreeConfig",
    "TreeRole",
    "ClassMetadata",
    "Entity",
    "TreeMetadataDriver",
    "RegistryRoleResolver",
    "ModelRoleResolver",
]
