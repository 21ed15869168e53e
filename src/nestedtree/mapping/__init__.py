"""
nestedtree mapping components.

This package provides type descriptors, role resolvers and the metadata
driver that turns a record type's declarations into a tree configuration.
"""

from nestedtree.mapping.driver import Driver, TreeMetadataDriver
from nestedtree.mapping.markers import TreeLeft, TreeLevel, TreeParent, TreeRight
from nestedtree.mapping.metadata import (
    AssociationMapping,
    ClassMetadata,
    FieldMapping,
    PropertyInfo,
    TypeDescriptor,
)
from nestedtree.mapping.models import Column, Entity, describe_model
from nestedtree.mapping.registry import TreeMetadataRegistry
from nestedtree.mapping.resolvers import (
    ModelRoleResolver,
    RegistryRoleResolver,
    ResolverConfig,
    RoleResolver,
)

__all__ = [
    "Driver",
    "TreeMetadataDriver",
    "TreeMetadataRegistry",
    "TypeDescriptor",
    "ClassMetadata",
    "PropertyInfo",
    "FieldMapping",
    "AssociationMapping",
    "Entity",
    "Column",
    "describe_model",
    "RoleResolver",
    "ResolverConfig",
    "RegistryRoleResolver",
    "ModelRoleResolver",
    "TreeLeft",
    "TreeRight",
    "TreeParent",
    "TreeLevel",
]
