"""
Type descriptors consumed by the tree metadata driver.

A type descriptor is the already-reflected view of a record type: its
declared properties, the storage type of each mapped field, and its
associations. The driver only reads from it. `ClassMetadata` is the
explicit-registration implementation; `nestedtree.mapping.models` builds one
from a pydantic model.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pydantic import BaseModel


@dataclass(frozen=True)
class PropertyInfo:
    """A property declared on a record type."""

    name: str
    is_private: bool = False


@dataclass(frozen=True)
class FieldMapping:
    """Column mapping of a scalar field."""

    type: str
    inherited: str | None = None  # name of the ancestor owning the mapping


@dataclass(frozen=True)
class AssociationMapping:
    """Mapping of a reference to other records."""

    target: str
    single_valued: bool = True
    inherited: str | None = None


@runtime_checkable
class TypeDescriptor(Protocol):
    """Read-only view of a reflected record type."""

    name: str
    is_mapped_superclass: bool

    def properties(self) -> Iterable[PropertyInfo]: ...

    def has_field(self, name: str) -> bool: ...

    def field_type(self, name: str) -> str | None: ...

    def is_single_valued_association(self, name: str) -> bool: ...

    def is_collection_valued_association(self, name: str) -> bool: ...

    def is_inherited_field(self, name: str) -> bool: ...

    def is_inherited_association(self, name: str) -> bool: ...


@dataclass
class ClassMetadata:
    """
    Explicitly registered description of a record type.

    Properties keep their declaration order. A property may be declared
    without any mapping, in which case `has_field` is false for it.

    Params:
        name: Identifier of the record type, used in diagnostics
        is_mapped_superclass: Whether the type only contributes fields to subclasses
    """

    name: str
    is_mapped_superclass: bool = False
    declared: list[PropertyInfo] = field(default_factory=list)
    field_mappings: dict[str, FieldMapping] = field(default_factory=dict)
    association_mappings: dict[str, AssociationMapping] = field(default_factory=dict)

    @classmethod
    def from_model(cls, model: type["BaseModel"]) -> "ClassMetadata":
        """Reflect a pydantic model. See `nestedtree.mapping.models.describe_model`."""
        # Import here to avoid circular imports
        from nestedtree.mapping.models import describe_model

        return describe_model(model)

    def declare(self, name: str, is_private: bool = False) -> "ClassMetadata":
        """Declare an unmapped property."""
        if not any(prop.name == name for prop in self.declared):
            self.declared.append(PropertyInfo(name, is_private))
        return self

    def add_field(
        self,
        name: str,
        type: str,
        is_private: bool = False,
        inherited: str | None = None,
    ) -> "ClassMetadata":
        """
        Declare a property and map it as a scalar column.

        Params:
            name: Property name
            type: Storage type (e.g. "integer", "string")
            is_private: Whether the property is private to the declaring type
            inherited: Name of the ancestor that owns the mapping, if any

        Returns:
            self, for chaining
        """
        self.declare(name, is_private)
        self.field_mappings[name] = FieldMapping(type=type, inherited=inherited)
        return self

    def add_association(
        self,
        name: str,
        target: str,
        single_valued: bool = True,
        is_private: bool = False,
        inherited: str | None = None,
    ) -> "ClassMetadata":
        """
        Declare a property and map it as an association.

        Params:
            name: Property name
            target: Name of the referenced record type
            single_valued: False for collections
            is_private: Whether the property is private to the declaring type
            inherited: Name of the ancestor that owns the association, if any

        Returns:
            self, for chaining
        """
        self.declare(name, is_private)
        self.association_mappings[name] = AssociationMapping(
            target=target, single_valued=single_valued, inherited=inherited
        )
        return self

    def properties(self) -> list[PropertyInfo]:
        return list(self.declared)

    def has_field(self, name: str) -> bool:
        return name in self.field_mappings

    def field_type(self, name: str) -> str | None:
        mapping = self.field_mappings.get(name)
        return mapping.type if mapping else None

    def is_single_valued_association(self, name: str) -> bool:
        mapping = self.association_mappings.get(name)
        return mapping is not None and mapping.single_valued

    def is_collection_valued_association(self, name: str) -> bool:
        mapping = self.association_mappings.get(name)
        return mapping is not None and not mapping.single_valued

    def is_inherited_field(self, name: str) -> bool:
        mapping = self.field_mappings.get(name)
        return mapping is not None and mapping.inherited is not None

    def is_inherited_association(self, name: str) -> bool:
        mapping = self.association_mappings.get(name)
        return mapping is not None and mapping.inherited is not None
