"""
Reflection of pydantic models into type descriptors.

Record types are declared as `Entity` subclasses. Scalar fields get a storage
type from their annotation (or from an explicit `Column` marker), fields
annotated with another `Entity` become single-valued associations, and
collections of entities become collection-valued associations.
"""

import logging
import types
from datetime import date, datetime
from decimal import Decimal
from typing import Any, ClassVar, Union, get_args, get_origin

from attrs import frozen
from pydantic import BaseModel

from nestedtree.mapping.metadata import ClassMetadata

logger = logging.getLogger(__name__)


class Entity(BaseModel):
    """
    Base class for reflected record types.

    Set `__mapped_superclass__ = True` on a subclass whose fields are inlined
    into the mappings of its own subclasses.
    """

    __mapped_superclass__: ClassVar[bool] = False


@frozen
class Column:
    """Pins the storage type of a field, e.g. `Annotated[int, Column("bigint")]`."""

    type: str


SCALAR_STORAGE_TYPES: dict[Any, str] = {
    bool: "boolean",
    int: "integer",
    float: "float",
    str: "string",
    datetime: "datetime",
    date: "date",
    Decimal: "decimal",
}

COLLECTION_ORIGINS = frozenset({list, set, tuple, frozenset})


def is_mapped_superclass(model: type[BaseModel]) -> bool:
    """Check the flag on the class itself; subclasses do not inherit it."""
    return bool(vars(model).get("__mapped_superclass__", False))


def _strip_optional(annotation: Any) -> Any:
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_entity(annotation: Any) -> bool:
    return (
        isinstance(annotation, type)
        and get_origin(annotation) is None
        and issubclass(annotation, Entity)
    )


def _owning_class(model: type[BaseModel], name: str) -> type[BaseModel]:
    """Return the topmost entity in the MRO that maps the field itself.

    Mapped superclasses never own fields: their fields belong to the first
    entity below them.
    """
    for klass in reversed(model.__mro__):
        if (
            isinstance(klass, type)
            and issubclass(klass, Entity)
            and klass is not Entity
            and not is_mapped_superclass(klass)
            and name in klass.model_fields
        ):
            return klass
    return model


def describe_model(model: type[BaseModel]) -> ClassMetadata:
    """
    Build a ClassMetadata describing a pydantic model.

    A field owned by an ancestor entity is marked as inherited from it, also
    when that ancestor got the field from a mapped superclass. Fields whose
    type has no storage mapping are declared but left unmapped.

    Params:
        model: Entity subclass to reflect

    Returns:
        ClassMetadata with properties in field declaration order

    Raises:
        pydantic.errors.PydanticUndefinedAnnotation: If forward references
            cannot be resolved yet
    """
    if not model.__pydantic_complete__:
        model.model_rebuild()

    meta = ClassMetadata(
        name=model.__name__, is_mapped_superclass=is_mapped_superclass(model)
    )

    for name, field_info in model.model_fields.items():
        owner = _owning_class(model, name)
        inherited = owner.__name__ if owner is not model else None

        column = next(
            (item for item in field_info.metadata if isinstance(item, Column)), None
        )
        annotation = _strip_optional(field_info.annotation)
        origin = get_origin(annotation)

        if column is not None:
            meta.add_field(name, column.type, inherited=inherited)
        elif _is_entity(annotation):
            meta.add_association(
                name, annotation.__name__, single_valued=True, inherited=inherited
            )
        elif origin in COLLECTION_ORIGINS:
            args = [arg for arg in get_args(annotation) if arg is not Ellipsis]
            target = args[0] if args else None
            if _is_entity(target):
                meta.add_association(
                    name, target.__name__, single_valued=False, inherited=inherited
                )
            else:
                meta.declare(name)
        elif isinstance(annotation, type) and annotation in SCALAR_STORAGE_TYPES:
            meta.add_field(name, SCALAR_STORAGE_TYPES[annotation], inherited=inherited)
        else:
            logger.debug(
                "Field %s.%s has no storage mapping for %r", meta.name, name, annotation
            )
            meta.declare(name)

    return meta
