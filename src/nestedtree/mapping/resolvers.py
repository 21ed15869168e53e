"""
Field role resolvers.

A resolver answers which structural roles a declared property carries. The
driver depends on the `RoleResolver` protocol only; roles may come from an
explicit registration table or from pydantic field metadata.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel

from nestedtree.core.types import TreeRole
from nestedtree.mapping.markers import TreeMarker
from nestedtree.mapping.metadata import TypeDescriptor


@runtime_checkable
class RoleResolver(Protocol):
    """Capability that reads the role markers attached to a property."""

    def roles_for(self, meta: TypeDescriptor, property_name: str) -> set[TreeRole]: ...


@dataclass
class ResolverConfig:
    """Configuration for role resolvers."""

    namespace: str = "tree"  # json_schema_extra key holding role names

    @classmethod
    def from_dict(cls, config: dict | None = None) -> "ResolverConfig":
        """Factory method to create config from dict with defaults."""
        if config is None:
            config = {}
        return cls(**config)


def parse_role(value: TreeRole | TreeMarker | str) -> TreeRole:
    """
    Normalize a role given as enum member, marker instance or role name.

    Raises:
        ValueError: If the value does not name a known role
    """
    if isinstance(value, TreeRole):
        return value
    if isinstance(value, TreeMarker):
        return value.role
    try:
        return TreeRole(str(value).strip().lower())
    except ValueError:
        valid = ", ".join(role.value for role in TreeRole)
        raise ValueError(f"Unknown tree role {value!r}, expected one of: {valid}")


class RegistryRoleResolver:
    """Role resolver backed by an explicit registration table.

    Roles are registered per (type name, property name):

        resolver = RegistryRoleResolver()
        resolver.register("Category", "lft", TreeRole.LEFT)
        resolver.register("Category", "parent", "parent")
    """

    def __init__(self):
        self._roles: dict[tuple[str, str], set[TreeRole]] = {}

    def register(
        self, type_name: str, property_name: str, *roles: TreeRole | str
    ) -> "RegistryRoleResolver":
        """
        Attach one or more roles to a property.

        Params:
            type_name: Name of the record type
            property_name: Property carrying the roles
            roles: Roles as TreeRole members or role names

        Returns:
            self, for chaining

        Raises:
            ValueError: If a role name is unknown
        """
        parsed = {parse_role(role) for role in roles}
        self._roles.setdefault((type_name, property_name), set()).update(parsed)
        return self

    def roles_for(self, meta: TypeDescriptor, property_name: str) -> set[TreeRole]:
        return set(self._roles.get((meta.name, property_name), ()))


class ModelRoleResolver:
    """Role resolver reading markers from pydantic model fields.

    A field carries a role either through a marker in its `Annotated`
    metadata (`Annotated[int, TreeLeft()]`) or through the configured
    namespace key of `json_schema_extra`
    (`Field(json_schema_extra={"tree": "left"})`; a list of names is accepted).
    """

    def __init__(
        self,
        models: Iterable[type[BaseModel]] = (),
        config: ResolverConfig | None = None,
    ):
        self.config = config or ResolverConfig()
        self._models: dict[str, type[BaseModel]] = {}
        for model in models:
            self.register_model(model)

    def register_model(self, model: type[BaseModel]) -> "ModelRoleResolver":
        """
        Make a model's field markers visible under its class name.

        Raises:
            ValueError: If another model with the same class name is registered
        """
        existing = self._models.get(model.__name__)
        if existing is not None and existing is not model:
            raise ValueError(
                f"Model name '{model.__name__}' already registered for "
                f"{existing.__module__}.{existing.__qualname__}"
            )
        self._models[model.__name__] = model
        return self

    def roles_for(self, meta: TypeDescriptor, property_name: str) -> set[TreeRole]:
        model = self._models.get(meta.name)
        if model is None:
            return set()
        field_info = model.model_fields.get(property_name)
        if field_info is None:
            return set()

        roles = {
            item.role for item in field_info.metadata if isinstance(item, TreeMarker)
        }
        extra = field_info.json_schema_extra
        if isinstance(extra, dict) and self.config.namespace in extra:
            roles.update(parse_role(role) for role in _as_list(extra[self.config.namespace]))
        return roles


def _as_list(value: Any) -> list:
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]
