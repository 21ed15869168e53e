"""
Core type definitions for nested-set tree metadata.

This module contains the structural roles a field can play in a nested-set
tree, the storage types accepted for boundary fields, and the validated
configuration object handed back to the mapping layer.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class TreeRole(Enum):
    """Structural roles a field can serve in the nested-set representation."""

    LEFT = "left"
    RIGHT = "right"
    PARENT = "parent"
    LEVEL = "level"

    @property
    def label(self) -> str:
        """User-facing name used in diagnostics."""
        # parent is reported as "ancestor" in missing-role messages
        if self is TreeRole.PARENT:
            return "ancestor"
        return self.value


# Storage types accepted for left, right and level fields
VALID_BOUNDARY_TYPES = frozenset({"integer", "smallint", "bigint"})

# Order matters: it is the order of the missing-roles message
MANDATORY_ROLES = (TreeRole.PARENT, TreeRole.LEFT, TreeRole.RIGHT)

TreeConfigDict = dict[str, str]


class TreeConfig(BaseModel):
    """
    Validated tree configuration of one record type.

    Maps each structural role to the name of the field serving it. Built once
    the extraction and completeness passes succeed and immutable afterwards.
    """

    model_config = ConfigDict(frozen=True)

    left: str
    right: str
    parent: str
    level: str | None = None

    @classmethod
    def from_mapping(cls, config: dict[str, Any]) -> "TreeConfig":
        """
        Build a TreeConfig from a role -> field name mapping.

        Params:
            config: Mapping produced by the extraction pass

        Returns:
            Frozen TreeConfig
        """
        return cls(**config)

    def as_dict(self) -> TreeConfigDict:
        """Return the role mapping, omitting level when no level field is set."""
        return self.model_dump(exclude_none=True)

    def field_for(self, role: TreeRole) -> str | None:
        """Return the field name serving the given role."""
        return getattr(self, role.value)
