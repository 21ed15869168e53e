"""
Metadata driver for nested-set trees.

The driver reads the structural role markers of a record type through a
`RoleResolver`, checks each marked field against the requirements of its
role, and verifies that a tree type declares every mandatory role.

Extraction is fail-fast: the first invalid field aborts the pass and the
caller's configuration is left untouched. Missing roles are reported together
in a single error.
"""

import logging
from abc import ABC, abstractmethod

from nestedtree.core.types import (
    MANDATORY_ROLES,
    VALID_BOUNDARY_TYPES,
    TreeConfig,
    TreeConfigDict,
    TreeRole,
)
from nestedtree.exceptions import (
    InvalidAssociationError,
    InvalidFieldTypeError,
    MissingFieldError,
    MissingRolesError,
)
from nestedtree.mapping.metadata import PropertyInfo, TypeDescriptor
from nestedtree.mapping.resolvers import RoleResolver

logger = logging.getLogger(__name__)

# Order in which a property's markers are checked; the last assignment wins
ROLE_CHECK_ORDER = (TreeRole.LEFT, TreeRole.RIGHT, TreeRole.PARENT, TreeRole.LEVEL)


class Driver(ABC):
    """Interface of extension metadata drivers."""

    @abstractmethod
    def read_extended_metadata(
        self, meta: TypeDescriptor, config: TreeConfigDict
    ) -> None:
        """Populate `config` from the declarations of `meta`."""

    @abstractmethod
    def validate_full_metadata(
        self, meta: TypeDescriptor, config: TreeConfigDict
    ) -> None:
        """Check a configuration once every field has been read."""


class TreeMetadataDriver(Driver):
    """Extracts and validates the nested-set configuration of a record type.

    Params:
        resolver: Capability reporting the role markers of each property
    """

    def __init__(self, resolver: RoleResolver):
        self.resolver = resolver

    def extract(
        self, meta: TypeDescriptor, config: TreeConfigDict | None = None
    ) -> TreeConfigDict:
        """
        Scan the declared properties of `meta` and collect their tree roles.

        Properties are visited in declaration order. Properties excluded by
        ownership rules are skipped even when marked. When two properties set
        the same role, the later one wins.

        Params:
            meta: Reflected record type
            config: Container to populate; a new dict when omitted

        Returns:
            The populated container

        Raises:
            MissingFieldError: If a left/right/level marker is on an unmapped property
            InvalidFieldTypeError: If a left/right/level field is not integer-like
            InvalidAssociationError: If the parent marker is not on a single-valued association
        """
        if config is None:
            config = {}

        found: TreeConfigDict = {}
        for prop in meta.properties():
            if self._is_excluded(meta, prop):
                logger.debug("Skipping %s.%s: not owned by type", meta.name, prop.name)
                continue

            roles = self.resolver.roles_for(meta, prop.name)
            for role in ROLE_CHECK_ORDER:
                if role not in roles:
                    continue
                if role is TreeRole.PARENT:
                    self._check_parent(meta, prop.name)
                else:
                    self._check_boundary(meta, prop.name, role)

                previous = found.get(role.value)
                if previous is not None and previous != prop.name:
                    logger.debug(
                        "Tree %s of %s reassigned from %s to %s",
                        role.value,
                        meta.name,
                        previous,
                        prop.name,
                    )
                found[role.value] = prop.name

        config.update(found)
        return config

    def validate_complete(self, meta: TypeDescriptor, config: TreeConfigDict) -> None:
        """
        Verify that a tree configuration declares every mandatory role.

        An empty configuration is not a tree and passes. Otherwise parent,
        left and right are required; level is optional.

        Params:
            meta: Reflected record type
            config: Result of `extract`

        Raises:
            MissingRolesError: Listing every absent mandatory role
        """
        if not config:
            return

        missing = [role.label for role in MANDATORY_ROLES if role.value not in config]
        if missing:
            raise MissingRolesError(meta.name, missing)

    def load(self, meta: TypeDescriptor) -> TreeConfig | None:
        """
        Run extraction and validation on a fresh configuration.

        Returns:
            The frozen TreeConfig, or None when the type has no tree roles
        """
        config = self.extract(meta)
        self.validate_complete(meta, config)
        if not config:
            return None
        logger.debug("Loaded tree configuration of %s: %s", meta.name, config)
        return TreeConfig.from_mapping(config)

    def read_extended_metadata(
        self, meta: TypeDescriptor, config: TreeConfigDict
    ) -> None:
        self.extract(meta, config)

    def validate_full_metadata(
        self, meta: TypeDescriptor, config: TreeConfigDict
    ) -> None:
        self.validate_complete(meta, config)

    @staticmethod
    def _is_excluded(meta: TypeDescriptor, prop: PropertyInfo) -> bool:
        return (
            (meta.is_mapped_superclass and not prop.is_private)
            or meta.is_inherited_field(prop.name)
            or meta.is_inherited_association(prop.name)
        )

    @staticmethod
    def _check_boundary(meta: TypeDescriptor, field_name: str, role: TreeRole) -> None:
        if not meta.has_field(field_name):
            raise MissingFieldError(role.value, field_name, meta.name)
        field_type = meta.field_type(field_name)
        if field_type not in VALID_BOUNDARY_TYPES:
            raise InvalidFieldTypeError(
                role.value, field_name, meta.name, expected="integer", actual=field_type
            )

    @staticmethod
    def _check_parent(meta: TypeDescriptor, field_name: str) -> None:
        if not meta.is_single_valued_association(field_name):
            raise InvalidAssociationError(field_name, meta.name)
