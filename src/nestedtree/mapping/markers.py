"""
Role markers placed in `Annotated[...]` field metadata.

    class Category(Entity):
        lft: Annotated[int, TreeLeft()]
        rgt: Annotated[int, TreeRight()]
        parent: Annotated["Category | None", TreeParent()] = None
"""

from abc import ABC, abstractmethod

from attrs import frozen

from nestedtree.core.types import TreeRole


@frozen
class TreeMarker(ABC):
    """Base class for structural role markers."""

    @property
    @abstractmethod
    def role(self) -> TreeRole:
        """Structural role the marked field serves."""


@frozen
class TreeLeft(TreeMarker):
    """Marks the field storing the left boundary."""

    @property
    def role(self) -> TreeRole:
        return TreeRole.LEFT


@frozen
class TreeRight(TreeMarker):
    """Marks the field storing the right boundary."""

    @property
    def role(self) -> TreeRole:
        return TreeRole.RIGHT


@frozen
class TreeParent(TreeMarker):
    """Marks the reference to the parent node."""

    @property
    def role(self) -> TreeRole:
        return TreeRole.PARENT


@frozen
class TreeLevel(TreeMarker):
    """Marks the field storing the node depth."""

    @property
    def role(self) -> TreeRole:
        return TreeRole.LEVEL
