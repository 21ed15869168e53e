"""
Registry caching the tree configuration of each record type.
"""

from nestedtree.core.types import TreeConfig
from nestedtree.mapping.driver import TreeMetadataDriver
from nestedtree.mapping.metadata import TypeDescriptor


class TreeMetadataRegistry:
    """Loads tree configurations through a driver and caches them by type name.

    Types without tree roles are cached as None. A load that raises is not
    cached, so the caller can fix the declarations and ask again.
    """

    def __init__(self, driver: TreeMetadataDriver):
        self.driver = driver
        self._configs: dict[str, TreeConfig | None] = {}

    def get(self, meta: TypeDescriptor) -> TreeConfig | None:
        """
        Return the tree configuration of a type, loading it on first access.

        Params:
            meta: Reflected record type

        Returns:
            TreeConfig, or None when the type is not a tree

        Raises:
            TreeMappingError: If the type's declarations are invalid
        """
        if meta.name not in self._configs:
            self._configs[meta.name] = self.driver.load(meta)
        return self._configs[meta.name]

    def is_tree(self, meta: TypeDescriptor) -> bool:
        return self.get(meta) is not None

    def clear(self) -> None:
        self._configs.clear()

    def __contains__(self, type_name: str) -> bool:
        return type_name in self._configs
