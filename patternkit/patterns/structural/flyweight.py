"""Flyweight pattern: a forest of a million trees.

If every tree stored its own name, color and texture, a million identical oaks
would hold a million copies of the same data.

The shared, intrinsic part (``TreeType``) is created once per distinct
(name, color, texture) by ``TreeFactory`` and referenced by every tree; each
``Tree`` keeps only its own coordinates.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from patternkit.config.manager import get_config_manager
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TreeType:
    """Intrinsic state shared by many trees."""
    name: str
    color: str
    texture: str

    def draw(self, x: int, y: int) -> str:
        return f"Drawing {self.name} tree at ({x}, {y})"


class Tree:
    """Extrinsic state: a position plus a reference to its shared type."""
    __slots__ = ("x", "y", "tree_type")

    def __init__(self, x: int, y: int, tree_type: TreeType):
        self.x = x
        self.y = y
        self.tree_type = tree_type

    def draw(self) -> str:
        return self.tree_type.draw(self.x, self.y)


class TreeFactory:
    """Cache of shared tree types keyed by (name, color, texture)."""

    _tree_types: Dict[Tuple[str, str, str], TreeType] = {}

    @classmethod
    def get_tree_type(cls, name: str, color: str, texture: str) -> TreeType:
        key = (name, color, texture)
        tree_type = cls._tree_types.get(key)
        if tree_type is None:
            tree_type = TreeType(name, color, texture)
            cls._tree_types[key] = tree_type
            logger.debug("Created tree type", name=name, color=color, texture=texture)
        return tree_type

    @classmethod
    def type_count(cls) -> int:
        return len(cls._tree_types)

    @classmethod
    def clear(cls) -> None:
        cls._tree_types.clear()


class Forest:
    def __init__(self):
        self.trees: List[Tree] = []

    def plant_tree(self, x: int, y: int, name: str, color: str, texture: str) -> Tree:
        tree = Tree(x, y, TreeFactory.get_tree_type(name, color, texture))
        self.trees.append(tree)
        return tree

    def draw(self) -> List[str]:
        return [tree.draw() for tree in self.trees]

    def distinct_types(self) -> int:
        return len({id(tree.tree_type) for tree in self.trees})


def main(tree_count: Optional[int] = None) -> None:
    if tree_count is None:
        tree_count = get_config_manager().get_demo_config().flyweight_tree_count

    forest = Forest()
    for i in range(tree_count):
        forest.plant_tree(i, i, "Oak", "Green", "Rough")

    print(f"Planted {tree_count:,} trees.")
    print(f"Distinct tree types in memory: {forest.distinct_types()}")


if __name__ == "__main__":
    main()
