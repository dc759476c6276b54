"""A non-binary tree stored in a fixed-size, 1-indexed array of nodes.

Each node records its first son, its next brother and its parent as array
indices; ``None`` marks a missing link and an empty ``info`` marks an unused
slot.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator

DEFAULT_CAPACITY = 10
NIL = -1


@dataclass
class TreeNode:
    """One slot of the tree array."""

    info: str = ""
    first_son: int | None = None
    next_brother: int | None = None
    parent: int | None = None


def _link_text(link: int | None) -> int:
    return NIL if link is None else link


class NonBinaryTree:
    """A tree of single-character nodes kept in slots numbered 1..capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._nodes = [TreeNode() for _ in range(capacity)]

    def _check_index(self, index: int) -> None:
        if not 1 <= index <= self.capacity:
            raise IndexError(f"node index {index} outside 1..{self.capacity}")

    def _check_link(self, link: int | None, role: str) -> None:
        if link is not None and not 1 <= link <= self.capacity:
            raise ValueError(f"invalid {role} index {link}")

    def _node(self, index: int) -> TreeNode:
        return self._nodes[index - 1]

    def _occupied(self) -> Iterator[tuple[int, TreeNode]]:
        for index, node in enumerate(self._nodes, start=1):
            if node.info:
                yield index, node

    def _children(self, index: int) -> Iterator[int]:
        child = self._node(index).first_son
        while child is not None:
            yield child
            child = self._node(child).next_brother

    def set_node(
        self,
        index: int,
        info: str,
        first_son: int | None = None,
        next_brother: int | None = None,
        parent: int | None = None,
    ) -> None:
        """Fill slot ``index``; an empty ``info`` frees the slot."""
        self._check_index(index)
        if len(info) > 1:
            raise ValueError("node info must be a single character")
        self._check_link(first_son, "first son")
        self._check_link(next_brother, "next brother")
        self._check_link(parent, "parent")
        self._nodes[index - 1] = TreeNode(info, first_son, next_brother, parent)

    def root(self) -> int | None:
        """Index of the first occupied node without a parent, if any."""
        return next(
            (index for index, node in self._occupied() if node.parent is None), None
        )

    def is_empty(self) -> bool:
        """True when the tree has no root."""
        return self.root() is None

    def _preorder(self, index: int) -> Iterator[str]:
        yield self._node(index).info
        for child in self._children(index):
            yield from self._preorder(child)

    def _inorder(self, index: int) -> Iterator[str]:
        children = list(self._children(index))
        if children:
            yield from self._inorder(children[0])
        yield self._node(index).info
        for child in children[1:]:
            yield from self._inorder(child)

    def _postorder(self, index: int) -> Iterator[str]:
        for child in self._children(index):
            yield from self._postorder(child)
        yield self._node(index).info

    def preorder(self) -> list[str]:
        """Node infos: parent, then each son's subtree in turn."""
        root = self.root()
        return [] if root is None else list(self._preorder(root))

    def inorder(self) -> list[str]:
        """Node infos: first son's subtree, parent, then the other sons."""
        root = self.root()
        return [] if root is None else list(self._inorder(root))

    def postorder(self) -> list[str]:
        """Node infos: every son's subtree, then the parent."""
        root = self.root()
        return [] if root is None else list(self._postorder(root))

    def _breadth_first(self) -> Iterator[tuple[int, int]]:
        """Pairs of (index, level), never queueing more than capacity nodes."""
        root = self.root()
        if root is None:
            return
        queue = deque([(root, 0)])
        queued = 1
        while queue:
            index, level = queue.popleft()
            yield index, level
            for child in self._children(index):
                if queued >= self.capacity:
                    break
                queue.append((child, level + 1))
                queued += 1

    def level_order(self) -> list[str]:
        """Node infos level by level, left to right."""
        return [self._node(index).info for index, _ in self._breadth_first()]

    def describe(self) -> str:
        """A report of every occupied slot and its links."""
        return "".join(
            f"--> Indeks ke-{index}\n"
            "-----------------------------------\n"
            f"info array ke {index}         : {node.info}\n"
            f"first son array ke {index}    : {_link_text(node.first_son)}\n"
            f"next brother array ke {index} : {_link_text(node.next_brother)}\n"
            f"parent array ke {index}       : {_link_text(node.parent)}\n"
            "\n"
            for index, node in self._occupied()
        )

    def search(self, info: str) -> bool:
        """True if some slot holds ``info``."""
        return any(node.info == info for node in self._nodes)

    def count(self) -> int:
        """Number of occupied slots."""
        return sum(1 for _ in self._occupied())

    def leaf_count(self) -> int:
        """Number of occupied slots without a first son."""
        return sum(1 for _, node in self._occupied() if node.first_son is None)

    def level(self, info: str) -> int:
        """Level of the first node holding ``info``; the root is level 0.

        Returns 0 when the tree is empty or no reachable node holds ``info``.
        """
        for index, level in self._breadth_first():
            if self._node(index).info == info:
                return level
        return 0

    def _depth(self, index: int) -> int:
        return 1 + max((self._depth(child) for child in self._children(index)), default=-1)

    def depth(self) -> int:
        """Height of the tree: 0 for a lone root or an empty tree."""
        root = self.root()
        return 0 if root is None else self._depth(root)


def create_sample_tree() -> NonBinaryTree:
    """The ten-node sample tree used by the menu."""
    tree = NonBinaryTree(DEFAULT_CAPACITY)
    layout = [
        (1, "A", 2, None, None),
        (2, "B", 4, 3, 1),
        (3, "C", 6, None, 1),
        (4, "D", None, 5, 2),
        (5, "E", 9, None, 2),
        (6, "F", None, 7, 3),
        (7, "G", None, 8, 3),
        (8, "H", None, None, 3),
        (9, "I", None, 10, 5),
        (10, "J", None, None, 5),
    ]
    for index, info, first_son, next_brother, parent in layout:
        tree.set_node(index, info, first_son, next_brother, parent)
    return tree


def max_info(first: str, second: str) -> str:
    """The larger of two node infos by character code."""
    return first if first > second else second