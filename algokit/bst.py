"""A binary search tree of integers; equal values go to the right."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from algokit.binary_tree import inorder, level_order, postorder, preorder


@dataclass(eq=False)
class BSTNode:
    """A node of a binary search tree."""

    value: Any
    left: BSTNode | None = None
    right: BSTNode | None = None

    def __repr__(self) -> str:
        return f"BSTNode({self.value!r})"


class BinarySearchTree:
    """Binary search tree; values not less than a node go into its right subtree."""

    def __init__(self, *args: Any) -> None:
        self.root: BSTNode | None = None
        for value in args:
            self.add(value)

    def add(self, value: Any) -> None:
        node = BSTNode(value)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value >= current.value:
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            else:
                if current.left is None:
                    current.left = node
                    return
                current = current.left

    def find(self, value: Any) -> BSTNode:
        """Return the first node holding *value* on the search path."""
        current = self.root
        while current is not None:
            if value == current.value:
                return current
            current = current.left if value < current.value else current.right
        raise KeyError(value)

    def __contains__(self, value: object) -> bool:
        try:
            self.find(value)
        except KeyError:
            return False
        return True

    def delete(self, value: Any) -> None:
        """Remove one node holding *value*."""
        parent: BSTNode | None = None
        node = self.root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            raise KeyError(value)

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            parent, node = successor_parent, successor

        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def preorder(self) -> list[Any]:
        return preorder(self.root)

    def inorder(self) -> list[Any]:
        return inorder(self.root)

    def postorder(self) -> list[Any]:
        return postorder(self.root)

    def level_order(self) -> list[Any]:
        return level_order(self.root)