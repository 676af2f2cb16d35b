"""Binary tree nodes with recursive, iterative and level-order traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Protocol


class _Node(Protocol):
    value: Any
    left: Any
    right: Any


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r})"


def _preorder(node: _Node | None) -> Iterator[Any]:
    if node is None:
        return
    yield node.value
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: _Node | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.value
    yield from _inorder(node.right)


def _postorder(node: _Node | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.value


def preorder(root: _Node | None) -> list[Any]:
    """Values in root, left, right order, visited recursively."""
    return list(_preorder(root))


def inorder(root: _Node | None) -> list[Any]:
    """Values in left, root, right order, visited recursively."""
    return list(_inorder(root))


def postorder(root: _Node | None) -> list[Any]:
    """Values in left, right, root order, visited recursively."""
    return list(_postorder(root))


def preorder_iterative(root: _Node | None) -> list[Any]:
    """Values in root, left, right order, using an explicit stack."""
    result: list[Any] = []
    stack: list[_Node] = []
    node = root
    while node is not None or stack:
        if node is not None:
            result.append(node.value)
            stack.append(node)
            node = node.left
        else:
            node = stack.pop().right
    return result


def inorder_iterative(root: _Node | None) -> list[Any]:
    """Values in left, root, right order, using an explicit stack."""
    result: list[Any] = []
    stack: list[_Node] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            result.append(node.value)
            node = node.right
    return result


def postorder_iterative(root: _Node | None) -> list[Any]:
    """Values in left, right, root order, using an explicit stack.

    A node is emitted when it has no right child or its right child was the
    node emitted just before.
    """
    result: list[Any] = []
    stack: list[_Node] = []
    previous: _Node | None = None
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        current = stack.pop()
        if current.right is None or current.right is previous:
            result.append(current.value)
            previous = current
            node = None
        else:
            stack.append(current)
            node = current.right
    return result


def level_order(root: _Node | None) -> list[Any]:
    """Values level by level, left to right."""
    if root is None:
        return []
    result: list[Any] = []
    queue: deque[_Node] = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result