"""Binary search trees with in-order, pre-order and post-order traversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _TreeNode:
    data: Any
    left: _TreeNode | None = None
    right: _TreeNode | None = None


def _traversal_line(values: Iterable) -> str:
    return "".join(f"{value} " for value in values)


def _insert(root: _TreeNode | None, data) -> _TreeNode:
    """Place data below root (smaller left, equal or larger right); return the root."""
    new_node = _TreeNode(data)
    if root is None:
        return new_node
    node = root
    while True:
        if data < node.data:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right


def _walk_in_order(root: _TreeNode | None) -> Iterator:
    stack: list[_TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.data
        node = node.right


class _OrderedTree:
    """Shared container behaviour of the ordered trees."""

    def __init__(self, values: Iterable = ()) -> None:
        self._root: _TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, data) -> None:
        raise NotImplementedError

    def __iter__(self) -> Iterator:
        return _walk_in_order(self._root)

    def __len__(self) -> int:
        return sum(1 for _ in _walk_in_order(self._root))

    def __contains__(self, data: object) -> bool:
        node = self._root
        while node is not None:
            if node.data == data:
                return True
            node = node.left if data < node.data else node.right
        return False


class BinaryTree(_OrderedTree):
    """An ordered binary tree offering all three depth-first traversals."""

    def insert(self, data) -> None:
        """Place a value at the leaf where ordering puts it."""
        self._root = _insert(self._root, data)

    def in_order(self) -> list:
        """Return the values in sorted (left, node, right) order."""
        return list(_walk_in_order(self._root))

    def pre_order(self) -> list:
        """Return the values in node, left, right order."""
        order = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            order.append(node.data)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return order

    def post_order(self) -> list:
        """Return the values in left, right, node order."""
        reversed_order = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            reversed_order.append(node.data)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        reversed_order.reverse()
        return reversed_order


class BST(_OrderedTree):
    """A binary search tree supporting insertion, lookup and sorted listing."""

    def insert(self, data) -> None:
        """Place a value at the leaf where ordering puts it."""
        self._root = _insert(self._root, data)

    def in_order(self) -> list:
        """Return the values in sorted (left, node, right) order."""
        return list(_walk_in_order(self._root))


def run_trees() -> None:
    """Print the binary tree and binary search tree examples."""
    values = (50, 30, 70, 20, 40, 60, 80)

    tree = BinaryTree(values)
    print("In-order Traversal:")
    print(_traversal_line(tree.in_order()))
    print("Pre-order Traversal:")
    print(_traversal_line(tree.pre_order()))
    print("Post-order Traversal:")
    print(_traversal_line(tree.post_order()))

    search_value = 40
    if search_value in tree:
        print(f"Value {search_value} found in the tree")
    else:
        print(f"Value {search_value} not found in the tree")

    bst = BST(values)
    print(_traversal_line(bst.in_order()))
    print(str(40 in bst).lower())
    print(str(100 in bst).lower())