"""Binary search trees: building, searching, deleting, validating and rebalancing."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Iterator, List, NamedTuple, Optional, Sequence


@dataclass
class Node:
    """A binary tree node."""

    value: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into the tree and return its root; duplicates are ignored."""
    if root is None:
        return Node(value)
    if value < root.value:
        root.left = insert(root.left, value)
    elif value > root.value:
        root.right = insert(root.right, value)
    return root


def build_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a search tree by inserting ``values`` in order."""
    return reduce(insert, values, None)


def _inorder(node: Optional[Node]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: Optional[Node]) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def inorder(root: Optional[Node]) -> List[int]:
    """Return the values of the tree in left-node-right order."""
    return list(_inorder(root))


def preorder(root: Optional[Node]) -> List[int]:
    """Return the values of the tree in node-left-right order."""
    return list(_preorder(root))


def search(root: Optional[Node], key: int) -> bool:
    """Tell whether ``key`` is stored in the tree."""
    node = root
    while node is not None:
        if node.value == key:
            return True
        node = node.right if node.value < key else node.left
    return False


def delete(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` from the tree and return the new root."""
    if root is None:
        return None
    if value < root.value:
        root.left = delete(root.left, value)
    elif value > root.value:
        root.right = delete(root.right, value)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = root.right
        while successor.left is not None:
            successor = successor.left
        root.value = successor.value
        root.right = delete(root.right, successor.value)
    return root


def values_in_range(root: Optional[Node], start: int, end: int) -> List[int]:
    """Return, in order, the stored values ``v`` with ``start <= v <= end``."""

    def walk(node: Optional[Node]) -> Iterator[int]:
        if node is None:
            return
        if start <= node.value <= end:
            yield from walk(node.left)
            yield node.value
            yield from walk(node.right)
        elif node.value < start:
            yield from walk(node.right)
        else:
            yield from walk(node.left)

    return list(walk(root))


def root_to_leaf_paths(root: Optional[Node]) -> List[List[int]]:
    """Return every path of values from the root down to a leaf, left to right."""
    paths: List[List[int]] = []
    path: List[int] = []

    def walk(node: Optional[Node]) -> None:
        if node is None:
            return
        path.append(node.value)
        if node.left is None and node.right is None:
            paths.append(list(path))
        else:
            walk(node.left)
            walk(node.right)
        path.pop()

    walk(root)
    return paths


def is_valid_bst(root: Optional[Node]) -> bool:
    """Tell whether every node is strictly between its ancestors' bounds."""

    def valid(node: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
        if node is None:
            return True
        if (low is not None and node.value <= low) or (
            high is not None and node.value >= high
        ):
            return False
        return valid(node.left, low, node.value) and valid(node.right, node.value, high)

    return valid(root, None, None)


def bst_from_sorted(values: Sequence[int]) -> Optional[Node]:
    """Build a height-balanced tree from sorted ``values``."""

    def build(start: int, end: int) -> Optional[Node]:
        if start > end:
            return None
        mid = start + (end - start) // 2
        return Node(values[mid], build(start, mid - 1), build(mid + 1, end))

    return build(0, len(values) - 1)


def balance(root: Optional[Node]) -> Optional[Node]:
    """Return a height-balanced tree holding the same values."""
    return bst_from_sorted(inorder(root))


class _Info(NamedTuple):
    size: int
    minimum: float
    maximum: float
    largest: int
    is_bst: bool


def _subtree_info(node: Optional[Node]) -> _Info:
    if node is None:
        return _Info(0, float("inf"), float("-inf"), 0, True)
    if node.left is None and node.right is None:
        return _Info(1, node.value, node.value, 1, True)
    left = _subtree_info(node.left)
    right = _subtree_info(node.right)
    size = 1 + left.size + right.size
    if left.is_bst and right.is_bst and left.maximum < node.value < right.minimum:
        return _Info(
            size,
            min(left.minimum, node.value),
            max(right.maximum, node.value),
            size,
            True,
        )
    return _Info(size, node.value, node.value, max(left.largest, right.largest), False)


def largest_bst_size(root: Optional[Node]) -> int:
    """Return the number of nodes in the largest subtree that is a search tree."""
    return _subtree_info(root).largest


def merge_bsts(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Merge two search trees into one balanced search tree."""
    merged = list(heapq.merge(inorder(first), inorder(second)))
    return bst_from_sorted(merged)