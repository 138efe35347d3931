"""Binary trees: building, traversals, and structural properties."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

EMPTY = -1
"""Marker value meaning "no node here" in tree-building input."""


@dataclass
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Node | None = None
    right: Node | None = None


def _take(values: Iterator[int]) -> int:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("not enough values to build the tree") from None


def build_level_order(values: Iterable[int]) -> Node | None:
    """Build a tree from values given level by level, -1 marking a missing child.

    The first value is the root; then each node in breadth-first order takes
    its left and its right child from the input.
    """
    stream = iter(values)
    first = _take(stream)
    if first == EMPTY:
        return None
    root = Node(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = _take(stream)
        if left != EMPTY:
            node.left = Node(left)
            queue.append(node.left)
        right = _take(stream)
        if right != EMPTY:
            node.right = Node(right)
            queue.append(node.right)
    return root


def build_preorder(values: Iterable[int]) -> Node | None:
    """Build a tree from values in pre-order, -1 marking a missing subtree."""
    stream = iter(values)

    def build() -> Node | None:
        value = _take(stream)
        if value == EMPTY:
            return None
        node = Node(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_bst(values: Iterable[int]) -> Node | None:
    """Insert values in turn into a binary search tree; equal values go right."""
    root: Node | None = None
    for value in values:
        if root is None:
            root = Node(value)
            continue
        node = root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = Node(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(value)
                    break
                node = node.right
    return root


def inorder(root: Node | None) -> list[int]:
    """Return the values in left, node, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def postorder(root: Node | None) -> list[int]:
    """Return the values in left, right, node order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]


def level_order(root: Node | None) -> list[list[int]]:
    """Return the values grouped by level, each level left to right."""
    levels: list[list[int]] = []
    if root is None:
        return levels
    queue = deque([root])
    while queue:
        level: list[int] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.data)
            if node.left:
                queue.append(node.left)
            if node.right:
                queue.append(node.right)
        levels.append(level)
    return levels


def height(root: Node | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def diameter(root: Node | None) -> int:
    """Return the number of edges on the longest path, recomputing heights."""
    if root is None:
        return 0
    return max(
        diameter(root.left),
        diameter(root.right),
        height(root.left) + height(root.right),
    )


def fast_diameter(root: Node | None) -> int:
    """Return the same diameter as diameter() in a single pass."""

    def walk(node: Node | None) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_diam, left_height = walk(node.left)
        right_diam, right_height = walk(node.right)
        best = max(left_diam, right_diam, left_height + right_height)
        return best, max(left_height, right_height) + 1

    return walk(root)[0]


def is_balanced(root: Node | None) -> bool:
    """Return whether every node's subtree heights differ by at most one."""
    if root is None:
        return True
    return (
        is_balanced(root.left)
        and is_balanced(root.right)
        and abs(height(root.left) - height(root.right)) <= 1
    )


def is_sum_tree(root: Node | None) -> bool:
    """Return whether each inner node equals the sum of its subtrees' values."""

    def check(node: Node | None) -> tuple[bool, int]:
        if node is None:
            return True, 0
        if node.left is None and node.right is None:
            return True, node.data
        left_ok, left_sum = check(node.left)
        right_ok, right_sum = check(node.right)
        if left_ok and right_ok and left_sum + right_sum == node.data:
            return True, node.data + left_sum + right_sum
        return False, node.data

    return check(root)[0]


def zigzag(root: Node | None) -> list[int]:
    """Return the values level by level, alternating left-to-right and back."""
    result: list[int] = []
    for depth, level in enumerate(level_order(root)):
        result.extend(level if depth % 2 == 0 else reversed(level))
    return result


def left_boundary(root: Node | None) -> list[int]:
    """Return the non-leaf nodes down the left edge, top first.

    From each node the walk goes left, or right when there is no left child.
    """
    boundary: list[int] = []
    node = root
    while node is not None and (node.left is not None or node.right is not None):
        boundary.append(node.data)
        node = node.left if node.left is not None else node.right
    return boundary


def right_boundary(root: Node | None) -> list[int]:
    """Return the non-leaf nodes down the right edge, top first.

    The walk follows right children only and stops where there is none.
    """
    boundary: list[int] = []
    node = root
    while node is not None and (node.left is not None or node.right is not None):
        boundary.append(node.data)
        node = node.right
    return boundary


def leaves(root: Node | None) -> list[int]:
    """Return the leaf values from left to right."""
    if root is None:
        return []
    if root.left is None and root.right is None:
        return [root.data]
    return [*leaves(root.left), *leaves(root.right)]