"""Binary trees and puzzles over them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from level-order ``values``; None marks a missing child.

    An empty input, or one whose first value is None, gives None.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending: deque[TreeNode] = deque([root])
    for left_value in items:
        right_value = next(items, None)
        parent = pending.popleft()
        if left_value is not None:
            parent.left = TreeNode(left_value)
            pending.append(parent.left)
        if right_value is not None:
            parent.right = TreeNode(right_value)
            pending.append(parent.right)
    return root


def find_tilt(root: TreeNode | None) -> int:
    """Return the sum over all nodes of |left subtree sum - right subtree sum|."""
    total_tilt = 0

    def subtree_sum(node: TreeNode | None) -> int:
        nonlocal total_tilt
        if node is None:
            return 0
        left = subtree_sum(node.left)
        right = subtree_sum(node.right)
        total_tilt += abs(left - right)
        return left + right + node.val

    subtree_sum(root)
    return total_tilt


def convert_bst(root: TreeNode | None) -> TreeNode | None:
    """Add to every node of a BST the sum of all larger keys, in place.

    Returns the same root.
    """

    def accumulate(node: TreeNode | None, carried: int) -> int:
        if node is None:
            return carried
        node.val += accumulate(node.right, carried)
        return accumulate(node.left, node.val)

    accumulate(root, 0)
    return root


def diameter_of_binary_tree(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between two nodes."""
    best = 0

    def height(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return max(left, right) + 1

    height(root)
    return best


def find_bottom_left_value(root: TreeNode | None) -> Any:
    """Return the leftmost value on the deepest level; an empty tree gives 0."""
    result: Any = 0
    deepest = 0
    stack: list[tuple[TreeNode, int]] = [(root, 1)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        if depth > deepest:
            deepest = depth
            result = node.val
        if node.right is not None:
            stack.append((node.right, depth + 1))
        if node.left is not None:
            stack.append((node.left, depth + 1))
    return result


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Return the lowest node of a BST that has both ``p`` and ``q`` below or at it."""
    node = root
    while node is not None:
        if p.val < node.val and q.val < node.val:
            node = node.left
        elif p.val > node.val and q.val > node.val:
            node = node.right
        else:
            return node
    return None


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Return True if two trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def is_symmetric(root: TreeNode | None) -> bool:
    """Return True if the tree is a mirror image of itself."""

    def mirrored(a: TreeNode | None, b: TreeNode | None) -> bool:
        if a is None or b is None:
            return a is b
        return a.val == b.val and mirrored(a.left, b.right) and mirrored(a.right, b.left)

    return root is None or mirrored(root.left, root.right)