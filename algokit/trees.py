"""Binary trees and the classic problems on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree; nodes compare by identity."""

    val: int = 0
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


_MISSING = object()


def from_level_order(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, None marking an absent child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, _MISSING)
        if left is _MISSING:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, _MISSING)
        if right is _MISSING:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def _paths(node: TreeNode, prefix: str) -> Iterator[str]:
    path = f"{prefix}->{node.val}" if prefix else str(node.val)
    if node.left is None and node.right is None:
        yield path
        return
    for child in (node.left, node.right):
        if child is not None:
            yield from _paths(child, path)


def binary_tree_paths(root: TreeNode | None) -> list[str]:
    """Every root-to-leaf path written as values joined by ``->``."""
    if root is None:
        return []
    return list(_paths(root, ""))


def diameter(root: TreeNode | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left, right = height(node.left), height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best


def inorder(root: TreeNode | None) -> list[int]:
    """Values in left-node-right order."""
    values: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place, swapping every node's children; return the root."""
    if root is None:
        return None
    queue = deque([root])
    while queue:
        node = queue.popleft()
        node.left, node.right = node.right, node.left
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return root


def max_depth(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """Whether some root-to-leaf path adds up to ``target_sum``."""
    if root is None:
        return False
    remaining = target_sum - root.val
    if root.left is None and root.right is None:
        return remaining == 0
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)


def range_sum_bst(root: TreeNode | None, low: int, high: int) -> int:
    """Sum of the values of a search tree that lie within ``[low, high]``."""
    if root is None:
        return 0
    total = 0
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if low <= node.val <= high:
            total += node.val
        if node.left is not None and node.val > low:
            queue.append(node.left)
        if node.right is not None and node.val < high:
            queue.append(node.right)
    return total


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Whether the two trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def is_subtree(root: TreeNode | None, sub_root: TreeNode | None) -> bool:
    """Whether some node of ``root`` heads a tree equal to ``sub_root``."""
    if root is None:
        return False
    if sub_root is None:
        return True
    if is_same_tree(root, sub_root):
        return True
    return is_subtree(root.left, sub_root) or is_subtree(root.right, sub_root)


def _mirrors(a: TreeNode | None, b: TreeNode | None) -> bool:
    if a is None or b is None:
        return a is b
    return a.val == b.val and _mirrors(a.left, b.right) and _mirrors(a.right, b.left)


def is_symmetric(root: TreeNode | None) -> bool:
    """Whether the tree is its own mirror image."""
    return root is None or _mirrors(root.left, root.right)