"""Binary trees and tree-shaped graph algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Return the node values in pre-order (node, left, right)."""
    values: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        values.append(node.val)
        stack.append(node.right)
        stack.append(node.left)
    return values


def distance_k(
    root: Optional[TreeNode], target: Optional[TreeNode], k: int
) -> list[int]:
    """Return the values of all nodes exactly ``k`` edges away from ``target``.

    Nodes are reported in search order: parent side first, then left, then right.
    """
    parent: dict[TreeNode, TreeNode] = {}
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        for child in (node.left, node.right):
            if child is not None:
                parent[child] = node
                pending.append(child)

    found: list[int] = []
    visited: set[TreeNode] = set()

    def visit(node: Optional[TreeNode], remaining: int) -> None:
        if node is None or node in visited:
            return
        visited.add(node)
        if remaining == 0:
            found.append(node.val)
            return
        visit(parent.get(node), remaining - 1)
        visit(node.left, remaining - 1)
        visit(node.right, remaining - 1)

    visit(target, k)
    return found


def _generate(start: int, end: int) -> list[Optional[TreeNode]]:
    if start > end:
        return [None]
    if start == end:
        return [TreeNode(start)]
    trees: list[Optional[TreeNode]] = []
    for value in range(start, end + 1):
        lefts = _generate(start, value - 1)
        rights = _generate(value + 1, end)
        trees.extend(TreeNode(value, left, right) for left in lefts for right in rights)
    return trees


def generate_trees(n: int) -> list[Optional[TreeNode]]:
    """Return every structurally distinct BST holding the values 1..n.

    Subtrees may be shared between the returned trees. For ``n`` below 1
    the result is a single empty tree, ``[None]``.
    """
    return _generate(1, n)


def sum_of_distances_in_tree(n: int, edges: Sequence[Sequence[int]]) -> list[int]:
    """For each node of a tree, return the sum of its distances to all other nodes."""
    if n == 0:
        return []
    graph: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        graph[u].append(v)
        graph[v].append(u)

    order: list[int] = []
    parent = [-1] * n
    stack = [(0, -1)]
    while stack:
        node, up = stack.pop()
        order.append(node)
        parent[node] = up
        stack.extend((child, node) for child in graph[node] if child != up)

    size = [1] * n
    below = [0] * n
    for node in reversed(order):
        up = parent[node]
        if up >= 0:
            size[up] += size[node]
            below[up] += below[node] + size[node]

    component = size[0]
    answer = [0] * n
    answer[0] = below[0]
    for node in order[1:]:
        up = parent[node]
        answer[node] = answer[up] - size[node] + (component - size[node])
    return answer