"""
Binary search tree over anything with an `attribute` (Star or StarSet).

Equal keys are chained to the left: a duplicate becomes the new left child of
the node it matched, and that node's old left subtree hangs off the duplicate.

                __ 20 __
              /          \\
         __ 10 __         25
        /        \\
    10 (dupe)     11
    /
   9

Traversals, height and balance walk the tree with an explicit stack so that
list-shaped trees (e.g. built from already sorted input) of any size work.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional


@dataclass
class TreeNode:
    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


class OrderedCatalog:
    def __init__(self, stars: Optional[Iterable[Any]] = None):
        self.root: Optional[TreeNode] = None
        self.count = 0

        if stars is not None:
            for star in stars:
                self.insert(star)

    def __len__(self) -> int:
        return self.count

    def insert(self, value: Any) -> None:
        """Insert by attribute, duplicates go immediately left of their match."""
        node = TreeNode(value)
        self.count += 1

        if self.root is None:
            self.root = node
            return

        cur = self.root
        while True:
            if value.attribute < cur.value.attribute:
                if cur.left is None:
                    cur.left = node
                    return
                cur = cur.left

            elif value.attribute > cur.value.attribute:
                if cur.right is None:
                    cur.right = node
                    return
                cur = cur.right

            else:
                node.left = cur.left
                cur.left = node
                return

    # --- traversals ---

    def in_order_traversal(self) -> List[Any]:
        """Left, root, right: nondecreasing attribute order."""
        out: List[Any] = []
        stack: List[TreeNode] = []
        cur = self.root

        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            out.append(cur.value)
            cur = cur.right

        return out

    def pre_order_traversal(self) -> List[Any]:
        """Root, left, right: inserting the result into an empty tree rebuilds this shape."""
        out: List[Any] = []
        stack = [self.root] if self.root is not None else []

        while stack:
            node = stack.pop()
            out.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

        return out

    # --- shape ---

    def height(self, node: Optional[TreeNode] = None) -> int:
        """Number of nodes on the longest root to leaf path (0 for an empty tree)."""
        start = self.root if node is None else node
        if start is None:
            return 0

        best = 0
        stack = [(start, 1)]
        while stack:
            cur, depth = stack.pop()
            best = max(best, depth)
            if cur.left is not None:
                stack.append((cur.left, depth + 1))
            if cur.right is not None:
                stack.append((cur.right, depth + 1))

        return best

    def balance(self) -> int:
        """
        Heuristic balance score from 0 to 100.

        A leaf scores 100, a missing child scores 0 and an internal node scores
        the floored mean of its two children.
        """
        if self.root is None:
            return 0

        scores = {}
        stack = [(self.root, False)]
        while stack:
            node, visited = stack.pop()
            if node.left is None and node.right is None:
                scores[id(node)] = 100
            elif visited:
                left = scores.pop(id(node.left), 0) if node.left is not None else 0
                right = scores.pop(id(node.right), 0) if node.right is not None else 0
                scores[id(node)] = (left + right) // 2
            else:
                stack.append((node, True))
                if node.right is not None:
                    stack.append((node.right, False))
                if node.left is not None:
                    stack.append((node.left, False))

        return scores[id(self.root)]

    @classmethod
    def create_balanced_tree(cls, tree: OrderedCatalog) -> OrderedCatalog:
        """
        Rebuild `tree` by inserting midpoints of its sorted contents.

        Each range [lo, hi) inserts mid = (hi - lo) // 2 + lo and recurses into
        [lo, mid) and [mid, hi), stopping once mid hits a bound. Index 0 is never
        a midpoint, so it is inserted after the recursion.
        """
        ordered = tree.in_order_traversal()
        balanced = cls()
        if not ordered:
            return balanced

        cls._insert_midpoints(balanced, ordered, 0, len(ordered))
        balanced.insert(ordered[0])
        return balanced

    @staticmethod
    def _insert_midpoints(tree: OrderedCatalog, ordered: List[Any], lo: int, hi: int) -> None:
        mid = (hi - lo) // 2 + lo
        if mid != lo and mid != hi:
            tree.insert(ordered[mid])
            OrderedCatalog._insert_midpoints(tree, ordered, lo, mid)
            OrderedCatalog._insert_midpoints(tree, ordered, mid, hi)

    def render(self, indent: int = 10) -> str:
        """Indented picture of the tree, left children step back, right children step in."""
        lines: List[str] = []
        stack = [(self.root, indent)] if self.root is not None else []

        while stack:
            node, depth = stack.pop()
            lines.append("\t" * max(depth, 0) + repr(node.value.attribute))
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth - 1))

        return "\n".join(lines)
