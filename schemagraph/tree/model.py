"""
Rooted Tree

A tree owns its ordered children outright; there are no parent pointers.
Parent information is only rebuilt during a traversal (see engine.py).
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Generic, List, TypeVar

if TYPE_CHECKING:
    from .engine import TreeTraversal

V = TypeVar("V")


@dataclass
class Tree(Generic[V]):
    """A value and its ordered child trees"""
    value: V
    children: List["Tree[V]"] = field(default_factory=list)

    def iter(self) -> "TreeTraversal":
        """Breadth-first traversal over every node"""
        from .engine import TreeTraversal
        return TreeTraversal(self)

    def iter_where(self, condition: Callable[[Any], bool]) -> "TreeTraversal":
        """Breadth-first traversal pruned at nodes failing condition"""
        from .engine import TreeTraversal
        return TreeTraversal(self, condition)

    def has_prefix(self, pattern: "Tree[V]") -> bool:
        return has_prefix(self, pattern)

    def size(self) -> int:
        """Number of nodes in the tree, root included"""
        count = 0
        stack = [self]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children)
        return count


def has_prefix(candidate: Tree, pattern: Tree) -> bool:
    """
    Check whether a pattern tree occurs as a prefix of a candidate tree.

    The roots must be equal. A pattern without children is satisfied at
    that point whatever the candidate holds below. Otherwise it is enough
    for ANY candidate child to match ANY pattern child recursively;
    unmatched children on either side are ignored. This is a "prefix
    occurs along some path" test, not a containment check: it does not
    require every pattern child to be matched.

    Args:
        candidate: Tree being searched
        pattern: Tree to look for

    Returns:
        True if the pattern matches along at least one branch
    """
    # Pending (candidate, pattern) pairs; any one succeeding is a match
    stack = [(candidate, pattern)]
    while stack:
        possible, target = stack.pop()
        if possible.value != target.value:
            continue
        if not target.children:
            return True

        for child in reversed(possible.children):
            for target_child in reversed(target.children):
                stack.append((child, target_child))
    return False
