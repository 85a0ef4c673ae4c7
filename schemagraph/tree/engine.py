"""
Tree Traversal Engine

Implements lazy BFS traversal over a Tree with an optional barrier condition.
Key feature: a node failing the condition is dropped together with its whole
subtree, even when deeper descendants would pass.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, Iterator, List, Optional

from .model import Tree


def _always(_value: Any) -> bool:
    return True


@dataclass(eq=False)
class TraversalState:
    """State tracking for a single visited node during BFS traversal"""
    tree: Tree
    parent: Optional["TraversalState"] = field(default=None, repr=False)

    @property
    def value(self) -> Any:
        return self.tree.value

    @property
    def depth(self) -> int:
        """Distance from the traversal root (0 for the root itself)"""
        depth = 0
        current = self.parent
        while current is not None:
            depth += 1
            current = current.parent
        return depth

    def ancestors(self) -> List[Tree]:
        """
        Walk the parent chain outward.

        Returns:
            Ancestor subtrees, nearest parent first and root last.
            The node itself is excluded.
        """
        path = []
        current = self.parent
        while current is not None:
            path.append(current.tree)
            current = current.parent
        return path

    def path_to_root(self) -> List[Any]:
        """
        Values of the ancestors of this node, nearest parent first.

        Returns:
            List of values ending with the root's value, or an empty list
            when called on the root.
        """
        return [tree.value for tree in self.ancestors()]


class TreeTraversal:
    """
    Single-pass breadth-first iterator over a Tree.

    The condition is checked when a node reaches the front of the queue.
    Children of a yielded node are always enqueued; a child that then fails
    the condition is discarded and its own children are never enqueued.
    """

    def __init__(self, tree: Tree, condition: Optional[Callable[[Any], bool]] = None):
        """
        Initialize the traversal.

        Args:
            tree: Root of the tree to traverse
            condition: Predicate on node values. Defaults to always true.
        """
        self.condition = condition if condition is not None else _always
        self.queue: Deque[TraversalState] = deque()
        if self.condition(tree.value):
            self.queue.append(TraversalState(tree=tree))

    def __iter__(self) -> Iterator[TraversalState]:
        return self

    def __next__(self) -> TraversalState:
        while self.queue:
            state = self.queue.popleft()

            # Failing nodes prune their subtree
            if not self.condition(state.tree.value):
                continue

            for child in state.tree.children:
                self.queue.append(TraversalState(tree=child, parent=state))
            return state

        raise StopIteration


def traverse(tree: Tree) -> TreeTraversal:
    """Fresh breadth-first traversal visiting every node of tree"""
    return TreeTraversal(tree)


def traverse_where(tree: Tree, predicate: Callable[[Any], bool]) -> TreeTraversal:
    """
    Fresh breadth-first traversal pruned by a barrier predicate.

    Args:
        tree: Root of the tree to traverse
        predicate: Called with each node value. A False result skips the
            node and everything below it. A failing root yields nothing.

    Returns:
        Iterator of TraversalState in BFS order
    """
    return TreeTraversal(tree, predicate)
