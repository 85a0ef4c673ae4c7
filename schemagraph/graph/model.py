"""
Typed Schema Graph

A flat collection of typed nodes, each declaring outgoing edges to other
node types. Every edge carries a cardinality Relationship. The graph can be
flattened into a list of directed Links.

Edges are not checked against the declared nodes: a target label with no
matching Node is a valid (dangling) edge and still yields a Link.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, List, TypeVar

V = TypeVar("V")


class Relationship(str, Enum):
    """Cardinality of a directed edge between two node types"""
    ONE_TO_ONE = "one_to_one"
    ONE_TO_MANY = "one_to_many"
    MANY_TO_ONE = "many_to_one"
    MANY_TO_MANY = "many_to_many"

    def invert(self) -> "Relationship":
        """Cardinality of the same edge walked backward"""
        return invert(self)


_INVERSES = {
    Relationship.ONE_TO_ONE: Relationship.ONE_TO_ONE,
    Relationship.ONE_TO_MANY: Relationship.MANY_TO_ONE,
    Relationship.MANY_TO_ONE: Relationship.ONE_TO_MANY,
    Relationship.MANY_TO_MANY: Relationship.MANY_TO_MANY,
}


def invert(rel: Relationship) -> Relationship:
    """
    Invert a relationship.

    One-to-many and many-to-one swap; one-to-one and many-to-many are
    their own inverse, so invert(invert(rel)) == rel for every value.

    Args:
        rel: Relationship to invert

    Returns:
        The inverted Relationship
    """
    return _INVERSES[Relationship(rel)]


@dataclass
class Target(Generic[V]):
    """Outgoing edge of a node: the destination type and its cardinality"""
    typ: V
    rel: Relationship


@dataclass
class Node(Generic[V]):
    """A typed node and its outgoing edges, in declaration order"""
    typ: V
    targets: List[Target[V]] = field(default_factory=list)


@dataclass(frozen=True)
class Link(Generic[V]):
    """
    A materialized directed edge (from, to, relationship).

    Links are derived from a Graph and hold the graph's own label and
    relationship objects, never copies.
    """
    from_: V
    to: V
    rel: Relationship

    def reversed(self) -> "Link[V]":
        """The same edge walked from its destination back to its source"""
        return Link(from_=self.to, to=self.from_, rel=invert(self.rel))

    def as_tuple(self) -> tuple:
        return (self.from_, self.to, self.rel)


@dataclass
class Graph(Generic[V]):
    """A flat, ordered collection of typed nodes"""
    nodes: List[Node[V]] = field(default_factory=list)

    def links(self) -> List[Link[V]]:
        """Flatten the graph into Links (see links())"""
        return links(self)

    def node_types(self) -> List[V]:
        """Labels of all nodes, in node order"""
        return [node.typ for node in self.nodes]

    def targets_of(self, typ: Any) -> List[Target[V]]:
        """
        Get the outgoing edges declared for a node type.

        Args:
            typ: Node label to look up

        Returns:
            Targets of every node labelled typ, in order. Empty if the
            label has no node (e.g. it only appears as a dangling target).
        """
        return [
            target
            for node in self.nodes
            if node.typ == typ
            for target in node.targets
        ]


def links(graph: Graph[V]) -> List[Link[V]]:
    """
    Flatten every (node, target) pair of a graph into a Link.

    Order is node-major, target-minor, so the result has exactly
    sum(len(node.targets)) entries.

    Args:
        graph: Graph to flatten

    Returns:
        List of Links referencing the graph's own values
    """
    return [
        Link(from_=node.typ, to=target.typ, rel=target.rel)
        for node in graph.nodes
        for target in node.targets
    ]
