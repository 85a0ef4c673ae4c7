"""
Pytest configuration and fixtures for tree and graph tests.
"""

import pytest
import yaml
from enum import Enum
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from schemagraph.graph.model import Graph, Node, Relationship, Target
from schemagraph.tree.model import Tree


class Label(str, Enum):
    """Node labels used across the tests"""
    A = "A"
    B = "B"
    C = "C"
    D = "D"


def leaf(value):
    return Tree(value=value, children=[])


def values(states):
    """Collect the visited values of a traversal"""
    return [state.value for state in states]


@pytest.fixture
def single_tree():
    """A lone root: A"""
    return leaf(Label.A)


@pytest.fixture
def twin_tree():
    """A[B[C], B[C]]"""
    return Tree(value=Label.A, children=[
        Tree(value=Label.B, children=[leaf(Label.C)]),
        Tree(value=Label.B, children=[leaf(Label.C)]),
    ])


@pytest.fixture
def barrier_tree():
    """A[B[C], D[B]]"""
    return Tree(value=Label.A, children=[
        Tree(value=Label.B, children=[leaf(Label.C)]),
        Tree(value=Label.D, children=[leaf(Label.B)]),
    ])


@pytest.fixture
def chain_tree():
    """A[B[C]]"""
    return Tree(value=Label.A, children=[
        Tree(value=Label.B, children=[leaf(Label.C)]),
    ])


@pytest.fixture
def example_graph():
    """A -> B (one-to-many), C -> B (one-to-one)"""
    return Graph(nodes=[
        Node(typ=Label.A, targets=[Target(typ=Label.B, rel=Relationship.ONE_TO_MANY)]),
        Node(typ=Label.C, targets=[Target(typ=Label.B, rel=Relationship.ONE_TO_ONE)]),
    ])


@pytest.fixture
def schema_data():
    """Raw metamodel document as it would appear in schema.yaml"""
    return {
        "node_types": ["A", "B", "C", "D"],
        "graph": [
            {"type": "A", "targets": [{"type": "B", "rel": "one_to_many"}]},
            {"type": "C", "targets": [{"type": "B", "rel": "one_to_one"}]},
        ],
        "trees": {
            "twins": {
                "value": "A",
                "children": [
                    {"value": "B", "children": [{"value": "C"}]},
                    {"value": "B", "children": [{"value": "C"}]},
                ],
            },
            "single": {"value": "D"},
        },
    }


@pytest.fixture
def write_schema(tmp_path):
    """Write a metamodel document into a temporary config directory"""
    def _write(data, filename="schema.yaml"):
        path = tmp_path / filename
        with open(path, "w") as f:
            yaml.safe_dump(data, f, sort_keys=False)
        return tmp_path
    return _write
