"""
schemagraph - generic tree and typed-graph building blocks for describing
and querying hierarchical or relational schemas.
"""

__version__ = "0.1.0"

from .graph import Graph, Link, Node, Relationship, Target, invert, links, to_networkx
from .tree import Tree, TraversalState, TreeTraversal, has_prefix, traverse, traverse_where
from .metamodel import MetamodelLoader, SchemaError

__all__ = [
    # Tree
    'Tree', 'TraversalState', 'TreeTraversal', 'has_prefix', 'traverse', 'traverse_where',
    # Graph
    'Graph', 'Link', 'Node', 'Relationship', 'Target', 'invert', 'links', 'to_networkx',
    # Metamodel
    'MetamodelLoader', 'SchemaError',
]
