"""
Typed schema graph package.

This package provides:
- Relationship cardinalities and their inversion
- Graph / Node / Target model and link flattening
- Export to networkx
"""

from .model import Graph, Link, Node, Relationship, Target, invert, links
from .export import to_networkx

__all__ = [
    'Graph', 'Link', 'Node', 'Relationship', 'Target',
    'invert', 'links', 'to_networkx',
]
