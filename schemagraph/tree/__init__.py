"""
Tree traversal package.

This package provides:
- A rooted Tree with prefix matching
- Lazy BFS traversal with barrier conditions and path-to-root reconstruction
"""

from .model import Tree, has_prefix
from .engine import TraversalState, TreeTraversal, traverse, traverse_where

__all__ = [
    'Tree', 'has_prefix',
    'TraversalState', 'TreeTraversal', 'traverse', 'traverse_where',
]
