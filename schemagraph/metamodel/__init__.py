"""
Metamodel package.

Loads schema graphs and trees from YAML metamodel files.
"""

from .loader import MetamodelLoader, SchemaError, build_graph, build_tree

__all__ = ['MetamodelLoader', 'SchemaError', 'build_graph', 'build_tree']
