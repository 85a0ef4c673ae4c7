"""
NetworkX Export

Converts a schema Graph into a networkx MultiDiGraph for analysis or
plotting. A multigraph keeps parallel edges between the same pair of
node types.
"""

import logging

import networkx as nx

from .model import Graph, links

logger = logging.getLogger(__name__)


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    """
    Create a NetworkX graph from a schema Graph.

    Args:
        graph: Schema graph to convert

    Returns:
        MultiDiGraph with one node per node type and one edge per Link.
        Each edge carries the relationship under the 'rel' attribute.
        Dangling target types are added as plain nodes.
    """
    G = nx.MultiDiGraph()

    # Add nodes
    for node in graph.nodes:
        G.add_node(node.typ, targets=len(node.targets))

    # Add edges
    for link in links(graph):
        G.add_edge(link.from_, link.to, rel=link.rel)

    logger.debug(
        "Exported graph with %d nodes and %d edges",
        G.number_of_nodes(),
        G.number_of_edges(),
    )
    return G
