"""Metamodel loading utilities.

Builds schema Graphs and Trees from a YAML metamodel file:

    node_types: [dataset, model]
    graph:
      - type: model
        targets:
          - {type: dataset, rel: many_to_many}
    trees:
      lineage:
        value: dataset
        children:
          - {value: model}
"""
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

import yaml

from ..graph.model import Graph, Node, Relationship, Target
from ..tree.model import Tree
from ..utils import Config

logger = logging.getLogger(__name__)


class SchemaError(ValueError):
    pass


def _to_label(raw: Any, label_type: Optional[Type[Enum]], where: str) -> Any:
    """Convert a raw YAML label, by value, into the caller's label type."""
    if raw is None:
        raise SchemaError(f"{where}: missing type")
    if label_type is None:
        return raw
    try:
        return label_type(raw)
    except ValueError:
        raise SchemaError(f"{where}: {raw!r} is not a valid {label_type.__name__}") from None


def _to_relationship(raw: Any, where: str) -> Relationship:
    try:
        return Relationship(raw)
    except ValueError:
        allowed = ", ".join(r.value for r in Relationship)
        raise SchemaError(f"{where}: unknown relationship {raw!r} (expected one of: {allowed})") from None


def _check_declared(label: Any, declared: Optional[List[Any]], where: str) -> None:
    if declared is not None and label not in declared:
        raise SchemaError(f"{where}: {label!r} is not a declared node type")


def build_graph(
    data: List[Dict[str, Any]],
    label_type: Optional[Type[Enum]] = None,
    node_types: Optional[List[Any]] = None,
) -> Graph:
    """
    Build a Graph from its parsed YAML definition.

    Args:
        data: List of node definitions ({type, targets: [{type, rel}]})
        label_type: Optional Enum used to convert labels by value
        node_types: Optional list of allowed (already converted) labels

    Returns:
        Graph in declaration order. Targets naming a type that has no node
        entry are kept as they are.
    """
    if not isinstance(data, list):
        raise SchemaError("Schema 'graph' must be a list.")

    nodes = []
    for i, node_def in enumerate(data):
        where = f"graph[{i}]"
        if not isinstance(node_def, dict):
            raise SchemaError(f"Invalid node definition at {where}: {node_def!r}")
        typ = _to_label(node_def.get("type"), label_type, where)
        _check_declared(typ, node_types, where)

        target_defs = node_def.get("targets") or []
        if not isinstance(target_defs, list):
            raise SchemaError(f"{where}.targets must be a list")

        targets = []
        for j, target_def in enumerate(target_defs):
            twhere = f"{where}.targets[{j}]"
            if not isinstance(target_def, dict):
                raise SchemaError(f"Invalid target definition at {twhere}: {target_def!r}")
            ttyp = _to_label(target_def.get("type"), label_type, twhere)
            _check_declared(ttyp, node_types, twhere)
            targets.append(Target(typ=ttyp, rel=_to_relationship(target_def.get("rel"), twhere)))

        nodes.append(Node(typ=typ, targets=targets))

    return Graph(nodes=nodes)


def build_tree(
    data: Dict[str, Any],
    label_type: Optional[Type[Enum]] = None,
    node_types: Optional[List[Any]] = None,
    where: str = "tree",
) -> Tree:
    """
    Build a Tree from its parsed YAML definition.

    Args:
        data: Nested mapping ({value, children: [...]})
        label_type: Optional Enum used to convert values by value
        node_types: Optional list of allowed (already converted) labels
        where: Location used in error messages

    Returns:
        Tree with children in declaration order
    """
    if not isinstance(data, dict):
        raise SchemaError(f"Invalid tree definition at {where}: {data!r}")
    if "value" not in data:
        raise SchemaError(f"{where}: missing value")
    value = _to_label(data["value"], label_type, where)
    _check_declared(value, node_types, where)

    children = data.get("children") or []
    if not isinstance(children, list):
        raise SchemaError(f"{where}.children must be a list")

    return Tree(
        value=value,
        children=[
            build_tree(child, label_type, node_types, f"{where}.children[{i}]")
            for i, child in enumerate(children)
        ],
    )


class MetamodelLoader:
    """Loads metamodel definitions into Graph and Tree instances."""

    def __init__(
        self,
        config_dir: Optional[str] = None,
        version: Optional[str] = None,
        label_type: Optional[Type[Enum]] = None,
    ):
        """
        Initialize the metamodel loader.

        Args:
            config_dir: Directory containing metamodel files. Defaults to Config.METAMODEL_DIR.
            version: Optional version suffix (e.g., 'v2' will load schema-v2.yaml)
            label_type: Optional Enum class; labels are converted with label_type(raw)
        """
        self.config_dir = Path(config_dir if config_dir is not None else Config.METAMODEL_DIR)
        self.version = version
        self.label_type = label_type

        if version:
            self.schema_path = self.config_dir / f"schema-{version}.yaml"
        else:
            self.schema_path = self.config_dir / "schema.yaml"

    def load_schema(self) -> Dict[str, Any]:
        """
        Load the raw metamodel schema definition.

        Returns:
            Dictionary containing schema definition
        """
        logger.debug("Loading metamodel schema from %s", self.schema_path)
        with open(self.schema_path, "r") as f:
            schema = yaml.safe_load(f)
        if schema is None:
            return {}
        if not isinstance(schema, dict):
            raise SchemaError(f"{self.schema_path}: top level must be a mapping")
        return schema

    def get_node_types(self) -> Optional[List[Any]]:
        """
        Get list of declared node types.

        Returns:
            List of node type labels, or None when the schema declares none
        """
        raw = self.load_schema().get("node_types")
        return self._node_types(raw)

    def _node_types(self, raw: Any) -> Optional[List[Any]]:
        if raw is None:
            return None
        if not isinstance(raw, list):
            raise SchemaError("Schema 'node_types' must be a list.")
        return [_to_label(t, self.label_type, f"node_types[{i}]") for i, t in enumerate(raw)]

    def load_graph(self) -> Graph:
        """
        Load the schema graph.

        Returns:
            Graph built from the 'graph' section
        """
        schema = self.load_schema()
        if "graph" not in schema:
            raise SchemaError(f"{self.schema_path}: missing 'graph' section")
        graph = build_graph(schema["graph"], self.label_type, self._node_types(schema.get("node_types")))
        logger.info("Loaded graph with %d node types from %s", len(graph.nodes), self.schema_path.name)
        return graph

    def load_trees(self) -> Dict[str, Tree]:
        """
        Load every named tree.

        Returns:
            Mapping of tree name to Tree, in file order
        """
        schema = self.load_schema()
        raw = schema.get("trees") or {}
        if not isinstance(raw, dict):
            raise SchemaError("Schema 'trees' must be a mapping of name to tree.")
        node_types = self._node_types(schema.get("node_types"))
        trees = {
            name: build_tree(tree_def, self.label_type, node_types, f"trees.{name}")
            for name, tree_def in raw.items()
        }
        logger.info("Loaded %d trees from %s", len(trees), self.schema_path.name)
        return trees

    def load_tree(self, name: str) -> Tree:
        """
        Load a single named tree.

        Args:
            name: Key under the 'trees' section

        Returns:
            The named Tree
        """
        trees = self.load_trees()
        if name not in trees:
            raise SchemaError(f"Unknown tree {name!r} (available: {', '.join(trees) or 'none'})")
        return trees[name]
