#!/usr/bin/env python3
"""Load a metamodel schema and print its links and tree traversals."""
import sys
import argparse
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from schemagraph.metamodel.loader import MetamodelLoader, SchemaError
from schemagraph.tree.engine import traverse_where
from schemagraph.utils import Config


def main():
    """Print the flattened schema graph and a BFS listing of a tree."""
    parser = argparse.ArgumentParser(description='Inspect a metamodel schema graph and its trees')
    parser.add_argument(
        '--config-dir',
        type=str,
        default=None,
        help=f'Directory containing schema files (default: {Config.METAMODEL_DIR})'
    )
    parser.add_argument(
        '--version',
        type=str,
        default=None,
        help='Version suffix for the schema file (e.g., "v2" will load schema-v2.yaml)'
    )
    parser.add_argument(
        '--reverse',
        action='store_true',
        help='Also print every link walked backward'
    )
    parser.add_argument(
        '--tree',
        type=str,
        default=None,
        help='Name of a tree to traverse breadth-first'
    )
    parser.add_argument(
        '--exclude',
        nargs='*',
        default=[],
        help='Node types that stop the traversal (their subtrees are skipped)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else Config.LOG_LEVEL)

    loader = MetamodelLoader(config_dir=args.config_dir, version=args.version)
    print(f"📖 Loading metamodel from {loader.schema_path}...")

    try:
        graph = loader.load_graph()
        node_types = loader.get_node_types() or graph.node_types()
        print(f"   Node types: {', '.join(str(t) for t in node_types)}")

        print("\n🔗 Links:")
        for link in graph.links():
            print(f"   {link.from_} → {link.to}  [{link.rel.value}]")
            if args.reverse:
                back = link.reversed()
                print(f"   {back.from_} → {back.to}  [{back.rel.value}] (reversed)")

        if args.tree:
            tree = loader.load_tree(args.tree)
            excluded = set(args.exclude)
            print(f"\n🌳 Tree '{args.tree}' (excluding: {', '.join(excluded) or 'none'}):")
            for state in traverse_where(tree, lambda value: value not in excluded):
                path = ' ← '.join(str(v) for v in state.path_to_root()) or '(root)'
                print(f"   {'  ' * state.depth}{state.value}    path: {path}")
    except (SchemaError, FileNotFoundError) as e:
        print(f"\n❌ {e}", file=sys.stderr)
        sys.exit(1)

    print("\n✨ Done!")


if __name__ == "__main__":
    main()
