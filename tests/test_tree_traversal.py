"""
Tests for the tree traversal engine, focusing on BFS order and barrier pruning.
"""

import pytest
from schemagraph.tree.engine import TraversalState, TreeTraversal, traverse, traverse_where
from schemagraph.tree.model import Tree

from conftest import Label, leaf, values


class TestBreadthFirst:
    """Tests for unconditional traversal"""

    def test_single_node(self, single_tree):
        assert values(traverse(single_tree)) == [Label.A]

    def test_breadth_before_depth(self, twin_tree):
        """Both B children are visited before any grandchild"""
        assert values(traverse(twin_tree)) == [Label.A, Label.B, Label.B, Label.C, Label.C]

    def test_every_node_exactly_once(self):
        """Each subtree object is yielded once and depths never decrease"""
        tree = Tree(value=Label.A, children=[
            Tree(value=Label.B, children=[leaf(Label.C), Tree(value=Label.D, children=[leaf(Label.A)])]),
            leaf(Label.C),
            Tree(value=Label.D, children=[leaf(Label.B)]),
        ])

        states = list(traverse(tree))

        assert len(states) == tree.size() == 8
        assert len({id(state.tree) for state in states}) == 8
        depths = [state.depth for state in states]
        assert depths == sorted(depths)
        assert depths == [0, 1, 1, 1, 2, 2, 2, 3]

    def test_tree_iter_method(self, twin_tree):
        traversal = twin_tree.iter()
        assert isinstance(traversal, TreeTraversal)
        assert values(traversal) == values(traverse(twin_tree))

    def test_single_pass(self, twin_tree):
        """A traversal is consumed once; a fresh call starts over"""
        traversal = traverse(twin_tree)
        assert len(list(traversal)) == 5
        assert list(traversal) == []
        with pytest.raises(StopIteration):
            next(traversal)
        assert len(list(traverse(twin_tree))) == 5

    def test_lazy(self, twin_tree):
        """Only the root is queued before iteration starts"""
        traversal = TreeTraversal(twin_tree)
        assert len(traversal.queue) == 1
        first = next(traversal)
        assert first.value == Label.A
        assert len(traversal.queue) == 2


class TestBarrierCondition:
    """Tests for conditional traversal"""

    @pytest.mark.parametrize("condition,expected", [
        (lambda v: False, []),
        (lambda v: True, [Label.A]),
    ])
    def test_single_node(self, single_tree, condition, expected):
        assert values(traverse_where(single_tree, condition)) == expected

    def test_matching_subset(self, twin_tree):
        """C nodes fail, so only the A/B levels are yielded"""
        result = traverse_where(twin_tree, lambda v: v in (Label.A, Label.B))
        assert values(result) == [Label.A, Label.B, Label.B]

    def test_failing_node_prunes_subtree(self, barrier_tree):
        """The C under the first B is pruned with it; the B under D fails on its own"""
        assert values(traverse_where(barrier_tree, lambda v: v != Label.B)) == [Label.A, Label.D]

    def test_descendants_of_failing_node_not_visited(self):
        """A passing grandchild below a failing child never appears"""
        tree = Tree(value=Label.A, children=[
            Tree(value=Label.B, children=[leaf(Label.C)]),
        ])
        assert values(traverse_where(tree, lambda v: v != Label.B)) == [Label.A]

    def test_twin_subtrees_pruned(self, twin_tree):
        """A[B[C], B[C]] with value != B yields only A, whose path is empty"""
        states = list(traverse_where(twin_tree, lambda v: v != Label.B))
        assert values(states) == [Label.A]
        assert states[0].path_to_root() == []

    def test_failing_root_yields_nothing(self, chain_tree):
        """Descendants are never reached when the root fails"""
        assert values(traverse_where(chain_tree, lambda v: v != Label.A)) == []

    def test_condition_not_evaluated_below_barrier(self, chain_tree):
        seen = []

        def condition(value):
            seen.append(value)
            return value != Label.B

        list(traverse_where(chain_tree, condition))

        assert Label.B in seen
        assert Label.C not in seen

    def test_tree_iter_where_method(self, barrier_tree):
        result = barrier_tree.iter_where(lambda v: v != Label.B)
        assert isinstance(result, TreeTraversal)
        assert values(result) == [Label.A, Label.D]


class TestPathToRoot:
    """Tests for ancestor reconstruction"""

    def test_path_nearest_first(self, chain_tree):
        state = next(s for s in traverse(chain_tree) if s.value == Label.C)
        assert state.path_to_root() == [Label.B, Label.A]

    def test_root_has_empty_path(self, chain_tree):
        root = next(iter(traverse(chain_tree)))
        assert root.path_to_root() == []
        assert root.ancestors() == []
        assert root.depth == 0

    def test_path_length_matches_depth(self, twin_tree):
        for state in traverse(twin_tree):
            assert len(state.path_to_root()) == state.depth

    def test_path_survives_exhausted_traversal(self, twin_tree):
        """Parent chains stay valid after the iterator has moved past the node"""
        states = list(traverse(twin_tree))
        leaves = [s for s in states if s.value == Label.C]
        assert len(leaves) == 2
        for state in leaves:
            assert state.path_to_root() == [Label.B, Label.A]

    def test_ancestors_are_original_subtrees(self, twin_tree):
        states = list(traverse(twin_tree))
        first_c, second_c = states[3], states[4]
        assert first_c.ancestors()[0] is twin_tree.children[0]
        assert second_c.ancestors()[0] is twin_tree.children[1]
        assert first_c.ancestors()[-1] is twin_tree

    def test_state_wraps_subtree(self, chain_tree):
        state = TraversalState(tree=chain_tree.children[0])
        assert state.value == Label.B
        assert state.tree is chain_tree.children[0]
        assert state.parent is None
