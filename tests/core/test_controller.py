import unittest
from unittest.mock import MagicMock
from ramo.core.controller import ExpansionController
from ramo.core.materializer import flatten


DOC = {"a": 1, "b": {"c": 2, "d": [1, {"e": None}]}, "f": [], "g": [[0]]}


class TestExpansionController(unittest.TestCase):

    def setUp(self):
        self.controller = ExpansionController()
        self.controller.load(DOC)

    def test_initial_state(self):
        controller = ExpansionController()

        self.assertEqual(controller.expanded_nodes, set())
        self.assertFalse(controller.all_expanded)
        self.assertEqual(controller.tree, [])

    def test_toggle_expands_and_collapses(self):
        tree = self.controller.toggle_node("b_0")

        self.assertTrue(tree[1].expanded)
        self.assertEqual([c.display_key for c in tree[1].children], ["c", "d"])

        tree = self.controller.toggle_node("b_0")

        self.assertFalse(tree[1].expanded)
        self.assertEqual(tree[1].children, [])

    def test_toggle_pair_restores_set(self):
        self.controller.toggle_node("g_0")
        before = set(self.controller.expanded_nodes)

        self.controller.toggle_node("b.d_1")
        self.controller.toggle_node("b.d_1")

        self.assertEqual(self.controller.expanded_nodes, before)

    def test_expand_all_reaches_every_container(self):
        tree = self.controller.expand_all()

        expandable = [n for n in flatten(tree) if n.expandable]
        self.assertTrue(expandable)
        self.assertTrue(all(n.expanded for n in expandable))
        self.assertEqual(
            self.controller.expanded_nodes,
            {"b_0", "b.d_1", "b.d.1_2", "g_0", "g.0_1"},
        )
        self.assertTrue(self.controller.all_expanded)

    def test_collapse_all(self):
        self.controller.expand_all()

        tree = self.controller.collapse_all()

        self.assertEqual(self.controller.expanded_nodes, set())
        self.assertFalse(self.controller.all_expanded)
        self.assertFalse(any(n.expanded for n in flatten(tree)))

    def test_toggle_resets_all_expanded(self):
        self.controller.expand_all()
        self.controller.toggle_node("b_0")
        self.controller.toggle_node("b_0")

        # every container is expanded again but the flag stays down
        self.assertTrue(all(n.expanded for n in flatten(self.controller.tree) if n.expandable))
        self.assertFalse(self.controller.all_expanded)

    def test_expand_collapse_all_switches(self):
        self.controller.expand_collapse_all()
        self.assertTrue(self.controller.all_expanded)
        self.assertTrue(self.controller.expanded_nodes)

        self.controller.expand_collapse_all()
        self.assertFalse(self.controller.all_expanded)
        self.assertEqual(self.controller.expanded_nodes, set())

    def test_expand_all_with_explicit_value(self):
        controller = ExpansionController()

        controller.expand_all({"x": {"y": {"z": 1}}})

        self.assertEqual(controller.expanded_nodes, {"x_0", "x.y_1"})
        self.assertEqual(controller.tree, [])

    def test_state_survives_reload(self):
        self.controller.toggle_node("b_0")
        self.controller.toggle_node("stale_3")

        tree = self.controller.load({"b": {"c": "new"}, "z": {"q": 1}})

        self.assertTrue(tree[0].expanded)
        self.assertEqual(tree[0].children[0].value_summary, '"new"')
        self.assertFalse(tree[1].expanded)
        self.assertIn("stale_3", self.controller.expanded_nodes)

    def test_clear_keeps_expansion(self):
        self.controller.toggle_node("b_0")

        self.assertEqual(self.controller.clear(), [])
        self.assertEqual(self.controller.expanded_nodes, {"b_0"})

    def test_on_change_after_each_operation(self):
        listener = MagicMock()
        controller = ExpansionController(on_change=listener)

        controller.load(DOC)
        controller.toggle_node("b_0")
        controller.expand_all()
        controller.collapse_all()

        self.assertEqual(listener.call_count, 4)
        listener.assert_called_with(controller.tree)
