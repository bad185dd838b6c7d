import unittest
from ramo.core.model import ValueKind
from ramo.core.presentation import (
    classify,
    container_placeholder,
    has_entries,
    node_id,
    summarize,
)


class TestPresentation(unittest.TestCase):

    def test_classify(self):
        self.assertEqual(classify(None), ValueKind.NULL)
        self.assertEqual(classify(True), ValueKind.BOOLEAN)
        self.assertEqual(classify(0), ValueKind.NUMBER)
        self.assertEqual(classify(2.5), ValueKind.NUMBER)
        self.assertEqual(classify("x"), ValueKind.STRING)
        self.assertEqual(classify([]), ValueKind.ARRAY)
        self.assertEqual(classify({}), ValueKind.OBJECT)

    def test_summarize_scalars(self):
        self.assertEqual(summarize("hello"), '"hello"')
        self.assertEqual(summarize('say "hi"'), '"say "hi""')
        self.assertEqual(summarize(True), "true")
        self.assertEqual(summarize(False), "false")
        self.assertEqual(summarize(1), "1")
        self.assertEqual(summarize(2.5), "2.5")
        self.assertEqual(summarize(None), "null")

    def test_summarize_falls_back_to_json(self):
        self.assertEqual(summarize({"a": [1, 2]}), '{"a": [1, 2]}')

    def test_node_id(self):
        self.assertEqual(node_id("", 0), "_0")
        self.assertEqual(node_id("a.b.2", 2), "a.b.2_2")

    def test_placeholders(self):
        self.assertEqual(container_placeholder([1, 2, 3]), "[3 items]")
        self.assertEqual(container_placeholder({"a": 1}), "{1 properties}")
        self.assertEqual(container_placeholder([]), "[0 items]")
        self.assertEqual(container_placeholder({}), "{0 properties}")

    def test_has_entries(self):
        self.assertTrue(has_entries([0]))
        self.assertTrue(has_entries({"a": None}))
        self.assertFalse(has_entries([]))
        self.assertFalse(has_entries({}))
        self.assertFalse(has_entries("text"))
        self.assertFalse(has_entries(None))
