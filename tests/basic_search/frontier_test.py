import unittest

import astarlib as asl


class TestFrontier(unittest.TestCase):
    def test_pops_in_cost_order(self):
        frontier = asl.search.Frontier()
        for name, f in [("c", 3.0), ("a", 1.0), ("b", 2.0)]:
            frontier.insert(name, name.upper(), f)
        self.assertEqual(
            [frontier.pop_min() for _ in range(3)], [("a", "A"), ("b", "B"), ("c", "C")]
        )
        self.assertFalse(frontier)

    def test_ties_are_first_in_first_out(self):
        frontier = asl.search.Frontier()
        for name in ["x", "y", "z"]:
            frontier.insert(name, name, 1.0)
        self.assertEqual([frontier.pop_min()[0] for _ in range(3)], ["x", "y", "z"])

    def test_find(self):
        frontier = asl.search.Frontier()
        frontier.insert("a", "A", 2.5)
        entry = frontier.find("a")
        self.assertEqual(entry.f, 2.5)
        self.assertEqual(entry.node, "A")
        self.assertIsNone(frontier.find("b"))

    def test_remove_and_reinsert(self):
        frontier = asl.search.Frontier()
        frontier.insert("a", "A", 5.0)
        frontier.insert("b", "B", 3.0)
        frontier.remove("a")
        self.assertNotIn("a", frontier)
        self.assertEqual(len(frontier), 1)
        frontier.insert("a", "A", 1.0)
        self.assertEqual(frontier.pop_min(), ("a", "A"))
        self.assertEqual(frontier.pop_min(), ("b", "B"))
        with self.assertRaises(asl.search.EmptyFrontierError):
            frontier.pop_min()

    def test_removed_entries_are_skipped(self):
        frontier = asl.search.Frontier()
        frontier.insert("a", "A", 1.0)
        frontier.insert("b", "B", 2.0)
        frontier.remove("a")
        self.assertEqual(frontier.pop_min(), ("b", "B"))

    def test_double_insert(self):
        frontier = asl.search.Frontier()
        frontier.insert("a", "A", 1.0)
        with self.assertRaises(ValueError):
            frontier.insert("a", "A", 0.5)

    def test_empty(self):
        frontier = asl.search.Frontier()
        self.assertEqual(len(frontier), 0)
        with self.assertRaises(IndexError):
            frontier.pop_min()
        with self.assertRaises(KeyError):
            frontier.remove("a")


class TestVisitedSet(unittest.TestCase):
    def test_membership(self):
        visited = asl.search.VisitedSet()
        visited.insert((0, 0))
        visited.insert((1, 0))
        self.assertTrue(visited.contains((0, 0)))
        self.assertIn((1, 0), visited)
        self.assertNotIn((2, 0), visited)
        self.assertEqual(len(visited), 2)
        self.assertEqual(list(visited), [(0, 0), (1, 0)])

    def test_double_insert(self):
        visited = asl.search.VisitedSet()
        visited.insert("a")
        with self.assertRaises(ValueError):
            visited.insert("a")
