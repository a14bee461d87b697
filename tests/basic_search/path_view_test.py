import unittest

import numpy as np

import astarlib as asl


class TestPathView(unittest.TestCase):
    def setUp(self):
        blocked = np.zeros((3, 3), dtype=bool)
        blocked[1, 1] = True
        self.grid = asl.examples.Grid(blocked)
        self.search = self.grid.search((0, 0), (2, 2))

    def test_forward_and_backward(self):
        path = self.search.path()
        forward = path.to_list()
        self.assertEqual(list(reversed(path)), forward[::-1])
        self.assertEqual(list(path.identities()), [n.identity() for n in forward])

    def test_length(self):
        path = self.search.path()
        self.assertTrue(path)
        self.assertEqual(len(path), self.search.steps() + 1)
        self.assertEqual(len(path), len(path.to_list()))

    def test_restartable(self):
        path = self.search.path()
        iterator = iter(path)
        next(iterator)
        next(iterator)
        self.assertEqual(next(iter(path)).identity(), (0, 0))
        self.assertEqual(list(path), list(self.search))

    def test_yields_graph_nodes(self):
        for node in self.search.path():
            self.assertIs(node, self.grid[node.identity()])

    def test_empty(self):
        path = asl.PathView.empty()
        self.assertEqual(list(path), [])
        self.assertEqual(list(reversed(path)), [])
        self.assertEqual(list(path.identities()), [])
        self.assertEqual(len(path), 0)
        self.assertFalse(path)
