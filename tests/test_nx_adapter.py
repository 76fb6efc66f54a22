import unittest

import networkx as nx

from graphanim import Graph
from graphanim.adapters import available_backends, load_adapter
from graphanim.adapters.networkx import from_nx, to_nx
from graphanim.core.errors import NodeAlreadyExists


class TestNetworkXAdapter(unittest.TestCase):

    def setUp(self):
        self.G = Graph.from_config("A 0 0\nB 100 0\nC\nA - B 4\nB > C 2\n")

    def test_to_nx_directed(self):
        nxG = to_nx(self.G)
        self.assertIsInstance(nxG, nx.DiGraph)
        self.assertEqual(sorted(nxG.edges()), [("A", "B"), ("B", "A"), ("B", "C")])
        self.assertEqual(nxG.edges["B", "A"], {"value": 4, "bidirectional": True})
        self.assertFalse(nxG.edges["B", "C"]["bidirectional"])
        self.assertEqual(nxG.nodes["B"], {"x": 100, "y": 0, "pinned": True})
        self.assertFalse(nxG.nodes["C"]["pinned"])

    def test_to_nx_undirected(self):
        nxG = to_nx(self.G, directed=False)
        self.assertFalse(nxG.is_directed())
        self.assertEqual(nxG.number_of_edges(), 2)

    def test_roundtrip(self):
        G2 = from_nx(to_nx(self.G))
        self.assertEqual(G2.to_config(), self.G.to_config())
        self.assertEqual(G2.total_duration, 1)  # one batch

    def test_from_undirected(self):
        nxG = nx.path_graph(["P", "Q", "R"])
        nxG.edges["P", "Q"]["value"] = 9
        G = from_nx(nxG)
        self.assertEqual(G.links(), [("P", "Q", True, 9), ("Q", "R", True, 0)])

    def test_from_directed_pairs(self):
        nxG = nx.DiGraph([("A", "B"), ("B", "A"), ("B", "C")])
        G = from_nx(nxG)
        self.assertEqual(G.links(), [("A", "B", True, 0), ("B", "C", False, 0)])

    def test_lossy_import_warns(self):
        nxG = nx.MultiGraph()
        nxG.add_edge("A", "A")
        nxG.add_edge("A", "B")
        nxG.add_edge("A", "B")
        nxG.add_edge(12, "B")
        with self.assertWarns(RuntimeWarning):
            G = from_nx(nxG)
        self.assertEqual(G.nodes(), ["A", "B"])
        self.assertEqual(G.links(), [("A", "B", True, 0)])

    def test_into_existing_graph(self):
        G = Graph()
        G.add_node("Z", (0, 0))
        from_nx(nx.Graph([("X", "Y")]), graph=G)
        self.assertEqual(G.nodes(), ["X", "Y", "Z"])

    def test_name_clash_imports_nothing(self):
        G = Graph()
        G.add_node("B", (0, 0))
        before = (G.to_config(), G.total_duration, G.version)
        with self.assertRaises(NodeAlreadyExists):
            from_nx(nx.Graph([("A", "B")]), graph=G)
        self.assertEqual((G.to_config(), G.total_duration, G.version), before)
        self.assertFalse(G.paused)

    def test_into_paused_graph_stays_paused(self):
        G = Graph()
        G.pause()
        from_nx(nx.Graph([("X", "Y")]), graph=G)
        self.assertTrue(G.paused)
        G.resume()
        self.assertEqual(G.links(), [("X", "Y", True, 0)])

    def test_backend_registry(self):
        self.assertTrue(available_backends()["networkx"])
        self.assertIs(load_adapter("networkx").to_nx, to_nx)
        with self.assertRaises(ValueError):
            load_adapter("nope")


class TestLazyNXProxy(unittest.TestCase):

    def setUp(self):
        self.G = Graph.from_config("A\nB\nC\nD\nA - B\nB - C\nC > D\n")

    def test_algorithms(self):
        self.assertEqual(self.G.nx.shortest_path(self.G, "A", "D"), ["A", "B", "C", "D"])
        self.assertFalse(self.G.nx.has_path(self.G, "D", "A"))
        self.assertTrue(self.G.nx.is_connected(self.G, _nx_directed=False))

    def test_cache_follows_version(self):
        first = self.G.nx.backend()
        self.assertIs(self.G.nx.backend(), first)
        self.G.add_node("E")
        second = self.G.nx.backend()
        self.assertIsNot(second, first)
        self.assertIn("E", second)
        self.G.nx.clear()
        self.assertIsNot(self.G.nx.backend(), second)

    def test_unknown_callable(self):
        with self.assertRaises(AttributeError):
            self.G.nx.definitely_not_an_algorithm


if __name__ == "__main__":
    unittest.main()
