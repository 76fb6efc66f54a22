import unittest

from graphanim import Graph
from graphanim.algorithms import (
    coloration,
    compare,
    connectivity,
    eulerian,
    sequence,
    sets,
    transform,
    traversal,
    tree,
)
from graphanim.core.errors import NodeNotFound
from graphanim.utils import colors


class TestTraversal(unittest.TestCase):

    def setUp(self):
        self.G = Graph.from_config("A\nB\nC\nD\nE\nA - B\nA - C\nB - D\n")

    def test_dfs(self):
        order, trees = traversal.dfs(self.G)
        self.assertEqual(order, ["A", "B", "D", "C", "E"])
        self.assertEqual(len(trees), 2)
        self.assertEqual(trees[0].nodes(), ["A", "B", "C", "D"])
        self.assertEqual(trees[0].size(), 3)
        self.assertEqual(trees[1].nodes(), ["E"])
        # the traversal is animated on the input graph
        self.assertIsNotNone(self.G.visual("A", "B").current.selected)
        self.assertIsNotNone(self.G.visual("D").current.selected)

    def test_bfs(self):
        order, trees = traversal.bfs(self.G)
        self.assertEqual(order, ["A", "B", "C", "D", "E"])
        self.assertEqual([t.order() for t in trees], [4, 1])

    def test_start_node(self):
        order, trees = traversal.dfs(self.G, start="B")
        self.assertEqual(order, ["B", "A", "C", "D"])
        self.assertEqual(len(trees), 1)
        with self.assertRaises(NodeNotFound):
            traversal.bfs(self.G, start="Z")

    def test_follows_direction(self):
        G = Graph.from_config("A\nB\nC\nA > B\nC > A\n")
        order, _ = traversal.dfs(G, start="A")
        self.assertEqual(order, ["A", "B"])

    def test_cross_links_are_marked(self):
        G = Graph.from_config("A\nB\nC\nA - B\nB - C\nC - A\n")
        traversal.dfs(G)
        # A-B and B-C are tree links, C-A closes the cycle
        self.assertEqual(G.visual("A", "C").current.selected, traversal.CROSS_COLOR)
        self.assertEqual(G.visual("A", "B").current.selected, G.params.color_tag_selected)


class TestConnectivity(unittest.TestCase):

    def test_components(self):
        G = Graph.from_config("A\nB\nC\nD\nE\nA - B\nC - D\n")
        before = (G.to_config(), G.total_duration)
        cg, comps = connectivity.components(G)
        self.assertEqual(comps, [["A", "B"], ["C", "D"], ["E"]])
        self.assertEqual((G.to_config(), G.total_duration), before)
        self.assertGreater(cg.total_duration, 1)
        self.assertEqual(cg.visual("A").current.stroke, cg.visual("B").current.stroke)
        self.assertNotEqual(cg.visual("A").current.stroke, cg.visual("C").current.stroke)

    def test_components_ignore_direction(self):
        G = Graph.from_config("A\nB\nC\nA > B\nC > B\n")
        cg, comps = connectivity.components(G)
        self.assertEqual(comps, [["A", "B", "C"]])
        self.assertFalse(cg.is_directed())

    def test_strongly_connected(self):
        G = Graph.from_config("A\nB\nC\nD\nA > B\nB > C\nC > A\nC > D\n")
        cg, comps = connectivity.strongly_connected(G)
        self.assertEqual(comps, [["A", "B", "C"], ["D"]])
        self.assertEqual(cg.links(), G.links())


class TestColoration(unittest.TestCase):

    def test_greedy(self):
        G = Graph.from_config("A\nB\nC\nD\nA - B\nB - C\nC - A\nC - D\n")
        cg, classes = coloration.greedy(G)
        self.assertEqual(classes, [["C"], ["A", "D"], ["B"]])
        index = {n: k for k, members in enumerate(classes) for n in members}
        for a, b, _, _ in G.links():
            self.assertNotEqual(index[a], index[b])
        self.assertEqual(cg.visual("C").current.stroke, colors.PALETTE[0])
        self.assertEqual(cg.visual("D").current.stroke, colors.PALETTE[1])
        self.assertTrue(all(cg.node_position(n)[1] for n in cg.nodes()))

    def test_without_arrangement(self):
        G = Graph.from_config("A\nB\nA - B\n")
        cg, classes = coloration.greedy(G, arrange=False)
        self.assertEqual(classes, [["A"], ["B"]])
        self.assertFalse(cg.node_position("A")[1])


class TestSequence(unittest.TestCase):

    def test_is_valid(self):
        self.assertTrue(sequence.is_valid([1, 1, 2]))
        self.assertTrue(sequence.is_valid([2, 2, 2]))
        self.assertTrue(sequence.is_valid([]))
        self.assertFalse(sequence.is_valid([3, 1]))
        self.assertFalse(sequence.is_valid([1]))
        self.assertFalse(sequence.is_valid([-1, 1]))
        self.assertFalse(sequence.is_valid([3, 3, 1, 1]))

    def test_complete(self):
        self.assertEqual(sequence.complete(4), [3, 3, 3, 3])
        g = sequence.to_graph(sequence.complete(5), names="VWXYZ")
        self.assertEqual(g.nodes(), list("VWXYZ"))
        self.assertEqual(g.size(), 10)

    def test_to_graph(self):
        g = sequence.to_graph([3, 2, 2, 1])
        self.assertEqual(g.nodes(), ["A", "B", "C", "D"])
        self.assertEqual(g.degrees(), {"A": 3, "B": 2, "C": 2, "D": 1})
        self.assertEqual(g.total_duration, 1)
        with self.assertRaises(ValueError):
            sequence.to_graph([3, 1])
        with self.assertRaises(ValueError):
            sequence.to_graph([1, 1], names="A")


class TestTransform(unittest.TestCase):

    def test_undirect(self):
        G = Graph.from_config("A\nB\nC\nA > B 3\nB - C\n")
        transform.undirect(G)
        self.assertEqual(G.links(), [("A", "B", True, 3), ("B", "C", True, 0)])

    def test_transpose(self):
        G = Graph.from_config("A\nB\nC\nA > B 3\nB - C\n")
        before = G.total_duration
        transform.transpose(G)
        self.assertEqual(G.links(), [("B", "A", False, 3), ("B", "C", True, 0)])
        self.assertEqual(G.total_duration, before + 1)  # one batch
        transform.transpose(G)
        self.assertEqual(G.links(), [("A", "B", False, 3), ("B", "C", True, 0)])


class TestEulerian(unittest.TestCase):

    def test_cycle(self):
        G = Graph.from_config("A\nB\nC\nD\nA - B\nB - C\nC - D\nD - A\n")
        eg, walk = eulerian.hierholzer(G)
        self.assertEqual(walk, ["A", "B", "C", "D", "A"])
        self.assertEqual(eg.visual("A", "B").current.stroke, colors.PALETTE[0])
        self.assertEqual(eg.visual("A", "D").current.stroke, colors.PALETTE[3])
        # the input graph is not animated
        self.assertEqual(G.visual("A", "B").current.stroke, G.params.color_link_stroke)

    def test_path_starts_on_an_odd_node(self):
        G = Graph.from_config("A\nB\nC\nD\nA - B\nB - C\nC - A\nC - D\n")
        _, walk = eulerian.hierholzer(G)
        self.assertEqual(walk, ["C", "A", "B", "C", "D"])

    def test_directed(self):
        G = Graph.from_config("A\nB\nC\nA > B\nB > C\nC > A\n")
        self.assertEqual(eulerian.hierholzer(G)[1], ["A", "B", "C", "A"])
        G = Graph.from_config("A\nB\nC\nA > B\nB > C\n")
        self.assertEqual(eulerian.hierholzer(G)[1], ["A", "B", "C"])

    def test_no_walk(self):
        G = Graph.from_config("A\nB\nC\nD\nA - B\nA - C\nA - D\n")
        self.assertEqual(eulerian.hierholzer(G)[1], [])
        with self.assertRaises(ValueError):
            eulerian.hierholzer(Graph.from_config("A\nB\nC\nA - B\n"))


class TestTree(unittest.TestCase):

    def test_minimal_spanning_tree(self):
        G = Graph.from_config("A\nB\nC\nD\nA - B 1\nB - C 2\nC - D 3\nD - A 4\nA - C 5\n")
        t = tree.minimal_spanning_tree(G)
        self.assertEqual(t.links(), [("A", "B", True, 1), ("B", "C", True, 2), ("C", "D", True, 3)])
        self.assertEqual(G.size(), 5)
        with self.assertRaises(ValueError):
            tree.minimal_spanning_tree(Graph.from_config("A\nB\n"))

    def test_minimal_spanning_tree_ignores_direction(self):
        G = Graph.from_config("A\nB\nC\nA > B 2\nC > B 1\nA - C 3\n")
        t = tree.minimal_spanning_tree(G)
        self.assertEqual(t.links(), [("A", "B", True, 2), ("B", "C", True, 1)])

    def test_bfs_tree(self):
        G = Graph.from_config("A\nB\nC\nD\nA - B\nA - C\nB - D\nC - D\n")
        t = tree.bfs_tree(G, "A")
        self.assertEqual(t.links(), [("A", "B", True, 0), ("A", "C", True, 0), ("B", "D", True, 0)])
        a, pinned = t.node_position("A")
        self.assertTrue(pinned)
        self.assertEqual(t.node_position("B")[0], (a.x - 30, a.y + 60))
        self.assertEqual(t.node_position("C")[0], (a.x + 30, a.y + 60))
        self.assertEqual(t.node_position("D")[0], (a.x, a.y + 120))
        with self.assertRaises(NodeNotFound):
            tree.bfs_tree(G, "Z")

    def test_layout_as_tree_keeps_links(self):
        G = Graph.from_config("A\nB\nC\nD\nA - B\nA - C\nB - D\nC - D\n")
        t = tree.layout_as_tree(G, "A")
        self.assertEqual(t.links(), G.links())
        self.assertTrue(all(t.node_position(n)[1] for n in t.nodes()))


class TestCompare(unittest.TestCase):

    def test_equal(self):
        G = Graph.from_config("A\nB\nA - B 2\n")
        self.assertTrue(compare.equal(G, Graph.from_config("A\nB\nA - B 2\n")))
        other_value = Graph.from_config("A\nB\nA - B 3\n")
        self.assertFalse(compare.equal(G, other_value))
        self.assertTrue(compare.equal(G, other_value, values=False))
        self.assertFalse(compare.equal(G, Graph.from_config("A\nB\nA > B 2\n")))

    def test_isomorphic(self):
        G1 = Graph.from_config("A\nB\nC\nD\nA > B\nC - B\n")
        G2 = Graph.from_config("E\nF\nG\nH\nE > F\nG - F 9\n")
        self.assertEqual(compare.isomorphic(G1, G2), {"E": "A", "F": "B", "G": "C", "H": "D"})
        G3 = Graph.from_config("E\nF\nG\nH\nF > E\nG - F\n")
        self.assertIsNone(compare.isomorphic(G1, G3))
        self.assertIsNone(compare.isomorphic(G1, Graph.from_config("A\nB\nA - B\n")))


class TestSets(unittest.TestCase):

    def test_union(self):
        G1 = Graph.from_config("A\nB\nA > B 3\n")
        G2 = Graph.from_config("A\nB\nC\nB > A\nB > C 2\n")
        g = sets.union(G1, G2)
        self.assertEqual(g.nodes(), ["A", "B", "C"])
        self.assertEqual(g.links(), [("A", "B", True, 3), ("B", "C", False, 2)])
        self.assertIsNotNone(g.visual("B", "C").current.selected)
        self.assertEqual(G1.links(), [("A", "B", False, 3)])

    def test_intersection(self):
        G1 = Graph.from_config("A\nB\nC\nD\nA - B 1\nB - C\nA > C\nC - D\n")
        G2 = Graph.from_config("A\nB\nC\nA > B\nB - C\n")
        g = sets.intersection(G1, G2)
        self.assertEqual(g.nodes(), ["A", "B", "C"])
        self.assertEqual(g.links(), [("A", "B", False, 1), ("B", "C", True, 0)])

    def test_complementary(self):
        G = Graph.from_config("A\nB\nC\nA - B\nB > C\n")
        g = sets.complementary(G)
        self.assertEqual(g.links(), [("A", "C", True, 0), ("C", "B", False, 0)])
        self.assertEqual(g.total_duration, G.total_duration + 1)  # copy, then one batch


if __name__ == "__main__":
    unittest.main()
