import unittest

from graphanim import Graph
from graphanim.core.geometry import Color
from graphanim.core.params import RenderParams


class TestRenderParams(unittest.TestCase):

    def test_defaults(self):
        p = RenderParams()
        self.assertEqual(p.duration_add, 1000)
        self.assertEqual(p.duration_move, 1000)
        self.assertEqual(p.color_node_fill, Color(255, 255, 255))
        self.assertEqual(p.color_node_stroke, Color(128, 139, 150))
        self.assertEqual(p.color_tag_selected, Color(191, 255, 0))
        self.assertEqual(p.color_tag_deleted, Color(255, 0, 0))
        self.assertEqual(p.radius_node, 20)
        self.assertTrue(p.display_node_label)
        self.assertIn("stroke_width_link", RenderParams.names())

    def test_overrides_are_coerced(self):
        p = RenderParams(duration_add=10, color_text="#010203")
        self.assertEqual(p.duration_add, 10)
        self.assertEqual(p.color_text, Color(1, 2, 3))

    def test_invalid_values(self):
        with self.assertRaises(KeyError):
            RenderParams(bogus=1)
        for name, value in [
            ("duration_add", -1),
            ("duration_add", 1.5),
            ("radius_node", 0),
            ("radius_node", True),
            ("display_node_label", 1),
            ("color_text", (300, 0, 0)),
        ]:
            with self.assertRaises(ValueError, msg=name):
                RenderParams(**{name: value})

    def test_update_is_all_or_nothing(self):
        p = RenderParams()
        with self.assertRaises(KeyError):
            p.update(duration_add=5, bogus=1)
        self.assertEqual(p.duration_add, 1000)

    def test_attribute_assignment_is_validated(self):
        p = RenderParams()
        p.radius_node = 30
        self.assertEqual(p.radius_node, 30)
        with self.assertRaises(ValueError):
            p.radius_node = "x"

    def test_copy_equality_and_repr(self):
        p = RenderParams(radius_node=25)
        q = p.copy()
        self.assertEqual(p, q)
        q.radius_node = 26
        self.assertNotEqual(p, q)
        self.assertIn("radius_node=25", repr(p))

    def test_graph_params(self):
        p = RenderParams(duration_add=7)
        g = Graph(p, duration_move=3)
        self.assertEqual(g.params.duration_add, 7)
        self.assertEqual(g.params.duration_move, 3)
        self.assertEqual(p.duration_move, 1000)  # the graph holds a copy
        g.set_param("duration_color", 9)
        self.assertEqual(g.params.duration_color, 9)
        with self.assertRaises(KeyError):
            g.set_param("nope", 1)


if __name__ == "__main__":
    unittest.main()
