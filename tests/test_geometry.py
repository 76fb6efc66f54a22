import unittest

from graphanim.core.geometry import Color, Point


class TestPoint(unittest.TestCase):

    def test_of_rounds_pairs(self):
        self.assertEqual(Point.of((1.6, 2.4)), Point(2, 2))
        self.assertEqual(Point.of([3, -4]), Point(3, -4))
        p = Point(1, 2)
        self.assertIs(Point.of(p), p)

    def test_of_rejects_garbage(self):
        for bad in ("ab", (1,), (1, 2, 3), None, ("x", 1)):
            with self.assertRaises(ValueError):
                Point.of(bad)

    def test_of_rejects_non_finite(self):
        for bad in ((float("inf"), 0), (0, float("-inf")), (float("nan"), 1)):
            with self.assertRaises(ValueError):
                Point.of(bad)

    def test_metrics(self):
        self.assertEqual(Point(3, 4).distance(Point(0, 0)), 5.0)
        self.assertEqual(Point(1, 1).midpoint(Point(4, 4)), Point(2, 2))
        self.assertEqual(Point(5, 7).delta(Point(1, 2)), (4, 5))


class TestColor(unittest.TestCase):

    def test_of_accepts_hex_and_triples(self):
        self.assertEqual(Color.of("#ff8000"), Color(255, 128, 0))
        self.assertEqual(Color.of((1, 2, 3)), Color(1, 2, 3))
        c = Color(9, 9, 9)
        self.assertIs(Color.of(c), c)

    def test_of_rejects_out_of_range(self):
        for bad in ((256, 0, 0), (-1, 0, 0), (True, 0, 0), (1.5, 0, 0), (1, 2), "red", "#12345", "#gg0000", 7):
            with self.assertRaises(ValueError, msg=repr(bad)):
                Color.of(bad)

    def test_renderings(self):
        self.assertEqual(Color(1, 2, 3).svg(), "rgb(1,2,3)")
        self.assertEqual(Color(255, 0, 16).hex(), "#ff0010")


if __name__ == "__main__":
    unittest.main()
