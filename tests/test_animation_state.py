import unittest

from graphanim import Graph
from graphanim.core.errors import AnimationStateMisuse, ClockOverflow
from graphanim.core.graph import AnimState
from graphanim.core.renderer import MAX_TOTAL_DURATION


def batches(g):
    return sorted({p["batch"] for p in g.timeline()})


class TestPauseResume(unittest.TestCase):

    def test_strict_alternation(self):
        g = Graph()
        self.assertIs(g.state, AnimState.RESUMED)
        with self.assertRaises(AnimationStateMisuse):
            g.resume()
        g.pause()
        self.assertTrue(g.paused)
        with self.assertRaises(AnimationStateMisuse) as cm:
            g.pause()
        self.assertIsInstance(cm.exception, RuntimeError)
        g.resume()
        with self.assertRaises(AnimationStateMisuse):
            g.resume()

    def test_step_requires_pause(self):
        g = Graph()
        with self.assertRaises(AnimationStateMisuse):
            g.step(100)

    def test_paused_mutations_are_one_batch(self):
        g = Graph()
        g.pause()
        g.add_node("A", (0, 0))
        g.add_node("B", (100, 0))
        g.add_link("A", "B")
        self.assertEqual(g.total_duration, 0)
        self.assertEqual(g.render(), "")
        g.step(500)
        self.assertTrue(g.paused)
        self.assertEqual(g.total_duration, 500)
        self.assertEqual(batches(g), [0])
        g.resume()
        self.assertEqual(g.total_duration, 500)  # nothing pending, explicit step done

    def test_resume_without_step_commits_one_unit(self):
        g = Graph()
        g.pause()
        g.add_node("A", (0, 0))
        g.resume()
        self.assertEqual(g.total_duration, 1)
        kinds = [p["kind"] for p in g.timeline()]
        self.assertEqual(kinds, ["fade_in"])

    def test_resume_commits_mutations_after_last_step(self):
        g = Graph()
        g.pause()
        g.add_node("A", (0, 0))
        g.step(10)
        g.add_node("B", (100, 0))
        g.resume()
        self.assertEqual(g.total_duration, 11)
        self.assertEqual(batches(g), [0, 1])

    def test_empty_pause_resume(self):
        g = Graph()
        g.pause()
        g.resume()
        self.assertEqual(g.total_duration, 1)
        self.assertTrue(g.render().lstrip().startswith("<svg"))

    def test_step_zero_counts_as_one(self):
        g = Graph()
        g.pause()
        g.step(0)
        self.assertEqual(g.total_duration, 1)

    def test_invalid_durations(self):
        g = Graph()
        g.pause()
        for bad in (-1, 1.5, "10", True):
            with self.assertRaises(ValueError):
                g.step(bad)
        with self.assertRaises(ValueError):
            g.sleep(-5)


class TestResumedCommits(unittest.TestCase):

    def test_each_mutation_commits(self):
        g = Graph()
        g.add_node("A", (0, 0))
        self.assertEqual(g.total_duration, 1000)  # pinned only: no layout batch
        g.add_node("B")
        self.assertEqual(g.total_duration, 3000)  # add batch + layout batch
        g.fill_node("A", (0, 0, 255))
        self.assertEqual(g.total_duration, 4000)

    def test_durations_follow_params(self):
        g = Graph(duration_add=10, duration_color=20, duration_select=30, duration_delete=40, duration_move=50)
        g.add_node("A", (0, 0))
        g.color_node("A", (1, 2, 3))
        g.select_node("A")
        g.move_node("A", (5, 5))
        g.delete_node("A")
        self.assertEqual(g.total_duration, 10 + 20 + 30 + 50 + 40)

    def test_begin_is_clock_before_batch(self):
        g = Graph(duration_add=10, duration_color=20)
        g.add_node("A", (0, 0))
        g.sleep(5)
        g.fill_node("A", (1, 1, 1))
        fill = [p for p in g.timeline() if p["kind"] == "fill"][0]
        self.assertEqual((fill["begin"], fill["dur"]), (15, 20))
        self.assertEqual(g.total_duration, 35)


class TestLayoutDeferral(unittest.TestCase):

    def test_layout_deferred_until_step(self):
        g = Graph()
        g.pause()
        g.add_node("A")
        g.add_node("B")
        self.assertEqual(g.node_position("A")[0], (0, 0))  # not placed yet
        g.step(100)
        a, _ = g.node_position("A")
        b, _ = g.node_position("B")
        self.assertGreaterEqual(a.distance(b), 2 * g.params.radius_node)

    def test_explicit_layout_request(self):
        g = Graph()
        g.pause()
        g.add_node("A", (0, 0))
        g.step(10)
        g.pin_node("A", False)
        g.layout()
        g.step(10)
        self.assertFalse(g.node_position("A")[1])


class TestClockCeiling(unittest.TestCase):

    def test_step_overflow_leaves_state(self):
        g = Graph()
        g.sleep(MAX_TOTAL_DURATION - 10)
        g.pause()
        g.add_node("A", (0, 0))
        with self.assertRaises(ClockOverflow) as cm:
            g.step(100)
        self.assertIsInstance(cm.exception, OverflowError)
        self.assertEqual(g.total_duration, MAX_TOTAL_DURATION - 10)
        self.assertEqual(g.timeline(), [])
        g.step(10)
        self.assertEqual(g.total_duration, MAX_TOTAL_DURATION)

    def test_resumed_mutation_overflow_is_atomic(self):
        g = Graph()
        g.sleep(MAX_TOTAL_DURATION - 10)
        with self.assertRaises(ClockOverflow):
            g.add_node("A", (0, 0))
        self.assertFalse(g.has_node("A"))

    def test_sleep_overflow(self):
        g = Graph()
        g.sleep(MAX_TOTAL_DURATION)
        with self.assertRaises(ClockOverflow):
            g.sleep(1)
        self.assertEqual(g.total_duration, MAX_TOTAL_DURATION)


if __name__ == "__main__":
    unittest.main()
