import unittest

from chain import Bounds, Point, angular_point, build_chain
from fixedtrig import TRIG_MAX_ANGLE
from timedata import TimeSnapshot


class TestChain(unittest.TestCase):
    def test_angular_point(self):
        center = Point(10, 10)
        self.assertEqual(angular_point(center, 5, 0), Point(15, 10))
        self.assertEqual(angular_point(center, 5, TRIG_MAX_ANGLE // 4), Point(10, 15))
        self.assertEqual(angular_point(center, 5, -TRIG_MAX_ANGLE // 4), Point(10, 5))
        self.assertEqual(angular_point(center, 0, 1234), center)

    def test_midnight_new_year(self):
        chain = build_chain(Bounds(144, 168), TimeSnapshot(0, 0))
        self.assertEqual(chain, (
            Point(72, 444),     # year anchor, 312 below the month anchor
            Point(72, 132),     # month anchor, 48 below center
            Point(72, 84),      # center
            Point(72, 48),      # hour tip, radius 36 straight up
            Point(72, 24),
            Point(72, 6),
        ))

    def test_three_oclock(self):
        chain = build_chain(Bounds(144, 168), TimeSnapshot(0, 3 * 3600))
        self.assertEqual(chain[3], Point(108, 84))
        self.assertEqual(chain[4], Point(108, 60))
        self.assertEqual(chain[5], Point(108, 42))

    def test_zero_bounds_collapse(self):
        chain = build_chain(Bounds(0, 0), TimeSnapshot(200, 45296))
        self.assertEqual(len(chain), 6)
        self.assertTrue(all(p == Point(0, 0) for p in chain))
        self.assertEqual(chain[5], chain[4])


if __name__ == "__main__":
    unittest.main()
