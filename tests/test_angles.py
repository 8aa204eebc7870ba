import unittest

from angles import (clock_angle, year_angle, month_angle, hour_angle,
                    minute_angle, second_angle)
from fixedtrig import TRIG_MAX_ANGLE, cos_lookup, int_distance, sin_lookup, trunc_div


class TestFixedTrig(unittest.TestCase):
    def test_lookup_cardinal_directions(self):
        self.assertEqual(sin_lookup(0), 0)
        self.assertEqual(cos_lookup(0), 0xffff)
        self.assertEqual(sin_lookup(TRIG_MAX_ANGLE // 4), 0xffff)
        self.assertEqual(cos_lookup(TRIG_MAX_ANGLE // 2), -0xffff)

    def test_lookup_wraps_negative_angles(self):
        # a quarter turn back points up on screen
        self.assertEqual(sin_lookup(-TRIG_MAX_ANGLE // 4), -0xffff)
        self.assertEqual(cos_lookup(-TRIG_MAX_ANGLE // 4), 0)
        self.assertEqual(sin_lookup(1234 + 3 * TRIG_MAX_ANGLE), sin_lookup(1234))

    def test_trunc_div_rounds_toward_zero(self):
        self.assertEqual(trunc_div(7, 2), 3)
        self.assertEqual(trunc_div(-7, 2), -3)
        self.assertEqual(trunc_div(7, -2), -3)
        self.assertEqual(trunc_div(-7, -2), 3)

    def test_int_distance(self):
        self.assertEqual(int_distance(3, 4), 5)
        self.assertEqual(int_distance(-3, -4), 5)
        self.assertEqual(int_distance(1, 1), 1)
        self.assertEqual(int_distance(0, 0), 0)


class TestAngles(unittest.TestCase):
    def test_zero_points_up(self):
        self.assertEqual(clock_angle(0, 60), -TRIG_MAX_ANGLE // 4)
        self.assertEqual(clock_angle(15, 60), 0)

    def test_periodic_over_full_circle(self):
        for outof in (60, 3600, 43200, 365):
            for x in (0, 1, 17, outof // 3, outof - 1):
                delta = clock_angle(x + outof, outof) - clock_angle(x, outof)
                self.assertEqual(delta % TRIG_MAX_ANGLE, 0)

    def test_specialisations(self):
        self.assertEqual(hour_angle(3 * 3600), 0)
        self.assertEqual(minute_angle(15 * 60), 0)
        self.assertEqual(second_angle(15), 0)
        self.assertEqual(year_angle(0), -TRIG_MAX_ANGLE // 4)
        self.assertEqual(year_angle(365), TRIG_MAX_ANGLE - TRIG_MAX_ANGLE // 4)
        # months are twelfths of the year
        self.assertEqual(month_angle(365 // 4), clock_angle(365 // 4 * 12, 365))

    def test_large_inputs_stay_exact(self):
        seconds = 10 ** 12
        self.assertEqual(hour_angle(seconds), seconds * TRIG_MAX_ANGLE // 43200 - TRIG_MAX_ANGLE // 4)


if __name__ == "__main__":
    unittest.main()
