import unittest

from solarspa.core.exceptions import DimensionMismatchError, SolarSpaException
from solarspa.util.helpers import limitDegrees, limitDegrees180, limitDegreesPm180, limitZeroToOne, polyval, dot


class TestHelpers(unittest.TestCase):

    def test_limitDegrees(self):
        self.assertAlmostEqual(limitDegrees(45.5), 45.5)
        self.assertAlmostEqual(limitDegrees(360.0), 0.0)
        self.assertAlmostEqual(limitDegrees(725.0), 5.0)
        self.assertAlmostEqual(limitDegrees(-90.0), 270.0)
        self.assertAlmostEqual(limitDegrees(-725.0), 355.0)

    def test_limitDegrees180(self):
        self.assertAlmostEqual(limitDegrees180(90.0), 90.0)
        self.assertAlmostEqual(limitDegrees180(180.0), 0.0)
        self.assertAlmostEqual(limitDegrees180(200.0), 20.0)
        self.assertAlmostEqual(limitDegrees180(-30.0), 150.0)

    def test_limitDegreesPm180(self):
        self.assertAlmostEqual(limitDegreesPm180(90.0), 90.0)
        self.assertAlmostEqual(limitDegreesPm180(180.0), 180.0)
        self.assertAlmostEqual(limitDegreesPm180(-180.0), 180.0)
        self.assertAlmostEqual(limitDegreesPm180(190.0), -170.0)
        self.assertAlmostEqual(limitDegreesPm180(-190.0), 170.0)
        self.assertAlmostEqual(limitDegreesPm180(540.0), 180.0)

    def test_limitZeroToOne(self):
        self.assertAlmostEqual(limitZeroToOne(0.25), 0.25)
        self.assertAlmostEqual(limitZeroToOne(1.25), 0.25)
        self.assertAlmostEqual(limitZeroToOne(-0.25), 0.75)
        self.assertAlmostEqual(limitZeroToOne(-3.5), 0.5)
        self.assertEqual(limitZeroToOne(1.0), 0.0)

    def test_ranges(self):
        # Sweep across several turns in both directions.
        for i in range(-2000, 2001, 7):
            value = i * 0.913
            self.assertTrue(0.0 <= limitDegrees(value) < 360.0)
            self.assertTrue(0.0 <= limitDegrees180(value) < 180.0)
            self.assertTrue(-180.0 < limitDegreesPm180(value) <= 180.0)
            self.assertTrue(0.0 <= limitZeroToOne(value / 360) < 1.0)

    def test_polyval(self):
        # 2x^2 - 3x + 5
        self.assertAlmostEqual(polyval((2, -3, 5), 0.0), 5.0)
        self.assertAlmostEqual(polyval((2, -3, 5), 2.0), 7.0)
        self.assertAlmostEqual(polyval((2, -3, 5), -1.5), 14.0)
        self.assertAlmostEqual(polyval((4.5,), 100.0), 4.5)
        self.assertEqual(polyval((), 3.0), 0.0)

    def test_dot(self):
        self.assertAlmostEqual(dot((1, 2, 3), (4, -5, 6)), 12.0)
        self.assertEqual(dot((2, 0, 1, 0, -1), (1, 1, 1, 1, 1)), 2)

    def test_dotMismatch(self):
        with self.assertRaises(DimensionMismatchError) as cm:
            dot((1, 2, 3), (1, 2))
        self.assertIsInstance(cm.exception, SolarSpaException)
        self.assertIsInstance(cm.exception, ValueError)
        self.assertIn('3', cm.exception.message)
        self.assertIn('2', cm.exception.message)

    def test_tinyNegatives(self):
        # Values just below zero must not round up to the modulus.
        self.assertEqual(limitDegrees(-1e-15), 0.0)
        self.assertEqual(limitDegrees180(-1e-15), 0.0)
        self.assertEqual(limitZeroToOne(-1e-17), 0.0)
        self.assertEqual(limitDegreesPm180(-1e-15), 0.0)
        self.assertTrue(0.0 <= limitDegrees(-1e-13) < 360.0)
