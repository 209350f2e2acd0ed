import unittest

from solarspa.core.juliandate import julianDay, julianEphemerisDay, julianCentury, julianMillennium, toZeroUT, \
    JulianTimes
from solarspa.util.constants import DAY_IN_MILLIS, DELTAT

# 2003-10-17T19:30:30Z
referenceTime = 1066419030000
# 2003-10-17T00:00:00Z
referenceDay = 1066348800000


class TestJuliandate(unittest.TestCase):

    def testEpoch(self):
        self.assertEqual(julianDay(0), 2440587.5)
        # 2000-01-01T12:00:00Z
        self.assertEqual(julianDay(946728000000), 2451545.0)
        self.assertEqual(julianCentury(2451545.0), 0.0)

    def testReferenceDay(self):
        self.assertAlmostEqual(julianDay(referenceTime), 2452930.312847, 6)

    def testEphemerisTimes(self):
        jd = julianDay(referenceTime)
        jde = julianEphemerisDay(jd, 67)
        self.assertAlmostEqual(jde - jd, 67 / 86400, 12)

        jce = julianCentury(jde)
        self.assertAlmostEqual(jce, 0.0379278199, 9)
        self.assertAlmostEqual(julianMillennium(jce), jce / 10)

    def testToZeroUT(self):
        self.assertEqual(toZeroUT(referenceTime), referenceDay)
        self.assertEqual(toZeroUT(referenceDay), referenceDay)
        self.assertEqual(toZeroUT(referenceDay + DAY_IN_MILLIS - 1), referenceDay)

    def testToZeroUTBeforeEpoch(self):
        self.assertEqual(toZeroUT(-1), -DAY_IN_MILLIS)
        self.assertEqual(toZeroUT(-DAY_IN_MILLIS), -DAY_IN_MILLIS)
        self.assertEqual(toZeroUT(-DAY_IN_MILLIS - 1), -2 * DAY_IN_MILLIS)


class TestJulianTimes(unittest.TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        cls.times = JulianTimes(referenceTime, 67)

    def testValues(self):
        jd = julianDay(referenceTime)
        self.assertEqual(self.times.JD, jd)
        self.assertEqual(self.times.JDE, julianEphemerisDay(jd, 67))
        self.assertEqual(self.times.JC, julianCentury(jd))
        self.assertEqual(self.times.JCE, julianCentury(self.times.JDE))
        self.assertEqual(self.times.JME, self.times.JCE / 10)

    def testDefaultDeltaT(self):
        times = JulianTimes(referenceTime)
        self.assertEqual(times.JDE, julianEphemerisDay(julianDay(referenceTime), DELTAT))

    def testReadOnly(self):
        with self.assertRaises(AttributeError):
            self.times.JD = 0.0
        with self.assertRaises(AttributeError):
            self.times.other = 0.0

    def testRepr(self):
        self.assertTrue(repr(self.times).startswith('JulianTimes(JD=2452930.31284'))
