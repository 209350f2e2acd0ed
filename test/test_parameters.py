import dataclasses
import unittest

from solarspa.core.exceptions import InvalidArgumentError, SolarSpaException
from solarspa.core.parameters import SunEventInputs, PositionInputs
from solarspa.util.constants import DELTAT, H0_PRIME, STANDARD_PRESSURE, STANDARD_TEMPERATURE


class TestSunEventInputs(unittest.TestCase):

    def testDefaults(self):
        inputs = SunEventInputs(0, 10.0, 20.0)
        self.assertEqual(inputs.deltaT, DELTAT)
        self.assertEqual(inputs.h0Prime, H0_PRIME)

    def testBounds(self):
        # Limits themselves are valid.
        SunEventInputs(0, 180.0, 90.0)
        SunEventInputs(0, -180.0, -90.0)

    def testLongitude(self):
        with self.assertRaises(InvalidArgumentError) as cm:
            SunEventInputs(0, 190.0, 0.0)
        self.assertEqual(cm.exception.field, 'longitude')
        self.assertEqual(cm.exception.value, 190.0)
        self.assertEqual(cm.exception.bound, 180.0)
        self.assertEqual(cm.exception.message, 'longitude=190.0 must be less than or equal to 180 degrees')

        with self.assertRaises(InvalidArgumentError) as cm:
            SunEventInputs(0, -180.5, 0.0)
        self.assertEqual(cm.exception.bound, -180.0)

    def testLatitude(self):
        with self.assertRaises(InvalidArgumentError) as cm:
            SunEventInputs(0, 0.0, -91.0)
        self.assertEqual(cm.exception.field, 'latitude')
        self.assertEqual(cm.exception.bound, -90.0)
        self.assertEqual(cm.exception.message, 'latitude=-91.0 must be greater than or equal to -90 degrees')

    def testErrorTypes(self):
        with self.assertRaises(ValueError):
            SunEventInputs(0, 0.0, 100.0)
        with self.assertRaises(SolarSpaException):
            SunEventInputs(0, 0.0, 100.0)

    def testValueSemantics(self):
        first = SunEventInputs(1000, 10.0, 20.0, 67.0, -6.0)
        second = SunEventInputs(1000, 10.0, 20.0, 67.0, -6.0)
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))
        self.assertNotEqual(first, SunEventInputs(1000, 10.0, 20.0, 67.0, -12.0))

        with self.assertRaises(dataclasses.FrozenInstanceError):
            first.latitude = 0.0


class TestPositionInputs(unittest.TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        cls.inputs = PositionInputs.create(1066419030000, -105.1786, 39.742476, 820, 1830.14, 11, 30, -10, 67,
                                           H0_PRIME)

    def testComposition(self):
        events = self.inputs.events
        self.assertIsInstance(events, SunEventInputs)
        self.assertNotIsInstance(self.inputs, SunEventInputs)
        self.assertEqual(events, SunEventInputs(1066419030000, -105.1786, 39.742476, 67, H0_PRIME))

    def testDelegation(self):
        self.assertEqual(self.inputs.time, 1066419030000)
        self.assertEqual(self.inputs.longitude, -105.1786)
        self.assertEqual(self.inputs.latitude, 39.742476)
        self.assertEqual(self.inputs.deltaT, 67)
        self.assertEqual(self.inputs.h0Prime, H0_PRIME)

    def testValues(self):
        self.assertEqual(self.inputs.pressure, 820)
        self.assertEqual(self.inputs.elevation, 1830.14)
        self.assertEqual(self.inputs.temperature, 11)
        self.assertEqual(self.inputs.surfaceSlope, 30)
        self.assertEqual(self.inputs.surfaceAzimuthRotation, -10)

    def testDefaults(self):
        inputs = PositionInputs(SunEventInputs(0, 0.0, 0.0))
        self.assertEqual(inputs.pressure, STANDARD_PRESSURE)
        self.assertEqual(inputs.temperature, STANDARD_TEMPERATURE)
        self.assertEqual(inputs.elevation, 0.0)
        self.assertEqual(inputs.surfaceSlope, 0.0)
        self.assertEqual(inputs.surfaceAzimuthRotation, 0.0)

    def testSurfaceSlope(self):
        with self.assertRaises(InvalidArgumentError) as cm:
            PositionInputs.create(0, 0.0, 0.0, surfaceSlope=95.0)
        self.assertEqual(cm.exception.field, 'surfaceSlope')
        self.assertEqual(cm.exception.bound, 90.0)

    def testSurfaceAzimuthRotation(self):
        with self.assertRaises(InvalidArgumentError) as cm:
            PositionInputs.create(0, 0.0, 0.0, surfaceAzimuthRotation=-181.0)
        self.assertEqual(cm.exception.field, 'surfaceAzimuthRotation')
        self.assertEqual(cm.exception.bound, -180.0)

    def testLocationValidated(self):
        with self.assertRaises(InvalidArgumentError) as cm:
            PositionInputs.create(0, 200.0, 0.0)
        self.assertEqual(cm.exception.field, 'longitude')
