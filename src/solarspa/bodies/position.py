from math import sin, cos, radians

from solarspa.bodies._tables import NUTATION_TABLE
from solarspa.core.juliandate import JulianTimes
from solarspa.util.constants import J2000_JD
from solarspa.util.helpers import polyval, dot, limitDegrees

__all__ = ['computeLunisolarArguments', 'computeNutationPhases', 'computeNutationDeltas', 'computeMeanObliquity',
           'computeTrueObliquity', 'computeMeanSiderealTime', 'computeApparentSiderealTime',
           'computeApparentSiderealTimeAt']

# Polynomials in JCE with the highest degree first, results in degrees.
_MEAN_ELONGATION_MOON = (1 / 189474, -0.0019142, 445267.11148, 297.85036)
_MEAN_ANOMALY_SUN = (-1 / 3e5, -0.0001603, 35999.05034, 357.52772)
_MEAN_ANOMALY_MOON = (1 / 56250, 0.0086972, 477198.867398, 134.96298)
_ARGUMENT_LATITUDE_MOON = (1 / 327270, -0.0036825, 483202.017538, 93.27191)
_ASCENDING_NODE_MOON = (1 / 45e4, 0.0020708, -1934.136261, 125.04452)

# Polynomial in U = JME / 10, result in arc-seconds.
_MEAN_OBLIQUITY = (2.45, 5.79, 27.87, 7.12, -39.05, -249.67, -51.38, 1999.25, -1.55, -4680.93, 84381.448)


def computeLunisolarArguments(JCE: float) -> tuple[float, float, float, float, float]:
    """Returns the five fundamental arguments X0 to X4 in degrees: the mean elongation of the moon from the
    sun, the mean anomaly of the sun, the mean anomaly of the moon, the moon's argument of latitude and the
    longitude of the ascending node of the moon's mean orbit."""

    return (polyval(_MEAN_ELONGATION_MOON, JCE),
            polyval(_MEAN_ANOMALY_SUN, JCE),
            polyval(_MEAN_ANOMALY_MOON, JCE),
            polyval(_ARGUMENT_LATITUDE_MOON, JCE),
            polyval(_ASCENDING_NODE_MOON, JCE))


def computeNutationPhases(JCE: float) -> list[float]:
    # The sum of Xj * Yij for each row of the nutation table, in radians.

    xTerms = computeLunisolarArguments(JCE)
    return [radians(dot(xTerms, term.multipliers)) for term in NUTATION_TABLE]


def computeNutationDeltas(JCE: float) -> tuple[float, float]:
    """Returns the nutation in longitude and the nutation in obliquity in degrees. Both series share the same
    phase angles."""

    phases = computeNutationPhases(JCE)

    deltaPsi = 0.0
    deltaEpsilon = 0.0
    for term, phase in zip(NUTATION_TABLE, phases):
        deltaPsi += (term.a + term.b * JCE) * sin(phase)
        deltaEpsilon += (term.c + term.d * JCE) * cos(phase)

    return deltaPsi / 36e6, deltaEpsilon / 36e6


def computeMeanObliquity(JME: float) -> float:
    # Returns the mean obliquity of the ecliptic in arc-seconds.

    return polyval(_MEAN_OBLIQUITY, JME / 10)


def computeTrueObliquity(JME: float, deltaEpsilon: float) -> float:
    # Returns the true obliquity of the ecliptic in degrees.

    return computeMeanObliquity(JME) / 3600 + deltaEpsilon


def computeMeanSiderealTime(JD: float, JC: float) -> float:
    # Mean sidereal time at Greenwich in degrees.

    rtn = 280.46061837 + 360.98564736629 * (JD - J2000_JD) + 0.000387933 * JC * JC - JC * JC * JC / 38710000.0

    return limitDegrees(rtn)


def computeApparentSiderealTime(JD: float, JC: float, deltaPsi: float, epsilon: float) -> float:
    """Apparent sidereal time at Greenwich in degrees. deltaPsi is the nutation in longitude and epsilon the
    true obliquity of the ecliptic, both in degrees."""

    return limitDegrees(computeMeanSiderealTime(JD, JC) + deltaPsi * cos(radians(epsilon)))


def computeApparentSiderealTimeAt(millis: int, deltat: float) -> float:
    """Computes the apparent sidereal time at Greenwich, in degrees, directly from a time in milliseconds."""

    times = JulianTimes(millis, deltat)
    deltaPsi, deltaEpsilon = computeNutationDeltas(times.JCE)
    epsilon = computeTrueObliquity(times.JME, deltaEpsilon)

    return computeApparentSiderealTime(times.JD, times.JC, deltaPsi, epsilon)
