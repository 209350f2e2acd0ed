import logging
from dataclasses import dataclass
from enum import Enum
from math import sin, cos, tan, asin, atan2, radians, degrees

from pyevspace import Vector

from solarspa.bodies._tables import EARTH_L_TABLE, EARTH_B_TABLE, EARTH_R_TABLE
from solarspa.bodies.position import computeNutationDeltas, computeTrueObliquity, computeApparentSiderealTime
from solarspa.bodies.topocentric import computeObserverHourAngle, computeEquatorialHorizontalParallax, \
    computeFlatteningTerms, computeRightAscensionParallax, computeTopocentricRightAscension, \
    computeTopocentricDeclination, computeTopocentricHourAngle, computeElevationWithoutRefraction, \
    computeRefractionCorrection, computeTopocentricElevation, computeTopocentricZenithAngle, \
    computeAstronomersAzimuth, computeTopocentricAzimuth, computeIncidenceAngle
from solarspa.core.juliandate import JulianTimes
from solarspa.core.parameters import PositionInputs
from solarspa.util.constants import AU, DELTAT, H0_PRIME, STANDARD_PRESSURE, STANDARD_TEMPERATURE, \
    MINUTES_PER_DAY, CIVIL_TWILIGHT, NAUTICAL_TWILIGHT, ASTRONOMICAL_TWILIGHT
from solarspa.util.helpers import polyval, limitDegrees

__all__ = ['computeEarthHeliocentricLongitude', 'computeEarthHeliocentricLatitude', 'computeSunDistance',
           'computeSunGeocentricLongitude', 'computeSunGeocentricLatitude', 'computeAberrationCorrection',
           'computeSunApparentLongitude', 'computeSunRightAscension', 'computeSunDeclination',
           'computeGeocentricCoordinatesAt', 'SolarPosition', 'computePosition', 'computePositionFrom',
           'EquationOfTime', 'computeSunMeanLongitude', 'computeEquationOfTime', 'SunElevation', 'Twilight',
           'computeTwilightType', 'computeSunPosition']

_log = logging.getLogger(__name__)

# Polynomial in JME with the highest degree first, result in degrees.
_SUN_MEAN_LONGITUDE = (-1 / 2000000, -1 / 15300, 1 / 49931, 0.03032028, 360007.6982779, 280.4664567)


def _computeFromTable(table, JME: float) -> list[float]:
    output = []
    for subTable in table:
        Ln = 0.0
        for (a, b, c) in subTable:
            Ln += a * cos(b + c * JME)
        output.append(Ln)

    return output


def _combineSeries(table, JME: float) -> float:
    # X0 + X1 * JME + X2 * JME^2 + ..., scaled to radians.

    terms = _computeFromTable(table, JME)
    return polyval(terms[::-1], JME) / 1e8


def computeEarthHeliocentricLongitude(JME: float) -> float:
    # Returns the Earth heliocentric longitude in degrees.

    return limitDegrees(degrees(_combineSeries(EARTH_L_TABLE, JME)))


def computeEarthHeliocentricLatitude(JME: float) -> float:
    # Returns the Earth heliocentric latitude in degrees.

    return degrees(_combineSeries(EARTH_B_TABLE, JME))


def computeSunDistance(JME: float) -> float:
    # Returns the Earth radius vector in Astronomical Units.

    return _combineSeries(EARTH_R_TABLE, JME)


def computeSunGeocentricLongitude(heliocentricLongitude: float) -> float:
    return limitDegrees(heliocentricLongitude + 180.0)


def computeSunGeocentricLatitude(heliocentricLatitude: float) -> float:
    return -heliocentricLatitude


def computeAberrationCorrection(R: float) -> float:
    """Computes the aberration correction deltaTau in degrees, where R is the Earth radius vector in AU."""

    return -20.4898 / (3600 * R)


def computeSunApparentLongitude(geocentricLongitude: float, deltaPsi: float, deltaTau: float) -> float:
    # Compute the apparent solar longitude in degrees.

    return geocentricLongitude + deltaPsi + deltaTau


def computeSunRightAscension(apparentLongitude: float, epsilon: float, beta: float) -> float:
    # Compute the geocentric sun right ascension in degrees.

    lambdaRad = radians(apparentLongitude)
    epsilonRad = radians(epsilon)

    numerator = sin(lambdaRad) * cos(epsilonRad) - tan(radians(beta)) * sin(epsilonRad)
    return limitDegrees(degrees(atan2(numerator, cos(lambdaRad))))


def computeSunDeclination(apparentLongitude: float, epsilon: float, beta: float) -> float:
    # Compute the geocentric sun declination in degrees.

    betaRad = radians(beta)
    epsilonRad = radians(epsilon)

    term1 = sin(betaRad) * cos(epsilonRad)
    term2 = cos(betaRad) * sin(epsilonRad) * sin(radians(apparentLongitude))

    return degrees(asin(term1 + term2))


def computeGeocentricCoordinatesAt(millis: int, deltat: float) -> tuple[float, float]:
    """Computes the geocentric right ascension and declination of the sun in degrees, directly from a time in
    milliseconds."""

    times = JulianTimes(millis, deltat)
    R = computeSunDistance(times.JME)
    theta = computeSunGeocentricLongitude(computeEarthHeliocentricLongitude(times.JME))
    beta = computeSunGeocentricLatitude(computeEarthHeliocentricLatitude(times.JME))

    deltaPsi, deltaEpsilon = computeNutationDeltas(times.JCE)
    epsilon = computeTrueObliquity(times.JME, deltaEpsilon)
    apparentLongitude = computeSunApparentLongitude(theta, deltaPsi, computeAberrationCorrection(R))

    return (computeSunRightAscension(apparentLongitude, epsilon, beta),
            computeSunDeclination(apparentLongitude, epsilon, beta))


@dataclass(frozen=True)
class SolarPosition:
    """Every intermediate and final value of a solar position computation. Angles are in degrees and the
    earth radius vector is in AU."""

    julianDay: float
    julianEphemerisMillennium: float
    earthHeliocentricLongitude: float
    earthHeliocentricLatitude: float
    earthRadiusVector: float
    geocentricLongitude: float
    geocentricLatitude: float
    nutationLongitude: float
    nutationObliquity: float
    trueObliquity: float
    apparentSunLongitude: float
    geocentricRightAscension: float
    geocentricDeclination: float
    observerHourAngle: float
    topocentricRightAscension: float
    topocentricDeclination: float
    topocentricHourAngle: float
    elevationWithoutRefraction: float
    topocentricElevation: float
    topocentricZenithAngle: float
    topocentricAstronomersAzimuth: float
    topocentricAzimuth: float
    incidenceAngle: float


def computePositionFrom(inputs: PositionInputs) -> SolarPosition:
    """Computes the topocentric position of the sun for validated position inputs."""

    times = JulianTimes(inputs.time, inputs.deltaT)
    JME = times.JME

    L = computeEarthHeliocentricLongitude(JME)
    B = computeEarthHeliocentricLatitude(JME)
    R = computeSunDistance(JME)
    theta = computeSunGeocentricLongitude(L)
    beta = computeSunGeocentricLatitude(B)

    deltaPsi, deltaEpsilon = computeNutationDeltas(times.JCE)
    epsilon = computeTrueObliquity(JME, deltaEpsilon)

    apparentLongitude = computeSunApparentLongitude(theta, deltaPsi, computeAberrationCorrection(R))
    alpha = computeSunRightAscension(apparentLongitude, epsilon, beta)
    delta = computeSunDeclination(apparentLongitude, epsilon, beta)
    nu = computeApparentSiderealTime(times.JD, times.JC, deltaPsi, epsilon)

    # topocentric corrections
    H = computeObserverHourAngle(nu, inputs.longitude, alpha)
    xi = computeEquatorialHorizontalParallax(R)
    x, y = computeFlatteningTerms(inputs.latitude, inputs.elevation)
    deltaAlpha = computeRightAscensionParallax(x, xi, H, delta)
    alphaPrime = computeTopocentricRightAscension(alpha, deltaAlpha)
    deltaPrime = computeTopocentricDeclination(delta, deltaAlpha, x, y, xi, H)
    HPrime = computeTopocentricHourAngle(H, deltaAlpha)

    e0 = computeElevationWithoutRefraction(inputs.latitude, deltaPrime, HPrime)
    deltaE = computeRefractionCorrection(inputs.pressure, inputs.temperature, e0, inputs.h0Prime)
    e = computeTopocentricElevation(e0, deltaE)
    zenith = computeTopocentricZenithAngle(e)

    gamma = computeAstronomersAzimuth(HPrime, inputs.latitude, deltaPrime)
    azimuth = computeTopocentricAzimuth(gamma)
    incidence = computeIncidenceAngle(zenith, gamma, inputs.surfaceSlope, inputs.surfaceAzimuthRotation)

    _log.debug('computed solar position at %d: zenith=%.6f azimuth=%.6f', inputs.time, zenith, azimuth)

    return SolarPosition(times.JD, JME, L, B, R, theta, beta, deltaPsi, deltaEpsilon, epsilon, apparentLongitude,
                         alpha, delta, H, alphaPrime, deltaPrime, HPrime, e0, e, zenith, gamma, azimuth, incidence)


def computePosition(time: int, longitude: float, latitude: float, pressure: float = STANDARD_PRESSURE,
                    elevation: float = 0.0, temperature: float = STANDARD_TEMPERATURE, surfaceSlope: float = 0.0,
                    surfaceAzimuthRotation: float = 0.0, deltaT: float = DELTAT,
                    h0Prime: float = H0_PRIME) -> SolarPosition:
    """Computes the position of the sun at a time in milliseconds since the Unix epoch, for an observer at
    longitude and latitude in degrees.

    Parameters:
    pressure -- annual average local pressure in millibars
    elevation -- observer elevation in meters
    temperature -- annual average local temperature in Celsius
    surfaceSlope -- slope of a surface measured from the horizontal plane in degrees
    surfaceAzimuthRotation -- rotation of the surface measured from south to the projection of the
        surface normal on the horizontal plane, positive west of south, in degrees
    deltaT -- difference between terrestrial time and universal time in seconds
    h0Prime -- sun elevation below which no refraction correction is applied, in degrees

    Raises InvalidArgumentError if the longitude, latitude, surface slope or surface azimuth rotation is
    out of range."""

    inputs = PositionInputs.create(time, longitude, latitude, pressure, elevation, temperature, surfaceSlope,
                                   surfaceAzimuthRotation, deltaT, h0Prime)
    return computePositionFrom(inputs)


@dataclass(frozen=True)
class EquationOfTime:
    # sunMeanLongitude in degrees, equationOfTime in minutes
    sunMeanLongitude: float
    equationOfTime: float


def computeSunMeanLongitude(JME: float) -> float:
    return limitDegrees(polyval(_SUN_MEAN_LONGITUDE, JME))


def computeEquationOfTime(position: SolarPosition) -> EquationOfTime:
    """Computes the difference between apparent and mean solar time, in minutes, from a solar position."""

    M = computeSunMeanLongitude(position.julianEphemerisMillennium)
    E = 4.0 * (M - 0.0057183 - position.geocentricRightAscension
               + position.nutationLongitude * cos(radians(position.trueObliquity)))

    # the raw value wraps with the right ascension
    if E > 20.0:
        E -= MINUTES_PER_DAY
    elif E < -20.0:
        E += MINUTES_PER_DAY

    return EquationOfTime(M, E)


class SunElevation:
    """Common sun elevations in degrees used to define sunrise and sunset."""

    Day = 0.0
    Civil = CIVIL_TWILIGHT
    Twilight = H0_PRIME
    Nautical = NAUTICAL_TWILIGHT
    Astronomical = ASTRONOMICAL_TWILIGHT


class Twilight(Enum):
    Day = 0
    Civil = 1
    Nautical = 2
    Astronomical = 3
    Night = 4


def computeTwilightType(position: SolarPosition) -> Twilight:
    sunAngle = position.topocentricElevation

    if sunAngle < ASTRONOMICAL_TWILIGHT:
        return Twilight.Night
    elif sunAngle < NAUTICAL_TWILIGHT:
        return Twilight.Astronomical
    elif sunAngle < CIVIL_TWILIGHT:
        return Twilight.Nautical
    elif sunAngle < H0_PRIME:
        return Twilight.Civil
    else:
        return Twilight.Day


def computeSunPosition(position: SolarPosition) -> Vector:
    # Compute the Sun's geocentric equatorial position vector in kilometers.

    rightAscension = radians(position.geocentricRightAscension)
    declination = radians(position.geocentricDeclination)
    sunDistance = position.earthRadiusVector

    zTerm = sunDistance * sin(declination)
    topoProjection = sunDistance * cos(declination)
    xTerm = topoProjection * cos(rightAscension)
    yTerm = topoProjection * sin(rightAscension)

    return Vector(xTerm, yTerm, zTerm) * AU
