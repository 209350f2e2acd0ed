from math import sin, cos, tan, asin, acos, atan, atan2, radians, degrees

from pyevspace import Vector

from solarspa.util.constants import EARTH_AXIS_RATIO, EARTH_EQUITORIAL_RADIUS_METERS
from solarspa.util.helpers import limitDegrees

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from solarspa.bodies.sun import SolarPosition

__all__ = ['computeObserverHourAngle', 'computeEquatorialHorizontalParallax', 'computeFlatteningTerms',
           'computeRightAscensionParallax', 'computeTopocentricRightAscension', 'computeTopocentricDeclination',
           'computeTopocentricHourAngle', 'computeElevationWithoutRefraction', 'computeRefractionCorrection',
           'computeTopocentricElevation', 'computeTopocentricZenithAngle', 'computeAstronomersAzimuth',
           'computeTopocentricAzimuth', 'computeIncidenceAngle', 'computeSunDirection', 'computeSurfaceNormal']


def computeObserverHourAngle(siderealTime: float, longitude: float, rightAscension: float) -> float:
    # Local hour angle of the sun in degrees.

    return limitDegrees(siderealTime + longitude - rightAscension)


def computeEquatorialHorizontalParallax(R: float) -> float:
    # Returns xi in degrees, where R is the Earth radius vector in AU.

    return 8.794 / (3600 * R)


def computeFlatteningTerms(latitude: float, elevation: float) -> tuple[float, float]:
    """Returns the x and y terms that reduce a geodetic latitude and elevation in meters to the observer's
    position relative to the center of the flattened Earth."""

    latitudeRad = radians(latitude)
    u = atan(EARTH_AXIS_RATIO * tan(latitudeRad))
    heightRatio = elevation / EARTH_EQUITORIAL_RADIUS_METERS

    x = cos(u) + heightRatio * cos(latitudeRad)
    y = EARTH_AXIS_RATIO * sin(u) + heightRatio * sin(latitudeRad)

    return x, y


def computeRightAscensionParallax(x: float, xi: float, hourAngle: float, declination: float) -> float:
    # Parallax in the sun right ascension in degrees.

    xiRad = radians(xi)
    HRad = radians(hourAngle)

    numerator = -x * sin(xiRad) * sin(HRad)
    denominator = cos(radians(declination)) - x * sin(xiRad) * cos(HRad)

    return degrees(atan2(numerator, denominator))


def computeTopocentricRightAscension(rightAscension: float, deltaAlpha: float) -> float:
    return rightAscension + deltaAlpha


def computeTopocentricDeclination(declination: float, deltaAlpha: float, x: float, y: float, xi: float,
                                  hourAngle: float) -> float:
    xiRad = radians(xi)
    deltaRad = radians(declination)

    numerator = sin(deltaRad) - y * sin(xiRad) * cos(radians(deltaAlpha))
    denominator = cos(deltaRad) - x * sin(xiRad) * cos(radians(hourAngle))

    return degrees(atan2(numerator, denominator))


def computeTopocentricHourAngle(hourAngle: float, deltaAlpha: float) -> float:
    return hourAngle - deltaAlpha


def computeElevationWithoutRefraction(latitude: float, topocentricDeclination: float,
                                      topocentricHourAngle: float) -> float:
    # Topocentric elevation angle in degrees before the atmospheric refraction correction.

    latitudeRad = radians(latitude)
    deltaRad = radians(topocentricDeclination)

    return degrees(asin(sin(latitudeRad) * sin(deltaRad)
                        + cos(latitudeRad) * cos(deltaRad) * cos(radians(topocentricHourAngle))))


def computeRefractionCorrection(pressure: float, temperature: float, e0: float, h0Prime: float) -> float:
    """Computes the atmospheric refraction correction in degrees for an elevation e0. The correction is zero
    when the sun is below h0Prime. Pressure is in millibars and temperature in Celsius."""

    if e0 < h0Prime:
        return 0.0

    return ((pressure / 1010.0) * (283.0 / (273.0 + temperature))
            * 1.02 / (60.0 * tan(radians(e0 + 10.3 / (e0 + 5.11)))))


def computeTopocentricElevation(e0: float, deltaE: float) -> float:
    return e0 + deltaE


def computeTopocentricZenithAngle(elevation: float) -> float:
    return 90.0 - elevation


def computeAstronomersAzimuth(topocentricHourAngle: float, latitude: float, topocentricDeclination: float) -> float:
    # Azimuth measured westward from south, in degrees.

    HRad = radians(topocentricHourAngle)
    latitudeRad = radians(latitude)

    denominator = cos(HRad) * sin(latitudeRad) - tan(radians(topocentricDeclination)) * cos(latitudeRad)
    return limitDegrees(degrees(atan2(sin(HRad), denominator)))


def computeTopocentricAzimuth(astronomersAzimuth: float) -> float:
    # Azimuth measured eastward from north, in degrees.

    return limitDegrees(astronomersAzimuth + 180.0)


def computeIncidenceAngle(zenith: float, astronomersAzimuth: float, slope: float, azimuthRotation: float) -> float:
    """Computes the angle between the sun and the normal of a surface in degrees. The slope is measured from
    the horizontal plane and the azimuth rotation from south, positive toward the west."""

    zenithRad = radians(zenith)
    slopeRad = radians(slope)

    cosIncidence = cos(zenithRad) * cos(slopeRad) \
        + sin(slopeRad) * sin(zenithRad) * cos(radians(astronomersAzimuth - azimuthRotation))

    # rounding can push the cosine past 1 when the surface faces the sun
    return degrees(acos(max(-1.0, min(1.0, cosIncidence))))


def computeSunDirection(position: 'SolarPosition') -> Vector:
    # Unit vector toward the sun in the south-east-zenith frame.

    elevation = radians(position.topocentricElevation)
    azimuth = radians(position.topocentricAstronomersAzimuth)

    # astronomers azimuth increases toward the west
    return Vector(cos(elevation) * cos(azimuth), -cos(elevation) * sin(azimuth), sin(elevation))


def computeSurfaceNormal(slope: float, azimuthRotation: float) -> Vector:
    """Unit normal of a surface tilted slope degrees from horizontal toward an azimuth rotation measured
    westward from south, in the south-east-zenith frame."""

    slopeRad = radians(slope)
    rotationRad = radians(azimuthRotation)

    return Vector(sin(slopeRad) * cos(rotationRad), -sin(slopeRad) * sin(rotationRad), cos(slopeRad))
