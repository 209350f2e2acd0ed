import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from math import sin, cos, asin, acos, floor, radians, degrees

from solarspa.bodies.position import computeApparentSiderealTimeAt
from solarspa.bodies.sun import computeGeocentricCoordinatesAt, SunElevation, Twilight
from solarspa.core.juliandate import toZeroUT
from solarspa.core.parameters import SunEventInputs
from solarspa.util.constants import DAY_IN_MILLIS, SECONDS_PER_DAY, EARTH_SIDEREAL_RATE, DELTAT, H0_PRIME
from solarspa.util.helpers import limitDegrees180, limitDegreesPm180, limitZeroToOne

__all__ = ['SunEvents', 'NoSunEvent', 'computeApproximateTransitTime', 'computeHourAngleCosine',
           'computeSunEventFractions', 'computeSunEventsFrom', 'computeSunEvents', 'computeSunTwilightTimes']

_log = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_TWILIGHT_ELEVATIONS = {
    Twilight.Day: SunElevation.Twilight,
    Twilight.Civil: SunElevation.Civil,
    Twilight.Nautical: SunElevation.Nautical,
    Twilight.Astronomical: SunElevation.Astronomical,
    Twilight.Night: SunElevation.Twilight,
}


def _toDatetime(millis: int) -> datetime:
    return _EPOCH + timedelta(milliseconds=millis)


@dataclass(frozen=True)
class SunEvents:
    """Sunrise, transit and sunset times in milliseconds since the Unix epoch. Sunrise always precedes
    transit, and sunset always follows it."""

    sunrise: int
    transit: int
    sunset: int

    def sunriseDatetime(self) -> datetime:
        return _toDatetime(self.sunrise)

    def transitDatetime(self) -> datetime:
        return _toDatetime(self.transit)

    def sunsetDatetime(self) -> datetime:
        return _toDatetime(self.sunset)


@dataclass(frozen=True)
class NoSunEvent:
    """Result for a day on which the sun never crosses the requested elevation. The instance is falsy, so
    results can be checked with a plain if statement."""

    sunAlwaysAbove: bool

    def __bool__(self):
        return False

    @property
    def sunAlwaysBelow(self) -> bool:
        return not self.sunAlwaysAbove


def computeApproximateTransitTime(rightAscension: float, longitude: float, siderealTime: float) -> float:
    # Fraction of the day, not yet reduced to [0, 1).

    return (rightAscension - longitude - siderealTime) / 360.0


def computeHourAngleCosine(latitude: float, declination: float, h0Prime: float) -> float:
    """Returns the cosine of the local hour angle at which the sun reaches the elevation h0Prime. A value
    outside [-1, 1] means the sun doesn't reach that elevation: greater than 1 when it stays below, and less
    than -1 when it stays above."""

    latitudeRad = radians(latitude)
    declinationRad = radians(declination)

    return (sin(radians(h0Prime)) - sin(latitudeRad) * sin(declinationRad)) \
        / (cos(latitudeRad) * cos(declinationRad))


def _interpolate(value: float, a: float, b: float, n: float) -> float:
    c = b - a
    return value + n * (a + b + c * n) / 2


def _limitDifference(value: float) -> float:
    # differences across the 0/360 boundary of right ascension
    if abs(value) > 2:
        return limitZeroToOne(value)
    return value


def _computeSunEventData(inputs: SunEventInputs) -> tuple[tuple[float, float, float] | None, float]:
    ut0 = toZeroUT(inputs.time)
    latitude = inputs.latitude
    longitude = inputs.longitude

    # sidereal time at 0 UT, the three samples are taken at 0 TT with no delta T
    nu = computeApparentSiderealTimeAt(ut0, inputs.deltaT)
    (alphaM1, deltaM1), (alpha0, delta0), (alphaP1, deltaP1) = (
        computeGeocentricCoordinatesAt(ut0 + offset, 0.0) for offset in (-DAY_IN_MILLIS, 0, DAY_IN_MILLIS)
    )

    m0 = computeApproximateTransitTime(alpha0, longitude, nu)
    aux = computeHourAngleCosine(latitude, delta0, inputs.h0Prime)
    if aux < -1.0 or aux > 1.0:
        return None, aux

    H0 = limitDegrees180(degrees(acos(aux)))
    m = (limitZeroToOne(m0), limitZeroToOne(m0 - H0 / 360), limitZeroToOne(m0 + H0 / 360))

    a = _limitDifference(alpha0 - alphaM1)
    aPrime = _limitDifference(delta0 - deltaM1)
    b = _limitDifference(alphaP1 - alpha0)
    bPrime = _limitDifference(deltaP1 - delta0)

    latitudeRad = radians(latitude)
    HPrime = []
    h = []
    deltaPrime = []
    for mi in m:
        nui = nu + EARTH_SIDEREAL_RATE * mi
        ni = mi + inputs.deltaT / SECONDS_PER_DAY

        alphaPrimei = _interpolate(alpha0, a, b, ni)
        deltaPrimei = _interpolate(delta0, aPrime, bPrime, ni)
        HPrimei = limitDegreesPm180(nui + longitude - alphaPrimei)

        deltaRad = radians(deltaPrimei)
        hi = degrees(asin(sin(latitudeRad) * sin(deltaRad) + cos(latitudeRad) * cos(deltaRad)
                          * cos(radians(HPrimei))))

        HPrime.append(HPrimei)
        h.append(hi)
        deltaPrime.append(deltaPrimei)

    transit = m[0] - HPrime[0] / 360
    sunrise, sunset = (
        m[i] + (h[i] - inputs.h0Prime)
        / (360 * cos(radians(deltaPrime[i])) * cos(latitudeRad) * sin(radians(HPrime[i])))
        for i in (1, 2)
    )

    return (transit, sunrise, sunset), aux


def computeSunEventFractions(inputs: SunEventInputs) -> tuple[float, float, float] | None:
    """Computes the sun transit, sunrise and sunset as fractions of the day from 0h UT, in that order. Returns
    None if the sun doesn't cross the elevation inputs.h0Prime on that day."""

    fractions, _ = _computeSunEventData(inputs)
    return fractions


def _fractionToMillis(fraction: float) -> int:
    # rounds half up
    return int(floor(fraction * DAY_IN_MILLIS + 0.5))


def computeSunEventsFrom(inputs: SunEventInputs) -> SunEvents | NoSunEvent:
    """Computes the sunrise, transit and sunset times for the day containing inputs.time. If the sun doesn't
    cross the elevation inputs.h0Prime that day, a NoSunEvent is returned instead."""

    fractions, aux = _computeSunEventData(inputs)
    if fractions is None:
        _log.debug('no sun event at %d for h0Prime=%s, aux=%.6f', inputs.time, inputs.h0Prime, aux)
        return NoSunEvent(aux < -1.0)

    transitFraction, sunriseFraction, sunsetFraction = fractions
    ut0 = toZeroUT(inputs.time)

    sunrise = ut0 + _fractionToMillis(sunriseFraction)
    if sunriseFraction >= transitFraction:
        _log.debug('sunrise fraction %.6f follows transit, moving to previous day', sunriseFraction)
        sunrise -= DAY_IN_MILLIS

    sunset = ut0 + _fractionToMillis(sunsetFraction)
    if sunsetFraction <= transitFraction:
        _log.debug('sunset fraction %.6f precedes transit, moving to next day', sunsetFraction)
        sunset += DAY_IN_MILLIS

    transit = ut0 + _fractionToMillis(transitFraction)

    return SunEvents(sunrise, transit, sunset)


def computeSunEvents(time: int, longitude: float, latitude: float, deltaT: float = DELTAT,
                     h0Prime: float = H0_PRIME) -> SunEvents | NoSunEvent:
    """Computes the sunrise, transit and sunset times for the UT day containing time, in milliseconds since
    the Unix epoch. Sunrise and sunset are the times the sun crosses the elevation h0Prime in degrees.

    Raises InvalidArgumentError if the longitude or latitude is out of range."""

    return computeSunEventsFrom(SunEventInputs(time, longitude, latitude, deltaT, h0Prime))


def computeSunTwilightTimes(time: int, longitude: float, latitude: float, twilight: Twilight,
                            deltaT: float = DELTAT) -> SunEvents | NoSunEvent:
    """Computes the times the sun crosses the elevation that bounds a twilight. Civil, nautical and astronomical
    twilight use -6, -12 and -18 degrees. Twilight.Day and Twilight.Night have no twilight boundary of their own
    and both use the standard sunrise elevation H0_PRIME, giving the ordinary sunrise and sunset."""

    h0Prime = _TWILIGHT_ELEVATIONS[twilight]
    return computeSunEvents(time, longitude, latitude, deltaT, h0Prime)
