from .position import (
    computeLunisolarArguments,
    computeNutationPhases,
    computeNutationDeltas,
    computeMeanObliquity,
    computeTrueObliquity,
    computeMeanSiderealTime,
    computeApparentSiderealTime,
    computeApparentSiderealTimeAt,
)

from .riseset import (
    SunEvents,
    NoSunEvent,
    computeApproximateTransitTime,
    computeHourAngleCosine,
    computeSunEventFractions,
    computeSunEventsFrom,
    computeSunEvents,
    computeSunTwilightTimes,
)

from .sun import (
    computeEarthHeliocentricLongitude,
    computeEarthHeliocentricLatitude,
    computeSunDistance,
    computeSunGeocentricLongitude,
    computeSunGeocentricLatitude,
    computeAberrationCorrection,
    computeSunApparentLongitude,
    computeSunRightAscension,
    computeSunDeclination,
    computeGeocentricCoordinatesAt,
    SolarPosition,
    computePosition,
    computePositionFrom,
    EquationOfTime,
    computeSunMeanLongitude,
    computeEquationOfTime,
    SunElevation,
    Twilight,
    computeTwilightType,
    computeSunPosition,
)

from .topocentric import (
    computeObserverHourAngle,
    computeEquatorialHorizontalParallax,
    computeFlatteningTerms,
    computeRightAscensionParallax,
    computeTopocentricRightAscension,
    computeTopocentricDeclination,
    computeTopocentricHourAngle,
    computeElevationWithoutRefraction,
    computeRefractionCorrection,
    computeTopocentricElevation,
    computeTopocentricZenithAngle,
    computeAstronomersAzimuth,
    computeTopocentricAzimuth,
    computeIncidenceAngle,
    computeSunDirection,
    computeSurfaceNormal,
)

__all__ = (
    # position.py
    'computeLunisolarArguments',
    'computeNutationPhases',
    'computeNutationDeltas',
    'computeMeanObliquity',
    'computeTrueObliquity',
    'computeMeanSiderealTime',
    'computeApparentSiderealTime',
    'computeApparentSiderealTimeAt',

    # riseset.py
    'SunEvents',
    'NoSunEvent',
    'computeApproximateTransitTime',
    'computeHourAngleCosine',
    'computeSunEventFractions',
    'computeSunEventsFrom',
    'computeSunEvents',
    'computeSunTwilightTimes',

    # sun.py
    'computeEarthHeliocentricLongitude',
    'computeEarthHeliocentricLatitude',
    'computeSunDistance',
    'computeSunGeocentricLongitude',
    'computeSunGeocentricLatitude',
    'computeAberrationCorrection',
    'computeSunApparentLongitude',
    'computeSunRightAscension',
    'computeSunDeclination',
    'computeGeocentricCoordinatesAt',
    'SolarPosition',
    'computePosition',
    'computePositionFrom',
    'EquationOfTime',
    'computeSunMeanLongitude',
    'computeEquationOfTime',
    'SunElevation',
    'Twilight',
    'computeTwilightType',
    'computeSunPosition',

    # topocentric.py
    'computeObserverHourAngle',
    'computeEquatorialHorizontalParallax',
    'computeFlatteningTerms',
    'computeRightAscensionParallax',
    'computeTopocentricRightAscension',
    'computeTopocentricDeclination',
    'computeTopocentricHourAngle',
    'computeElevationWithoutRefraction',
    'computeRefractionCorrection',
    'computeTopocentricElevation',
    'computeTopocentricZenithAngle',
    'computeAstronomersAzimuth',
    'computeTopocentricAzimuth',
    'computeIncidenceAngle',
    'computeSunDirection',
    'computeSurfaceNormal',
)
