from .constants import (
    SECONDS_PER_DAY,
    MINUTES_PER_DAY,
    DAY_IN_MILLIS,
    UNIX_EPOCH_JD,
    J2000_JD,
    DAYS_PER_CENTURY,
    DELTAT,
    EARTH_EQUITORIAL_RADIUS_METERS,
    EARTH_AXIS_RATIO,
    AU,
    EARTH_SIDEREAL_RATE,
    STANDARD_PRESSURE,
    STANDARD_TEMPERATURE,
    SUN_RADIUS,
    HORIZON_REFRACTION,
    H0_PRIME,
    CIVIL_TWILIGHT,
    NAUTICAL_TWILIGHT,
    ASTRONOMICAL_TWILIGHT,
)

from .helpers import (
    limitDegrees,
    limitDegrees180,
    limitDegreesPm180,
    limitZeroToOne,
    polyval,
    dot,
)

__all__ = (
    # constants.py
    'SECONDS_PER_DAY',
    'MINUTES_PER_DAY',
    'DAY_IN_MILLIS',
    'UNIX_EPOCH_JD',
    'J2000_JD',
    'DAYS_PER_CENTURY',
    'DELTAT',
    'EARTH_EQUITORIAL_RADIUS_METERS',
    'EARTH_AXIS_RATIO',
    'AU',
    'EARTH_SIDEREAL_RATE',
    'STANDARD_PRESSURE',
    'STANDARD_TEMPERATURE',
    'SUN_RADIUS',
    'HORIZON_REFRACTION',
    'H0_PRIME',
    'CIVIL_TWILIGHT',
    'NAUTICAL_TWILIGHT',
    'ASTRONOMICAL_TWILIGHT',

    # helpers.py
    'limitDegrees',
    'limitDegrees180',
    'limitDegreesPm180',
    'limitZeroToOne',
    'polyval',
    'dot',
)
