from .exceptions import (
    SolarSpaException,
    InvalidArgumentError,
    DimensionMismatchError,
)

from .juliandate import (
    julianDay,
    julianEphemerisDay,
    julianCentury,
    julianMillennium,
    toZeroUT,
    JulianTimes,
)

from .parameters import (
    SunEventInputs,
    PositionInputs,
)

__all__ = (
    # exceptions.py
    'SolarSpaException',
    'InvalidArgumentError',
    'DimensionMismatchError',

    # juliandate.py
    'julianDay',
    'julianEphemerisDay',
    'julianCentury',
    'julianMillennium',
    'toZeroUT',
    'JulianTimes',

    # parameters.py
    'SunEventInputs',
    'PositionInputs',
)
