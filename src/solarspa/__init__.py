"""Compute the position of the sun and the times of sunrise, sun transit and sunset.

This package implements the NREL Solar Position Algorithm (Reda & Andreas, 2008) for any point on Earth and any
instant, with an uncertainty of +/- 0.0003 degrees for the years -2000 to 6000. The position of the sun is found
through a chain of coordinate transformations, heliocentric to geocentric to topocentric, corrected for nutation,
aberration, parallax and atmospheric refraction. Every intermediate value of the computation is kept in the
resulting SolarPosition, along with the zenith and azimuth angles and the incidence angle on a tilted surface.

Times are plain integer counts of milliseconds since the Unix epoch, and all angles are in degrees. Longitude is
measured positive east of Greenwich.

Usage
_____

Compute the position of the sun from the reference example of the algorithm, 2003-10-17 19:30:30 UT at the
National Renewable Energy Laboratory in Golden, Colorado.

>>> from solarspa import computePosition, computeEquationOfTime, computeSunEvents
>>>
>>> time = 1066419030000
>>> position = computePosition(time, -105.1786, 39.742476, pressure=820, elevation=1830.14, temperature=11,
...                            surfaceSlope=30, surfaceAzimuthRotation=-10, deltaT=67)
>>> print(round(position.topocentricZenithAngle, 5), round(position.topocentricAzimuth, 5))
50.11162 194.34024
>>> print(round(computeEquationOfTime(position).equationOfTime, 4))
14.6415

Sunrise, sun transit and sunset of the same day are returned in milliseconds since the epoch. If the sun never
crosses the elevation that defines sunrise, as in polar day or polar night, a falsy NoSunEvent is returned instead.

>>> events = computeSunEvents(time, -105.1786, 39.742476, deltaT=67)
>>> print(events.sunriseDatetime().strftime("%H:%M:%S"))
13:12:43
>>> events = computeSunEvents(time, 0.0, 85.0)
>>> if not events:
...     print(events.sunAlwaysBelow)
...
True
"""

import logging

__all__ = []

# import subpackages
from .core import *
__all__ += core.__all__
from .util import *
__all__ += util.__all__
from .bodies import *
__all__ += bodies.__all__

logging.getLogger(__name__).addHandler(logging.NullHandler())
