from dataclasses import dataclass

from solarspa.core.exceptions import InvalidArgumentError
from solarspa.util.constants import DELTAT, H0_PRIME, STANDARD_PRESSURE, STANDARD_TEMPERATURE

__all__ = ['SunEventInputs', 'PositionInputs']


def _checkRange(field: str, value: float, lower: float, upper: float) -> None:
    if value > upper:
        raise InvalidArgumentError(field, value, upper,
                                   f'{field}={value} must be less than or equal to {upper:g} degrees')
    if value < lower:
        raise InvalidArgumentError(field, value, lower,
                                   f'{field}={value} must be greater than or equal to {lower:g} degrees')


@dataclass(frozen=True)
class SunEventInputs:
    """Parameters needed for sunrise, transit and sunset times.

    time is milliseconds since the Unix epoch, longitude and latitude are in degrees, deltaT is the
    difference between terrestrial and universal time in seconds and h0Prime is the sun elevation in
    degrees that defines sunrise and sunset."""

    time: int
    longitude: float
    latitude: float
    deltaT: float = DELTAT
    h0Prime: float = H0_PRIME

    def __post_init__(self):
        _checkRange('longitude', self.longitude, -180.0, 180.0)
        _checkRange('latitude', self.latitude, -90.0, 90.0)


@dataclass(frozen=True)
class PositionInputs:
    """Parameters needed for a full solar position. The time, location and thresholds are held by an
    embedded SunEventInputs. Pressure is in millibars, elevation in meters, temperature in Celsius, and
    the surface slope and azimuth rotation in degrees."""

    events: SunEventInputs
    pressure: float = STANDARD_PRESSURE
    elevation: float = 0.0
    temperature: float = STANDARD_TEMPERATURE
    surfaceSlope: float = 0.0
    surfaceAzimuthRotation: float = 0.0

    def __post_init__(self):
        _checkRange('surfaceSlope', self.surfaceSlope, -90.0, 90.0)
        _checkRange('surfaceAzimuthRotation', self.surfaceAzimuthRotation, -180.0, 180.0)

    @classmethod
    def create(cls, time: int, longitude: float, latitude: float, pressure: float = STANDARD_PRESSURE,
               elevation: float = 0.0, temperature: float = STANDARD_TEMPERATURE, surfaceSlope: float = 0.0,
               surfaceAzimuthRotation: float = 0.0, deltaT: float = DELTAT,
               h0Prime: float = H0_PRIME) -> 'PositionInputs':
        """Builds the inputs from flat values, in the argument order of computePosition()."""

        events = SunEventInputs(time, longitude, latitude, deltaT, h0Prime)
        return cls(events, pressure, elevation, temperature, surfaceSlope, surfaceAzimuthRotation)

    @property
    def time(self) -> int:
        return self.events.time

    @property
    def longitude(self) -> float:
        return self.events.longitude

    @property
    def latitude(self) -> float:
        return self.events.latitude

    @property
    def deltaT(self) -> float:
        return self.events.deltaT

    @property
    def h0Prime(self) -> float:
        return self.events.h0Prime
