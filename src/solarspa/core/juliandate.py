from solarspa.util.constants import DAY_IN_MILLIS, UNIX_EPOCH_JD, J2000_JD, DAYS_PER_CENTURY, SECONDS_PER_DAY, \
    DELTAT

__all__ = ['julianDay', 'julianEphemerisDay', 'julianCentury', 'julianMillennium', 'toZeroUT', 'JulianTimes']


def julianDay(millis: int) -> float:
    """Converts a count of milliseconds since the Unix epoch to a Julian day number."""

    return millis / DAY_IN_MILLIS + UNIX_EPOCH_JD


def julianEphemerisDay(jd: float, deltat: float) -> float:
    return jd + deltat / SECONDS_PER_DAY


def julianCentury(jd: float) -> float:
    # Works for both the Julian century and the Julian ephemeris century.
    return (jd - J2000_JD) / DAYS_PER_CENTURY


def julianMillennium(jc: float) -> float:
    return jc / 10


def toZeroUT(millis: int) -> int:
    """Truncates a time in milliseconds to 0h UT of the same day."""

    return millis - millis % DAY_IN_MILLIS


class JulianTimes:
    """The time scales used as the independent variables of the solar position algorithm, derived from a
    time in milliseconds and the difference between terrestrial and universal time in seconds."""

    __slots__ = '_jd', '_jde', '_jc', '_jce', '_jme'

    def __init__(self, millis: int, deltat: float = None):
        if deltat is None:
            deltat = DELTAT

        self._jd = julianDay(millis)
        self._jde = julianEphemerisDay(self._jd, deltat)
        self._jc = julianCentury(self._jd)
        self._jce = julianCentury(self._jde)
        self._jme = julianMillennium(self._jce)

    def __repr__(self) -> str:
        return f'JulianTimes(JD={self._jd}, JDE={self._jde}, JC={self._jc}, JCE={self._jce}, JME={self._jme})'

    @property
    def JD(self) -> float:
        return self._jd

    @property
    def JDE(self) -> float:
        return self._jde

    @property
    def JC(self) -> float:
        return self._jc

    @property
    def JCE(self) -> float:
        return self._jce

    @property
    def JME(self) -> float:
        return self._jme
