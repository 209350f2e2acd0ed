from typing import Sequence

from solarspa.core.exceptions import DimensionMismatchError

__all__ = ['limitDegrees', 'limitDegrees180', 'limitDegreesPm180', 'limitZeroToOne', 'polyval', 'dot']


def _reduce(value: float, modulus: float) -> float:
    # Python's modulo carries the sign of the divisor, but tiny negative values round up to the modulus.
    value %= modulus
    if value == modulus:
        return 0.0
    return value


def limitDegrees(degrees: float) -> float:
    """Reduces an angle in degrees to the range [0, 360)."""

    return _reduce(degrees, 360.0)


def limitDegrees180(degrees: float) -> float:
    """Reduces an angle in degrees to the range [0, 180)."""

    return _reduce(degrees, 180.0)


def limitDegreesPm180(degrees: float) -> float:
    """Reduces an angle in degrees to the range (-180, 180]."""

    degrees %= 360.0
    if degrees > 180.0:
        return degrees - 360.0
    return degrees


def limitZeroToOne(value: float) -> float:
    return _reduce(value, 1.0)


def polyval(coefficients: Sequence[float], x: float) -> float:
    """Evaluates a polynomial with Horner's method. Coefficients are ordered from the highest degree
    down to the constant term."""

    result = 0.0
    for coefficient in coefficients:
        result = result * x + coefficient

    return result


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    if len(a) != len(b):
        raise DimensionMismatchError(f'vectors have different sizes: {len(a)} and {len(b)}')

    return sum(ai * bi for ai, bi in zip(a, b))
