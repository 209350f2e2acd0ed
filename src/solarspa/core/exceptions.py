__all__ = ['SolarSpaException', 'InvalidArgumentError', 'DimensionMismatchError']


class SolarSpaException(Exception):
    """
    Base exception for errors raised by the solarspa package.

    Attributes
        message: Explanation of the error.
    """

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(SolarSpaException, ValueError):
    """
    Exception raised when an input parameter is outside its valid range.

    Attributes
        field: Name of the offending parameter.
        value: The rejected value.
        bound: The limit the value violated.
        message: Explanation of the error.
    """

    def __init__(self, field: str, value: float, bound: float, message: str):
        self.field = field
        self.value = value
        self.bound = bound
        super().__init__(message)


class DimensionMismatchError(SolarSpaException, ValueError):
    """
    Exception raised when two vectors of different sizes are combined.

    Attributes
        message: Explanation of the error.
    """

    def __init__(self, message):
        super().__init__(message)
