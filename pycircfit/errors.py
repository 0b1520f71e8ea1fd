"""
Exception hierarchy for pycircfit.

All errors are ValueErrors. The ``code`` attribute names the exact check
that failed.
"""


class CircfitError(ValueError):
    """Base class for all pycircfit errors."""
    default_code = 'CircfitError'

    def __init__(self, message, code=None):
        super().__init__(message)
        self.code = code if code is not None else self.default_code


class ShapeMismatchError(CircfitError):
    """Coordinate inputs disagree in vector/array-ness, shape or dimension."""
    default_code = 'DimensionMismatch'


class LengthMismatchError(ShapeMismatchError):
    """X and Y vectors have different lengths."""
    default_code = 'LengthMismatch'


class NonFiniteInputError(CircfitError):
    """NaN, Inf, complex or non-numeric values where finite reals are required."""
    default_code = 'NonFiniteInput'


class TooFewPointsError(CircfitError):
    default_code = 'Min3Points'


class InvalidScalarParameterError(CircfitError):
    """A scalar argument (radius, center, window width) is out of range."""
    default_code = 'NonFiniteRealScalar'


class NegativeRadiusError(InvalidScalarParameterError):
    default_code = 'NegativeRadius'


class InvalidArityError(CircfitError, TypeError):
    """Wrong number of positional arguments."""
    default_code = 'TooManyArguments'


class CollinearityError(CircfitError):
    """Points are (nearly) collinear where a well-posed circle is required."""
    default_code = 'Collinearity'
