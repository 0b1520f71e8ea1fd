"""
Argument checks shared by the public fitting routines.

All checks run before any numeric work and raise the matching CircfitError.
"""
import numpy as np

from .errors import (
    NonFiniteInputError, ShapeMismatchError, LengthMismatchError,
    TooFewPointsError, InvalidScalarParameterError
)

# bool, signed int, unsigned int, float
_REAL_KINDS = 'biuf'


def is_vector(arr):
    """True for scalars, 1-D arrays and 2-D arrays with a unit dimension."""
    return arr.ndim <= 1 or (arr.ndim == 2 and 1 in arr.shape)


def as_coordinate_array(values, name):
    """
    Convert coordinate data of any shape to a float64 array.

    Boolean and integer data are converted to floating point. Complex,
    non-numeric and non-finite data are rejected.
    """
    arr = np.asarray(values)
    if arr.dtype.kind == 'c':
        raise NonFiniteInputError(f"{name} must be finite and real.")
    if arr.dtype.kind not in _REAL_KINDS:
        raise NonFiniteInputError(
            f"{name} must contain numeric or boolean values, got dtype {arr.dtype}.",
            code='InvalidDatatype')
    arr = arr.astype(np.float64)
    if not np.all(np.isfinite(arr)):
        raise NonFiniteInputError(f"{name} must be finite and real.")
    return arr


def as_point_vector(values, name):
    """
    Convert a vector of positions to a flat float64 array.

    Args:
        values: list, tuple or array shaped (n,), (n, 1) or (1, n)
        name: argument name used in error messages
    Returns:
        (n,) numpy array
    """
    arr = as_coordinate_array(values, name)
    if not is_vector(arr):
        raise ShapeMismatchError(f"{name} must be a vector, got shape {arr.shape}.",
                                 code='NotAVector')
    return arr.ravel()


def as_point_pair(x, y, min_points=3):
    """
    Validate a pair of position vectors.

    Returns:
        x, y: (n,) float64 arrays with n >= min_points
    """
    x = as_point_vector(x, 'X')
    y = as_point_vector(y, 'Y')
    if len(x) != len(y):
        raise LengthMismatchError('The vectors X and Y must have the same length.')
    if len(x) < min_points:
        raise TooFewPointsError(
            f'The vectors X and Y must contain at least {min_points} points.')
    return x, y


def as_real_scalar(value, name):
    """Return ``value`` as a float, requiring a finite real numeric scalar."""
    if isinstance(value, (bool, np.bool_)):
        raise InvalidScalarParameterError(f"{name} must be a finite real scalar.")
    arr = np.asarray(value)
    if arr.size != 1 or arr.dtype.kind not in 'iuf':
        raise InvalidScalarParameterError(f"{name} must be a finite real scalar.")
    result = float(arr.ravel()[0])
    if not np.isfinite(result):
        raise InvalidScalarParameterError(f"{name} must be a finite real scalar.")
    return result
