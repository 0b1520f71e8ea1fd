"""
Collinearity (degeneracy) detection for N-dimensional point sets.

Points are treated as a closed loop: the first point is appended after the
last and consecutive differences are taken. The points are collinear when
the difference matrix has numerical rank <= 1, which is decided from its
singular values, so nearly collinear floating-point data is reported as
collinear.
"""
import numpy as np
from scipy.linalg import svdvals

from .config import get_config
from .errors import InvalidArityError, NonFiniteInputError, ShapeMismatchError, LengthMismatchError
from .logger import get_logger
from .validation import as_coordinate_array, is_vector


def closed_loop_differences(points, limit=None):
    """
    Consecutive differences of the first ``limit`` rows of ``points`` with the
    first row appended at the end.

    Args:
        points: (M, N) array
        limit: number of leading rows to use, or None for all of them
    Returns:
        (min(limit, M), N) array
    """
    m = len(points) if limit is None else min(limit, len(points))
    loop = np.vstack([points[:m], points[:1]])
    return np.diff(loop, axis=0)


def numerical_rank(matrix, tol=None):
    """
    Rank of ``matrix`` from its singular values.

    The default tolerance is max(matrix.shape) * spacing(largest singular value).
    """
    s = svdvals(matrix)
    if s.size == 0:
        return 0
    if tol is None:
        tol = max(matrix.shape) * np.spacing(s[0])
    return int(np.count_nonzero(s > tol))


def is_degenerate(points, limit=None, tol=None):
    """True if the closed loop through the (first ``limit``) points has rank <= 1."""
    return numerical_rank(closed_loop_differences(points, limit), tol) <= 1


def staged_colinear(points, prefix, tol=None):
    """
    Collinearity test that looks at a bounded prefix first.

    A non-collinear prefix proves the whole set non-collinear and is returned
    straight away. A collinear prefix is only final when there are no more
    points; otherwise the full closed loop is tested and that verdict is
    returned.

    Args:
        points: (M, N) float array
        prefix: number of leading points in the first pass
        tol: rank tolerance, None for the SVD default
    """
    logger = get_logger()
    m = len(points)
    colinear = is_degenerate(points, prefix, tol)
    logger.debug(f"[staged_colinear] prefix of {min(prefix, m)}/{m} points: colinear={colinear}")
    if colinear and m > prefix:
        colinear = is_degenerate(points, None, tol)
        logger.debug(f"[staged_colinear] full pass over {m} points: colinear={colinear}")
    return colinear


def _points_from_matrix(v):
    """(M, N) real matrix, or complex/vector data mapped onto the complex plane."""
    arr = np.asarray(v)
    if arr.dtype.kind not in 'biufc':
        raise NonFiniteInputError(
            f"V must contain numeric or boolean values, got dtype {arr.dtype}.",
            code='InvalidDatatype')
    if arr.ndim > 2:
        raise ShapeMismatchError(f"V must be a 2-D matrix, got shape {arr.shape}.",
                                 code='InvalidMatrix')
    if arr.dtype.kind != 'c' and not is_vector(arr):
        return as_coordinate_array(arr, 'V')

    # Complex coordinates; a real vector lies on the real axis
    if arr.dtype.kind != 'c':
        arr = arr.astype(np.float64)
    if not np.all(np.isfinite(arr)):
        raise NonFiniteInputError("Z must be finite.")
    flat = arr.ravel()
    return np.column_stack([flat.real, flat.imag]).astype(np.float64)


def _points_from_coordinates(coords):
    """Stack 2 or 3 coordinate arrays into an (M, N) matrix."""
    arrays = [as_coordinate_array(c, name) for c, name in zip(coords, 'XYZ')]
    names = ', '.join('XYZ'[:len(arrays)])
    vectors = [is_vector(a) for a in arrays]
    if any(vectors) and not all(vectors):
        raise ShapeMismatchError(
            f"{names} must all be vectors or all be arrays of equal dimensions.",
            code='VectorArrayMismatch')
    if all(vectors):
        if len({a.size for a in arrays}) != 1:
            raise LengthMismatchError(f"The vectors {names} must have the same length.")
    elif len({a.shape for a in arrays}) != 1:
        raise ShapeMismatchError(f"The arrays {names} must have the same dimensions.")
    return np.column_stack([a.ravel() for a in arrays])


def iscolinear(*args):
    """
    Check collinearity of N-dimensional rectilinear data points.

    Call forms:
        iscolinear(x, y)      planar coordinates
        iscolinear(x, y, z)   3-D coordinates
        iscolinear(v)         (M, N) matrix, one point per row
        iscolinear(z)         complex coordinates on the complex plane

    Coordinate arrays must all be vectors of one length or all be arrays of
    one shape. Integer and boolean data are converted to float. Two or fewer
    points, or fewer than two dimensions, are always collinear.

    Returns:
        bool: True if the points are collinear or nearly collinear
    """
    if len(args) == 0:
        raise InvalidArityError('Too few input arguments.', code='TooFewArguments')
    if len(args) > 3:
        raise InvalidArityError('Too many input arguments.', code='TooManyArguments')

    if len(args) == 1:
        points = _points_from_matrix(args[0])
    else:
        points = _points_from_coordinates(args)

    m, n = points.shape
    if m <= 2 or n <= 1:
        return True
    config = get_config()
    return staged_colinear(points, config.colinear_prefix, config.rank_tolerance)
