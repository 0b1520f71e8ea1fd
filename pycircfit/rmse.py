"""
Fit quality of a candidate circle against position data.
"""
import numpy as np

from .circle import distance_rmse
from .colinear import is_degenerate
from .config import get_config
from .errors import CollinearityError, InvalidArityError, NegativeRadiusError
from .validation import as_point_pair, as_real_scalar


def circrmse(x, y, r, *center):
    """
    Root mean squared error of a circle radius and center relative to
    position data.

        circrmse(x, y, r)          circle centered on the origin
        circrmse(x, y, r, xc, yc)

    Small data sets (fewer than ``CircfitConfig.rmse_guard_points`` points)
    are checked for collinearity first, since an RMSE against a circle is
    meaningless for them.

    Returns:
        float: sqrt(mean((|p - center| - r)**2))
    """
    x, y = as_point_pair(x, y)
    r = as_real_scalar(r, 'R')
    if r < 0:
        raise NegativeRadiusError('R must be a positive value.')

    if len(center) == 0:
        xc = yc = 0.0
    elif len(center) == 2:
        xc = as_real_scalar(center[0], 'XC')
        yc = as_real_scalar(center[1], 'YC')
    elif len(center) == 1:
        raise InvalidArityError('Either both XC and YC must be specified or neither.',
                                code='InvalidCenterArity')
    else:
        raise InvalidArityError('Too many input arguments.', code='TooManyArguments')

    config = get_config()
    if len(x) < config.rmse_guard_points and is_degenerate(np.column_stack([x, y]),
                                                           tol=config.rank_tolerance):
        raise CollinearityError(
            'The points in vectors X and Y must not all be collinear, or nearly '
            'collinear, with each other.')

    return distance_rmse(x, y, r, xc, yc)
