"""
Absolute curvature of X-Y data from an algebraic circle fit.
"""
from collections import namedtuple

import numpy as np

from .circle import algebraic_circle
from .colinear import staged_colinear
from .config import get_config
from .logger import get_logger
from .validation import as_point_pair

FitResult = namedtuple('FitResult', ['curvature', 'rmse'])
FitResult.__doc__ = """Curvature fit: absolute curvature and its RMSE (nan if undefined)."""


def curvaturefit(x, y, rmse=True):
    """
    Least squares fit of X-Y data to find the absolute curvature.

    Collinear (or nearly collinear) data is not an error: it has zero
    curvature and an undefined (nan) RMSE.

    The fit can perform poorly on arcs shorter than about 180 degrees.

    Args:
        x, y: equal length vectors with at least three points
        rmse: also compute the RMSE of the fit, measured in curvature
            (1 / distance) units; when False the rmse field is None
    Returns:
        FitResult(curvature, rmse)
    """
    x, y = as_point_pair(x, y)
    config = get_config()

    points = np.column_stack([x, y])
    if staged_colinear(points, config.curvature_prefix, config.rank_tolerance):
        get_logger().debug(f"[curvaturefit] {len(x)} collinear points, curvature set to 0")
        return FitResult(0.0, np.nan if rmse else None)

    xc, yc, c = algebraic_circle(x, y)
    k = abs(1.0 / np.sqrt(xc * xc + yc * yc + c))

    err = None
    if rmse:
        err = float(np.sqrt(np.mean((1.0 / np.hypot(x - xc, y - yc) - k) ** 2)))
    return FitResult(float(k), err)
