"""
Mean local radius of a trajectory from circle fits over a sliding window.
"""
import numpy as np

from .circle import circfit
from .errors import InvalidScalarParameterError, TooFewPointsError
from .logger import get_logger
from .validation import as_point_pair, as_real_scalar


def meancircfit(x, y, w):
    """
    Fit portions of data to circles and return the mean of the radii.

    Useful when the data has a systematic drift (e.g. a slowly spiraling
    trajectory) and only the mean local radius of curvature is wanted.
    Each window spans 2 * (w // 2) + 1 consecutive points centered on one
    sample; the first and last w // 2 samples are never window centers.

    Args:
        x, y: equal length vectors of ordered positions
        w: window width, an integer >= 2
    Returns:
        float: mean radius over all windows
    Raises:
        TooFewPointsError: if no full window fits in the data
        CollinearityError: if the points of any window are collinear
    """
    x, y = as_point_pair(x, y)
    width = as_real_scalar(w, 'W')
    if width < 2 or width != np.floor(width):
        raise InvalidScalarParameterError(
            'W must be a finite real integer greater than or equal to two.',
            code='InvalidIntegerW')

    half = int(width) // 2
    n = len(x)
    if n < 2 * half + 1:
        raise TooFewPointsError(
            f'A window of {2 * half + 1} points does not fit in {n} points.',
            code='WindowTooWide')

    radii = np.array([circfit(x[i - half:i + half + 1], y[i - half:i + half + 1]).radius
                      for i in range(half, n - half)])
    mean_radius = float(radii.mean())
    get_logger().debug(f"[meancircfit] {len(radii)} windows of {2 * half + 1} points, "
                       f"mean radius {mean_radius:.6g}")
    return mean_radius
