"""
Circle value type and the elementary least-squares circle fit.
"""
import numpy as np
from scipy.linalg import lu_factor, lu_solve

from .colinear import staged_colinear
from .config import get_config
from .errors import CollinearityError
from .validation import as_point_pair


class Circle:
    def __init__(self, center, radius, rmse=None):
        """
        Args:
            center: (2,) center position
            radius: circle radius
            rmse: root mean squared distance of the fitted data, if any
        """
        self.center = np.asarray(center, dtype=np.float64)
        self.radius = float(radius)
        self.rmse = None if rmse is None else float(rmse)

    @property
    def xc(self):
        return float(self.center[0])

    @property
    def yc(self):
        return float(self.center[1])

    @property
    def curvature(self):
        return 1.0 / self.radius if self.radius > 0 else np.inf

    def as_tuple(self):
        """(radius, xc, yc, rmse)"""
        return self.radius, self.xc, self.yc, self.rmse

    def __repr__(self):
        return f"Circle(center=({self.xc:g}, {self.yc:g}), radius={self.radius:g}, rmse={self.rmse})"


def algebraic_circle(x, y):
    """
    Solve the algebraic (Kasa) least-squares normal equations for a circle.

    The circle x^2 + y^2 = a*x + b*y + c leads to a 3x3 system in moment sums
    which is solved through an LU factorization.

    Args:
        x, y: (n,) float arrays, not collinear
    Returns:
        xc, yc, c: center and constant term; radius**2 == xc**2 + yc**2 + c
    """
    n = len(x)
    xx = x * x
    yy = y * y
    xxyy = xx + yy
    sx = x.sum()
    sy = y.sum()
    sxx = xx.sum()
    syy = yy.sum()
    sxy = (x * y).sum()

    A = np.array([[sx, sy, n],
                  [sxy, syy, sy],
                  [sxx, sxy, sx]])
    rhs = np.array([sxx + syy, (xxyy * y).sum(), (xxyy * x).sum()])
    a, b, c = lu_solve(lu_factor(A), rhs)
    return 0.5 * a, 0.5 * b, c


def distance_rmse(x, y, r, xc=0.0, yc=0.0):
    """Root mean squared radial error of points against a circle, no checks."""
    return float(np.sqrt(np.mean((np.hypot(x - xc, y - yc) - r) ** 2)))


def circfit(x, y):
    """
    Least squares fit of X-Y data to a circle.

    Args:
        x, y: equal length vectors of at least three non-collinear points
    Returns:
        Circle with the fitted center, radius and RMSE in distance units
    Raises:
        CollinearityError: if the points are (nearly) collinear
    """
    x, y = as_point_pair(x, y)
    config = get_config()
    if staged_colinear(np.column_stack([x, y]), config.colinear_prefix, config.rank_tolerance):
        raise CollinearityError(
            'The points in vectors X and Y must not all be collinear, or nearly '
            'collinear, with each other.')

    xc, yc, c = algebraic_circle(x, y)
    r = np.sqrt(xc * xc + yc * yc + c)
    return Circle((xc, yc), r, distance_rmse(x, y, r, xc, yc))
