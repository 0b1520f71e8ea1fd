"""
Synthetic planar trajectories for examples and tests.
"""
import numpy as np


def generate_circle_points(center, radius, n_points=100, arc=2 * np.pi, start=0.0, noise=0.0, seed=None):
    """
    Sample points on a circular arc.
    Args:
        center: (2,) center of the circle
        radius: float
        n_points: int, number of points
        arc: float, angular extent in radians (the endpoint is excluded)
        start: float, angle of the first point
        noise: float, stddev of Gaussian noise added to both coordinates
        seed: optional seed for the noise
    Returns:
        x, y: (n_points,) numpy arrays
    """
    angles = start + arc * np.arange(n_points) / n_points
    x = center[0] + radius * np.cos(angles)
    y = center[1] + radius * np.sin(angles)
    if noise > 0:
        rng = np.random.default_rng(seed)
        x = x + rng.normal(scale=noise, size=n_points)
        y = y + rng.normal(scale=noise, size=n_points)
    return x, y


def generate_spiral_points(r0, growth, n_points=200, turns=2.0, center=(0.0, 0.0)):
    """
    Sample an Archimedean spiral r = r0 + growth * theta.
    Args:
        r0: float, radius at theta = 0
        growth: float, radius increase per radian
        n_points: int, number of points
        turns: float, number of revolutions
        center: (2,) spiral center
    Returns:
        x, y, r: (n_points,) arrays of positions and the polar radius at each point
    """
    theta = np.linspace(0.0, 2 * np.pi * turns, n_points)
    r = r0 + growth * theta
    x = center[0] + r * np.cos(theta)
    y = center[1] + r * np.sin(theta)
    return x, y, r


def generate_line_points(start, direction, n_points=10, spacing=1.0):
    """
    Evenly spaced points on a straight line in any dimension.
    Returns:
        (n_points, D) numpy array
    """
    start = np.asarray(start, dtype=np.float64)
    direction = np.asarray(direction, dtype=np.float64)
    steps = spacing * np.arange(n_points)
    return start + np.outer(steps, direction)
