"""
Example: curvature and radius estimates on synthetic trajectories.
"""
import os
import sys
import numpy as np

# Add the repository root to the path to allow importing the local package
current_dir = os.path.dirname(os.path.abspath(__file__))
parent_dir = os.path.dirname(current_dir)
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)

from pycircfit import (
    CircfitLogger, LogLevel, set_logger, circfit, circrmse, curvaturefit,
    iscolinear, meancircfit, generate_circle_points, generate_spiral_points
)


def main():
    # Verbose console logger so the fitting stages are printed
    logger = CircfitLogger(mode='console', console_level=LogLevel.DEBUG)
    set_logger(logger)

    center = np.array([1.5, -0.5])
    radius = 2.0
    x, y = generate_circle_points(center, radius, n_points=40, arc=np.pi, noise=0.02, seed=42)
    logger("\n[GROUND TRUTH CIRCLE]")
    logger(f"  Center: {center}")
    logger(f"  Radius: {radius}")

    logger(f"Collinear: {iscolinear(x, y)}")

    circle = circfit(x, y)
    logger("\n[FITTED CIRCLE]")
    logger(f"  Center: ({circle.xc:.4f}, {circle.yc:.4f})")
    logger(f"  Radius: {circle.radius:.4f}")
    logger(f"  RMSE:   {circle.rmse:.4f}")
    logger(f"  RMSE against ground truth: {circrmse(x, y, radius, *center):.4f}")

    fit = curvaturefit(x, y)
    logger(f"  Curvature: {fit.curvature:.4f} (true {1.0 / radius:.4f}), RMSE {fit.rmse:.4f}")

    # A slowly growing spiral: one global circle misses the drift
    sx, sy, sr = generate_spiral_points(5.0, 0.2, n_points=300, turns=3.0)
    logger("\n[SPIRAL]")
    logger(f"  Mean polar radius:        {sr.mean():.4f}")
    logger(f"  Global circle radius:     {circfit(sx, sy).radius:.4f}")
    logger(f"  Mean windowed radius w=5: {meancircfit(sx, sy, 5):.4f}")


if __name__ == "__main__":
    main()
