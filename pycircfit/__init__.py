"""
pycircfit: least-squares circle and curvature fitting for planar point sets
"""

from .colinear import iscolinear
from .curvature import curvaturefit, FitResult
from .rmse import circrmse
from .circle import circfit, Circle
from .meanfit import meancircfit
from .synthetic import generate_circle_points, generate_spiral_points, generate_line_points
from .config import CircfitConfig, get_config, set_config
from .logger import CircfitLogger, LogLevel, get_logger, set_logger
from .errors import (
    CircfitError, ShapeMismatchError, LengthMismatchError, NonFiniteInputError,
    TooFewPointsError, InvalidScalarParameterError, NegativeRadiusError,
    InvalidArityError, CollinearityError
)

__all__ = [
    'iscolinear',
    'curvaturefit',
    'FitResult',
    'circrmse',
    'circfit',
    'Circle',
    'meancircfit',
    'generate_circle_points',
    'generate_spiral_points',
    'generate_line_points',
    'CircfitConfig',
    'get_config',
    'set_config',
    'CircfitLogger',
    'LogLevel',
    'get_logger',
    'set_logger',
    'CircfitError',
    'ShapeMismatchError',
    'LengthMismatchError',
    'NonFiniteInputError',
    'TooFewPointsError',
    'InvalidScalarParameterError',
    'NegativeRadiusError',
    'InvalidArityError',
    'CollinearityError',
]
