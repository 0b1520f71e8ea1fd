"""
Tuning constants for the fitting routines.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, asdict


@dataclass
class CircfitConfig:
    """Thresholds used by the collinearity guards."""
    colinear_prefix: int = 64        # points tried first by iscolinear/circfit
    curvature_prefix: int = 50       # points tried first by curvaturefit
    rmse_guard_points: int = 20      # circrmse checks collinearity below this size
    rank_tolerance: Optional[float] = None  # None: max(shape) * spacing(sigma_max)

    def __post_init__(self):
        for name in ('colinear_prefix', 'curvature_prefix'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 3:
                raise ValueError(f"{name} must be an integer >= 3")
        if (not isinstance(self.rmse_guard_points, int) or isinstance(self.rmse_guard_points, bool)
                or self.rmse_guard_points < 0):
            raise ValueError("rmse_guard_points must be a non-negative integer")
        if self.rank_tolerance is not None and not self.rank_tolerance >= 0:
            raise ValueError("rank_tolerance must be None or a non-negative number")

    @classmethod
    def load(cls, path: Path) -> 'CircfitConfig':
        """
        Load settings from a JSON file.

        Args:
            path: Path to config file
        """
        with open(path, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)

    def save(self, path: Path):
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CircfitConfig':
        """Create a config from a dictionary; missing keys keep their defaults."""
        return cls(**data)


DEFAULT_CONFIG = CircfitConfig()


def get_config() -> CircfitConfig:
    return DEFAULT_CONFIG


def set_config(config: Optional[CircfitConfig]) -> None:
    """
    Replace the process-wide config; ``None`` restores the defaults.
    """
    global DEFAULT_CONFIG
    if config is None:
        DEFAULT_CONFIG = CircfitConfig()
    elif not isinstance(config, CircfitConfig):
        raise ValueError("config must be an instance of CircfitConfig")
    else:
        DEFAULT_CONFIG = config
