# ==============================================
# Results (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes that hold the OUTPUT of the song statistics.
#   They are printed by the song pipeline and returned in its
#   summary, so each one serializes with to_dict().
#
# CLASSES:
# --------
# - TTestResult          → two-sample t-test
# - VarianceTestResult   → Levene / Bartlett equal-variance test
# - LinearFit            → least-squares line y = slope * x + intercept
#
# ==============================================

from dataclasses import dataclass, asdict
from typing import Any, Dict

import numpy as np


@dataclass
class TTestResult:
    """Two-sample t-test comparing the means of two groups."""

    statistic: float
    p_value: float
    mean_a: float
    mean_b: float
    n_a: int
    n_b: int
    equal_var: bool = False  # False = Welch's t-test

    def significant(self, alpha: float = 0.05) -> bool:
        return self.p_value < alpha

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class VarianceTestResult:
    """Test of the null hypothesis that two groups have equal variance."""

    method: str  # "levene" or "bartlett"
    statistic: float
    p_value: float
    variance_a: float
    variance_b: float

    def significant(self, alpha: float = 0.05) -> bool:
        return self.p_value < alpha

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class LinearFit:
    """Ordinary least-squares fit of y against x."""

    slope: float
    intercept: float
    r_value: float
    p_value: float
    stderr: float
    n: int

    @property
    def r_squared(self) -> float:
        return self.r_value ** 2

    def predict(self, x):
        """Evaluate the fitted line at x (scalar or array-like)."""
        return self.slope * np.asarray(x, dtype=float) + self.intercept

    def significant(self, alpha: float = 0.05) -> bool:
        return self.p_value < alpha

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["r_squared"] = self.r_squared
        return data
