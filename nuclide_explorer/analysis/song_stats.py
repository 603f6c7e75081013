from typing import Tuple

import numpy as np
import pandas as pd
from scipy import stats

from .results import LinearFit, TTestResult, VarianceTestResult


class SongStatistics:
    """
    Thin wrappers over scipy.stats for comparing groups of songs.

    Every method drops NaN values first and requires at least two
    values per sample.
    """

    VARIANCE_METHODS = {
        "levene": stats.levene,
        "bartlett": stats.bartlett,
    }

    @classmethod
    def t_test(cls, a, b, equal_var: bool = False) -> TTestResult:
        sample_a = cls._sample(a, "a")
        sample_b = cls._sample(b, "b")
        statistic, p_value = stats.ttest_ind(sample_a, sample_b, equal_var=equal_var)
        return TTestResult(
            statistic=float(statistic),
            p_value=float(p_value),
            mean_a=float(sample_a.mean()),
            mean_b=float(sample_b.mean()),
            n_a=int(sample_a.size),
            n_b=int(sample_b.size),
            equal_var=equal_var,
        )

    @classmethod
    def variance_test(cls, a, b, method: str = "levene") -> VarianceTestResult:
        """
        Test whether two samples share the same variance.

        Args:
            a, b: Samples (array-like)
            method: "levene" (robust to non-normal data) or "bartlett"

        Returns:
            VarianceTestResult

        Raises:
            ValueError: unknown method, or a sample with fewer than two values
        """
        if method not in cls.VARIANCE_METHODS:
            raise ValueError(
                f"Unknown variance test {method!r}, expected one of {sorted(cls.VARIANCE_METHODS)}"
            )
        sample_a = cls._sample(a, "a")
        sample_b = cls._sample(b, "b")
        statistic, p_value = cls.VARIANCE_METHODS[method](sample_a, sample_b)
        return VarianceTestResult(
            method=method,
            statistic=float(statistic),
            p_value=float(p_value),
            variance_a=float(sample_a.var(ddof=1)),
            variance_b=float(sample_b.var(ddof=1)),
        )

    @classmethod
    def linear_fit(cls, x, y) -> LinearFit:
        x_values = np.asarray(x, dtype=float)
        y_values = np.asarray(y, dtype=float)
        if x_values.shape != y_values.shape:
            raise ValueError(f"x and y differ in length: {x_values.size} != {y_values.size}")

        # drop a pair when either side is missing
        keep = ~(np.isnan(x_values) | np.isnan(y_values))
        x_values, y_values = x_values[keep], y_values[keep]
        if x_values.size < 2:
            raise ValueError("A linear fit needs at least two complete (x, y) pairs")

        fit = stats.linregress(x_values, y_values)
        return LinearFit(
            slope=float(fit.slope),
            intercept=float(fit.intercept),
            r_value=float(fit.rvalue),
            p_value=float(fit.pvalue),
            stderr=float(fit.stderr),
            n=int(x_values.size),
        )

    @staticmethod
    def split(frame: pd.DataFrame, column: str, threshold, value_column: str) -> Tuple[pd.Series, pd.Series]:
        """
        Split value_column into (column < threshold, column >= threshold).

        Raises:
            ValueError: either column is missing from the frame
        """
        for name in (column, value_column):
            if name not in frame.columns:
                raise ValueError(f"Column {name!r} not found")
        below = frame.loc[frame[column] < threshold, value_column]
        at_or_above = frame.loc[frame[column] >= threshold, value_column]
        return below, at_or_above

    @staticmethod
    def _sample(values, name: str) -> np.ndarray:
        sample = np.asarray(values, dtype=float).ravel()
        sample = sample[~np.isnan(sample)]
        if sample.size < 2:
            raise ValueError(f"Sample {name} needs at least two values, got {sample.size}")
        return sample
