# ==============================================
# ANALYSIS
# ==============================================
#
# This package runs the aggregate statistics of the song workflow.
#
# Modules:
# --------
# - results.py     → Data classes for test results and linear fits
# - song_stats.py  → t-test, variance test, linear fit, group split
#
# ==============================================

from .results import TTestResult, VarianceTestResult, LinearFit
from .song_stats import SongStatistics

__all__ = ["TTestResult", "VarianceTestResult", "LinearFit", "SongStatistics"]
