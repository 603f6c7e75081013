# ==============================================
# CHARTS
# ==============================================
#
# This package renders tables as interactive plotly charts.
#
# Modules:
# --------
# - options.py   → HoverMode, ChartBinding, ChartOptions
# - renderer.py  → ChartRenderer: scatter, histogram, save as HTML
#
# ==============================================

from .options import HoverMode, ChartBinding, ChartOptions
from .renderer import ChartRenderer

__all__ = ["HoverMode", "ChartBinding", "ChartOptions", "ChartRenderer"]
