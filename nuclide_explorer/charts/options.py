# ==============================================
# Chart Options (Data Classes)
# ==============================================
#
# PURPOSE:
#   Describe a chart as data: which columns feed which visual
#   channel, and how the chart is dressed. The renderer turns
#   these into plotly calls.
#
# ENUMS:
# ------
# - HoverMode(Enum): CLOSEST, X, Y, X_UNIFIED, Y_UNIFIED
#     Values are the plotly layout.hovermode strings.
#
# CLASSES:
# --------
# - ChartBinding (dataclass)
#     x, y, color, hover_name, hover_data  → column names
#
# - ChartOptions (dataclass)
#     title, x_title, y_title, marker_opacity, hover_mode,
#     template, log_x, log_y
#
# ==============================================

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional

from nuclide_explorer.config import ChartConfig


class HoverMode(Enum):
    """
    How hover labels are gathered.

    - CLOSEST: label for the single point under the cursor
    - X / Y: one label per trace at the same x (or y)
    - X_UNIFIED / Y_UNIFIED: all traces in a single label
    """
    CLOSEST = "closest"
    X = "x"
    Y = "y"
    X_UNIFIED = "x unified"
    Y_UNIFIED = "y unified"


@dataclass
class ChartBinding:
    """Column -> visual channel bindings."""

    x: str
    y: Optional[str] = None
    color: Optional[str] = None
    hover_name: Optional[str] = None
    hover_data: List[str] = field(default_factory=list)

    def columns(self) -> List[str]:
        """All columns referenced by this binding, without duplicates."""
        referenced = [self.x, self.y, self.color, self.hover_name, *self.hover_data]
        seen: List[str] = []
        for name in referenced:
            if name is not None and name not in seen:
                seen.append(name)
        return seen


@dataclass
class ChartOptions:
    """Presentation settings for one chart."""

    title: Optional[str] = None
    x_title: Optional[str] = None
    y_title: Optional[str] = None
    marker_opacity: float = 0.7
    hover_mode: HoverMode = HoverMode.CLOSEST
    template: str = "plotly_white"
    log_x: bool = False
    log_y: bool = False

    def __post_init__(self):
        if isinstance(self.hover_mode, str):
            self.hover_mode = HoverMode(self.hover_mode)
        if not 0.0 <= self.marker_opacity <= 1.0:
            raise ValueError(f"marker_opacity must be within [0, 1], got {self.marker_opacity}")

    @classmethod
    def from_config(cls, config: ChartConfig, **overrides) -> "ChartOptions":
        """Start from the configured defaults, then apply overrides."""
        settings = {
            "marker_opacity": config.marker_opacity,
            "hover_mode": config.hover_mode,
            "template": config.template,
        }
        settings.update(overrides)
        return cls(**settings)
