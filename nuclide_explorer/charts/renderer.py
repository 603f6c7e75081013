from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .options import ChartBinding, ChartOptions


class ChartRenderer:
    """Builds interactive plotly figures from a table and a ChartBinding."""

    def scatter(
        self,
        frame: pd.DataFrame,
        binding: ChartBinding,
        options: Optional[ChartOptions] = None
    ) -> go.Figure:
        """
        Scatter plot of binding.y against binding.x.

        Raises:
            ValueError: binding.y is unset, or a bound column is missing
        """
        options = options or ChartOptions()
        if binding.y is None:
            raise ValueError("A scatter plot needs a y column")
        self._check_columns(frame, binding.columns())

        figure = px.scatter(
            frame,
            x=binding.x,
            y=binding.y,
            color=binding.color,
            hover_name=binding.hover_name,
            hover_data=binding.hover_data or None,
            opacity=options.marker_opacity,
            log_x=options.log_x,
            log_y=options.log_y,
            template=options.template,
        )
        return self._apply_layout(figure, binding, options)

    def histogram(
        self,
        frame: pd.DataFrame,
        x: str,
        options: Optional[ChartOptions] = None,
        color: Optional[str] = None,
        nbins: Optional[int] = None
    ) -> go.Figure:
        options = options or ChartOptions()
        binding = ChartBinding(x=x, color=color)
        self._check_columns(frame, binding.columns())

        figure = px.histogram(
            frame,
            x=x,
            color=color,
            nbins=nbins,
            opacity=options.marker_opacity,
            log_y=options.log_y,
            template=options.template,
            barmode="overlay",
        )
        return self._apply_layout(figure, binding, options)

    @staticmethod
    def save(figure: go.Figure, path: Union[str, Path]) -> Path:
        """Write the figure as a standalone HTML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        figure.write_html(str(path), include_plotlyjs="cdn")
        return path

    @staticmethod
    def _apply_layout(figure: go.Figure, binding: ChartBinding, options: ChartOptions) -> go.Figure:
        figure.update_layout(
            title=options.title,
            hovermode=options.hover_mode.value,
            xaxis_title=options.x_title or binding.x,
            yaxis_title=options.y_title or binding.y,
        )
        return figure

    @staticmethod
    def _check_columns(frame: pd.DataFrame, columns: Iterable[str]) -> None:
        missing = [name for name in columns if name not in frame.columns]
        if missing:
            raise ValueError(f"Columns not found in table: {', '.join(missing)}")
