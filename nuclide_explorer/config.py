# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to the pipelines, sources and chart renderer.
#
# CLASSES:
# --------
# - SourceConfig (dataclass)
#     elements_url: str       (default "http://127.0.0.1:8000/elements")
#     request_timeout: float  (default 30.0)
#     songs_db_path: str      (default "data/track_metadata.db")
#     songs_table: str        (default "songs")
#
# - ChartConfig (dataclass)
#     marker_opacity: float   (default 0.7)
#     hover_mode: str         (default "closest")
#     template: str           (default "plotly_white")
#
# - AppConfig (dataclass)
#     sources: SourceConfig
#     charts: ChartConfig
#     output_dir: str         (default "output/")
#     table_dir: str          (default "tables/")
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# USAGE:
# ------
#   from nuclide_explorer.config import get_config
#   config = get_config()
#   print(config.sources.elements_url)
#   print(config.charts.marker_opacity)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


@dataclass
class SourceConfig:
    """Where the element dataset and the song database come from."""
    elements_url: str = "http://127.0.0.1:8000/elements"
    request_timeout: float = 30.0
    songs_db_path: str = "data/track_metadata.db"
    songs_table: str = "songs"


@dataclass
class ChartConfig:
    """Default chart options."""
    marker_opacity: float = 0.7
    hover_mode: str = "closest"
    template: str = "plotly_white"


@dataclass
class AppConfig:
    """Main application configuration."""
    sources: SourceConfig = field(default_factory=SourceConfig)
    charts: ChartConfig = field(default_factory=ChartConfig)
    output_dir: str = "output/"
    table_dir: str = "tables/"


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    source_config = SourceConfig(
        elements_url=os.getenv("ELEMENTS_URL", "http://127.0.0.1:8000/elements"),
        request_timeout=float(os.getenv("REQUEST_TIMEOUT", "30.0")),
        songs_db_path=os.getenv("SONGS_DB_PATH", "data/track_metadata.db"),
        songs_table=os.getenv("SONGS_TABLE", "songs")
    )

    chart_config = ChartConfig(
        marker_opacity=float(os.getenv("CHART_MARKER_OPACITY", "0.7")),
        hover_mode=os.getenv("CHART_HOVER_MODE", "closest"),
        template=os.getenv("CHART_TEMPLATE", "plotly_white")
    )

    _config_instance = AppConfig(
        sources=source_config,
        charts=chart_config,
        output_dir=os.getenv("OUTPUT_DIR", "output/"),
        table_dir=os.getenv("TABLE_DIR", "tables/")
    )

    return _config_instance
