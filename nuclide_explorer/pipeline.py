"""
==============================================
Exploration Pipelines
==============================================

Ties sources, normalization, statistics, persistence and charts
into the two exploration workflows.

USAGE EXAMPLES:

1. Isotopes from the configured URL:
    from nuclide_explorer.pipeline import IsotopePipeline

    pipeline = IsotopePipeline()
    summary = pipeline.run()

2. Isotopes from a local JSON file:
    pipeline = IsotopePipeline()
    summary = pipeline.run("data/elements.json")

3. Songs:
    from nuclide_explorer.pipeline import SongPipeline

    summary = SongPipeline().run("data/track_metadata.db", split_year=2000)

4. Command line:
    python -m nuclide_explorer.pipeline isotopes [path]
    python -m nuclide_explorer.pipeline songs [db_path]
"""

import sys
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from nuclide_explorer.config import get_config, AppConfig
from nuclide_explorer.normalization import RecordNormalizer, MalformedRecord, FlatRow
from nuclide_explorer.sources import ElementSource, DataSourceError, SongDatabase
from nuclide_explorer.analysis import SongStatistics
from nuclide_explorer.charts import ChartBinding, ChartOptions, ChartRenderer
from nuclide_explorer.persistence import TableStore


ISOTOPE_BINDING = ChartBinding(
    x="parentNumber",
    y="massNumber",
    color="naturallyOccurring",
    hover_name="isotopeNotation",
    hover_data=["relativeMass", "isotopicComposition", "standardWeight"],
)

SONG_COLUMNS = [
    "title", "artist_name", "duration",
    "artist_familiarity", "artist_hotttnesss", "year",
]


class IsotopePipeline:
    """
    Element dataset -> normalized isotope table -> saved table + scatter chart.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Args:
            config: Optional configuration. If None, loads from environment.
        """
        self._config = config or get_config()
        self._source = ElementSource.from_config(self._config.sources)
        self._normalizer = RecordNormalizer()
        self._store = TableStore(self._config.table_dir)
        self._renderer = ChartRenderer()

    def load_elements(self, source: Optional[Union[str, Path]] = None) -> List[dict]:
        if source is not None:
            return self._source.load(source)
        return self._source.fetch()

    def normalize(self, elements: List[dict]) -> List[FlatRow]:
        print(f"🔄 Normalizing {len(elements)} elements...")
        rows = self._normalizer.normalize_raw(elements)
        print(f"   → {len(rows)} isotope rows")
        return rows

    def build_chart(self, frame: pd.DataFrame):
        options = ChartOptions.from_config(
            self._config.charts,
            title="Isotopes by atomic number",
            x_title="Atomic number (Z)",
            y_title="Mass number (A)",
        )
        return self._renderer.scatter(frame, ISOTOPE_BINDING, options)

    def run(self, source: Optional[Union[str, Path]] = None) -> dict:
        """
        Run the whole isotope workflow.

        Args:
            source: Local JSON file; the configured URL is used when None

        Returns:
            Summary statistics and output paths
        """
        elements = self.load_elements(source)
        rows = self.normalize(elements)
        frame = self._normalizer.to_frame(rows)

        table_path = self._store.save_rows(rows, "isotopes")
        chart_path = self._renderer.save(
            self.build_chart(frame),
            Path(self._config.output_dir) / "isotopes.html",
        )
        print(f"✓ Chart written to {chart_path}")

        natural = sum(1 for row in rows if row.naturally_occurring)
        return {
            "elements": len(elements),
            "rows": len(rows),
            "naturally_occurring": natural,
            "artificial": len(rows) - natural,
            "table_path": str(table_path),
            "chart_path": str(chart_path),
        }


class SongPipeline:
    """
    Song database -> duration comparison across a split year,
    hotttnesss vs familiarity fit -> scatter + histogram charts.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        self._config = config or get_config()
        self._renderer = ChartRenderer()

    def load_songs(self, db_path: Optional[Union[str, Path]] = None) -> pd.DataFrame:
        path = db_path or self._config.sources.songs_db_path
        with SongDatabase(path, self._config.sources.songs_table) as db:
            # year 0 means unknown
            songs = db.fetch_songs(columns=SONG_COLUMNS, min_year=1)
        print(f"✓ Loaded {len(songs)} songs with a known year from {path}")
        return songs

    def run(self, db_path: Optional[Union[str, Path]] = None, split_year: int = 2000) -> dict:
        """
        Run the whole song workflow.

        Args:
            db_path: SQLite file; the configured path is used when None
            split_year: Songs before this year form the first group

        Returns:
            Summary with the test results and chart paths
        """
        songs = self.load_songs(db_path)

        before, after = SongStatistics.split(songs, "year", split_year, "duration")
        t_test = SongStatistics.t_test(before, after)
        variance = SongStatistics.variance_test(before, after)
        print(f"📊 Duration before / from {split_year}: "
              f"{t_test.mean_a:.1f}s vs {t_test.mean_b:.1f}s (p={t_test.p_value:.3g})")
        print(f"   → Variance test ({variance.method}): p={variance.p_value:.3g}")

        fit = SongStatistics.linear_fit(songs["artist_familiarity"], songs["artist_hotttnesss"])
        print(f"   → Hotttnesss = {fit.slope:.3f} * familiarity + {fit.intercept:.3f} "
              f"(r²={fit.r_squared:.3f})")

        output_dir = Path(self._config.output_dir)
        scatter_path = self._renderer.save(self._fit_chart(songs, fit), output_dir / "songs_fit.html")
        histogram_path = self._renderer.save(
            self._duration_chart(songs, split_year), output_dir / "songs_duration.html"
        )
        print(f"✓ Charts written to {output_dir}")

        return {
            "songs": len(songs),
            "split_year": split_year,
            "t_test": t_test.to_dict(),
            "variance_test": variance.to_dict(),
            "linear_fit": fit.to_dict(),
            "scatter_path": str(scatter_path),
            "histogram_path": str(histogram_path),
        }

    def _fit_chart(self, songs: pd.DataFrame, fit):
        options = ChartOptions.from_config(
            self._config.charts,
            title="Artist hotttnesss vs familiarity",
            x_title="Artist familiarity",
            y_title="Artist hotttnesss",
        )
        binding = ChartBinding(
            x="artist_familiarity",
            y="artist_hotttnesss",
            hover_name="title",
            hover_data=["artist_name", "year"],
        )
        figure = self._renderer.scatter(songs, binding, options)

        x_line = songs["artist_familiarity"].dropna().sort_values()
        figure.add_scatter(x=x_line, y=fit.predict(x_line), mode="lines", name="linear fit")
        return figure

    def _duration_chart(self, songs: pd.DataFrame, split_year: int):
        frame = songs.assign(
            era=songs["year"].map(lambda y: f"before {split_year}" if y < split_year else f"{split_year} on")
        )
        options = ChartOptions.from_config(
            self._config.charts,
            title="Song duration",
            x_title="Duration (s)",
            y_title="Songs",
        )
        return self._renderer.histogram(frame, "duration", options, color="era", nbins=60)


# ==============================================
# CLI
# ==============================================

USAGE = """Nuclide Explorer
============================================================

Usage:
  python -m nuclide_explorer.pipeline isotopes          # Fetch from ELEMENTS_URL
  python -m nuclide_explorer.pipeline isotopes FILE     # Load a local JSON file
  python -m nuclide_explorer.pipeline songs [DB_PATH]   # Analyze the song database"""


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    if not args:
        print(USAGE)
        return 0

    command, rest = args[0], args[1:]
    try:
        if command == "isotopes":
            summary = IsotopePipeline().run(rest[0] if rest else None)
            print(f"\n📊 {summary['rows']} isotopes of {summary['elements']} elements "
                  f"({summary['naturally_occurring']} natural, {summary['artificial']} artificial)")
        elif command == "songs":
            summary = SongPipeline().run(rest[0] if rest else None)
            print(f"\n📊 {summary['songs']} songs analyzed")
        else:
            print(f"Unknown command: {command}")
            print(USAGE)
            return 2
    except (DataSourceError, MalformedRecord, FileNotFoundError, ValueError) as e:
        print(f"\n✗ Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
