# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests:
#   - hydrogen / helium / technetium element records
#   - a temporary SQLite song database
#   - an AppConfig writing into tmp_path
# ==============================================

import sqlite3

import pytest

from nuclide_explorer.config import AppConfig, ChartConfig, SourceConfig


@pytest.fixture
def hydrogen() -> dict:
    """Hydrogen with its three isotopes; tritium has no natural composition."""
    return {
        "symbol": "H",
        "number": 1,
        "standardWeight": "[1.00784,1.00811]",
        "notes": "g,m,r",
        "children": [
            {"massNumber": 1, "isotopicComposition": "0.999885(70)", "relativeMass": "1.00782503207(10)"},
            {"isotopeSymbol": "D", "massNumber": 2, "isotopicComposition": "0.000115(70)",
             "relativeMass": "2.01410177785(36)"},
            {"isotopeSymbol": "T", "massNumber": 3, "relativeMass": "3.0160492777(25)"},
        ],
    }


@pytest.fixture
def helium() -> dict:
    return {
        "symbol": "He",
        "number": 2,
        "standardWeight": "4.002602(2)",
        "children": [
            {"massNumber": "3", "isotopicComposition": "0.00000134(3)", "relativeMass": "3.0160293191(26)"},
            {"massNumber": "4", "isotopicComposition": "0.99999866(3)", "relativeMass": "4.00260325415(6)"},
        ],
    }


@pytest.fixture
def technetium() -> dict:
    """No standard weight, no naturally occurring isotopes."""
    return {
        "symbol": "Tc",
        "number": 43,
        "children": [
            {"massNumber": 97, "relativeMass": "96.9063667(40)"},
            {"massNumber": 98, "relativeMass": "97.9072124(36)"},
        ],
    }


@pytest.fixture
def sample_elements(hydrogen, helium, technetium) -> list:
    return [hydrogen, helium, technetium]


SONGS = [
    # title, artist_name, duration, artist_familiarity, artist_hotttnesss, year
    ("Song A", "Artist 1", 210.5, 0.45, 0.30, 1985),
    ("Song B", "Artist 2", 180.0, 0.55, 0.35, 1990),
    ("Song C", "Artist 3", 240.2, 0.60, 0.41, 1995),
    ("Song D", "Artist 4", 200.1, 0.50, 0.33, 1998),
    ("Song E", "Artist 5", 260.7, 0.70, 0.48, 2003),
    ("Song F", "Artist 6", 230.3, 0.80, 0.55, 2005),
    ("Song G", "Artist 7", 275.9, 0.75, 0.52, 2008),
    ("Song H", "Artist 8", 250.0, 0.90, 0.61, 2010),
    ("Song I", "Artist 9", 199.0, 0.40, 0.20, 0),
]


@pytest.fixture
def song_db(tmp_path):
    """SQLite file with a track_metadata-style songs table."""
    path = tmp_path / "track_metadata.db"
    connection = sqlite3.connect(path)
    connection.execute(
        "CREATE TABLE songs ("
        "track_id TEXT, title TEXT, artist_name TEXT, duration REAL, "
        "artist_familiarity REAL, artist_hotttnesss REAL, year INT)"
    )
    connection.executemany(
        "INSERT INTO songs VALUES (?, ?, ?, ?, ?, ?, ?)",
        [(f"TR{i:04d}",) + song for i, song in enumerate(SONGS)],
    )
    connection.commit()
    connection.close()
    return path


@pytest.fixture
def app_config(tmp_path, song_db) -> AppConfig:
    return AppConfig(
        sources=SourceConfig(
            elements_url="http://example.test/elements",
            request_timeout=5.0,
            songs_db_path=str(song_db),
            songs_table="songs",
        ),
        charts=ChartConfig(marker_opacity=0.6, hover_mode="closest", template="plotly_white"),
        output_dir=str(tmp_path / "output"),
        table_dir=str(tmp_path / "tables"),
    )
