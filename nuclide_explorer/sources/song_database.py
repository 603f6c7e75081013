# ==============================================
# SongDatabase
# ==============================================
#
# PURPOSE:
#   Read-only access to a SQLite database of song metadata
#   (the Million Song Dataset "track_metadata.db" layout):
#     track_id, title, song_id, release, artist_id, artist_mbid,
#     artist_name, duration, artist_familiarity,
#     artist_hotttnesss, year
#
# CLASS: SongDatabase
# -------------------
#   Stateful: holds the sqlite3 connection.
#
#   Constructor:
#   ------------
#   - __init__(path, table="songs")
#       Store connection params. Don't connect yet.
#
#   Methods:
#   --------
#   - connect() -> None       Open the file. Never creates one.
#   - close() -> None
#   - query(sql, params) -> DataFrame
#   - fetch_songs(columns, min_year, limit) -> DataFrame
#   - count() -> int
#
#   Context Manager:
#   ----------------
#   - __enter__ / __exit__ for `with SongDatabase(...) as db:` usage.
#
#   The second workflow needs no normalization: every row is
#   already flat.
#
# ==============================================

import re
import sqlite3
from pathlib import Path
from typing import Optional, Sequence, Union

import pandas as pd


IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


def _check_identifier(name: str) -> str:
    if not IDENTIFIER_PATTERN.match(name):
        raise ValueError(f"Invalid SQL identifier: {name!r}")
    return name


class SongDatabase:
    def __init__(self, path: Union[str, Path], table: str = "songs"):
        self.path = Path(path)
        self.table = _check_identifier(table)
        self.connection: Optional[sqlite3.Connection] = None

    def connect(self) -> None:
        if self.connection is not None:
            return
        if not self.path.exists():
            raise FileNotFoundError(f"Song database not found: {self.path}")
        # mode=ro: sqlite must never create the file
        self.connection = sqlite3.connect(f"{self.path.resolve().as_uri()}?mode=ro", uri=True)

    def close(self) -> None:
        if self.connection:
            self.connection.close()
            self.connection = None

    def query(self, sql: str, params: Optional[Sequence] = None) -> pd.DataFrame:
        """
        Execute a SELECT and return the result as a DataFrame.

        Args:
            sql: Query text, with ? placeholders
            params: Values for the placeholders

        Returns:
            One DataFrame row per result row
        """
        self.connect()
        return pd.read_sql_query(sql, self.connection, params=params)

    def fetch_songs(
        self,
        columns: Optional[Sequence[str]] = None,
        min_year: Optional[int] = None,
        limit: Optional[int] = None
    ) -> pd.DataFrame:
        """
        Select songs from the configured table.

        Args:
            columns: Columns to select (all when None)
            min_year: Keep songs released in or after this year;
                songs with an unknown year (0) are dropped
            limit: Maximum number of rows

        Returns:
            DataFrame of songs
        """
        column_list = ", ".join(_check_identifier(c) for c in columns) if columns else "*"
        sql = f"SELECT {column_list} FROM {self.table}"
        params: list = []

        if min_year is not None:
            sql += " WHERE year >= ? AND year > 0"
            params.append(int(min_year))

        if limit is not None:
            sql += " LIMIT ?"
            params.append(int(limit))

        return self.query(sql, params)

    def count(self) -> int:
        frame = self.query(f"SELECT COUNT(*) AS n FROM {self.table}")
        return int(frame.iloc[0]["n"])

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
