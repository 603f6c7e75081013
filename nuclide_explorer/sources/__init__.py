# ==============================================
# SOURCES
# ==============================================
#
# This package obtains the raw data for both workflows.
#
# Modules:
# --------
# - element_source.py  → Element -> isotope JSON over HTTP or from a file
# - song_database.py   → Song metadata from a SQLite database
#
# ==============================================

from .element_source import ElementSource, DataSourceError
from .song_database import SongDatabase

__all__ = ["ElementSource", "DataSourceError", "SongDatabase"]
