# ==============================================
# Nuclide Explorer
# ==============================================
#
# Package Structure:
#
# nuclide_explorer/
# ├── normalization/    # Element -> isotope records into one flat table
# ├── sources/          # Element JSON fetcher, SQLite song database
# ├── analysis/         # t-tests, variance tests, linear fits on songs
# ├── charts/           # Plotly scatter / histogram rendering
# ├── persistence/      # Save and reload normalized tables
# ├── config.py         # Configuration management
# └── pipeline.py       # Isotope + song workflows, command line entry point
#
# ==============================================

__version__ = "0.1.0"
