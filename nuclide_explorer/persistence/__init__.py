# ==============================================
# PERSISTENCE (normalized tables on disk)
# ==============================================
#
# Modules:
# --------
# - table_store.py  → Save/load normalized rows, export DataFrames
#
# ==============================================

from .table_store import TableStore

__all__ = ["TableStore"]
