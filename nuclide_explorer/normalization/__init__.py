# ==============================================
# NORMALIZATION
# ==============================================
#
# This package turns the nested element -> isotope dataset
# into one flat table, one row per isotope.
#
# Modules:
# --------
# - errors.py            → MalformedRecord
# - field_normalizer.py  → Resolve raw keys to canonical attribute names
# - value_parser.py      → Parse uncertainty / bracket / range annotated numbers
# - records.py           → ParentRecord, ChildRecord, FlatRow
# - record_normalizer.py → Flatten records into FlatRows and a DataFrame
#
# ==============================================

from .errors import MalformedRecord
from .field_normalizer import FieldNormalizer
from .value_parser import ValueParser
from .records import ChildRecord, ParentRecord, FlatRow
from .record_normalizer import RecordNormalizer

__all__ = [
    "MalformedRecord",
    "FieldNormalizer",
    "ValueParser",
    "ChildRecord",
    "ParentRecord",
    "FlatRow",
    "RecordNormalizer",
]
