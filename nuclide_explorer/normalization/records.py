# ==============================================
# Records (Data Classes)
# ==============================================
#
# PURPOSE:
#   Fixed-shape records for the INPUT (element, isotope) and the
#   OUTPUT (one flat row per isotope) of normalization.
#
# WHY THIS FILE EXISTS:
#   Raw element records do not carry the same keys from one record
#   to the next. Every optional key is resolved once here, in
#   from_dict(), so the normalizer never has to ask "is this key
#   present?" again: an absent key, a JSON null and a blank string
#   all become None.
#
# CLASSES:
# --------
# - ChildRecord (dataclass)
#     One isotope as it arrives from the data source.
#     Required: mass_number, relative_mass.
#
# - ParentRecord (dataclass)
#     One element with its isotopes.
#     Required: symbol, number, children (non-empty).
#
# - FlatRow (frozen dataclass)
#     One normalized isotope row with the element fields inherited.
#
#     Methods:
#     --------
#     - to_dict() -> dict     → camelCase column names, table order
#     - from_dict(data) -> FlatRow  (classmethod)
#
# ==============================================

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .errors import MalformedRecord
from .field_normalizer import FieldNormalizer


_default_normalizer = FieldNormalizer()


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _required(fields: Dict[str, Any], attribute: str, column: str, raw: Any) -> Any:
    value = fields.get(attribute)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MalformedRecord(column, "required field is missing", raw)
    return value


@dataclass(frozen=True)
class ChildRecord:
    """A single isotope entry nested under an element."""

    mass_number: Union[str, int]
    relative_mass: Union[str, float]
    isotope_symbol: Optional[str] = None  # only set for named isotopes (D, T)
    isotopic_composition: Optional[Union[str, float]] = None  # absent for synthetic isotopes

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any], normalizer: Optional[FieldNormalizer] = None) -> "ChildRecord":
        """
        Build a ChildRecord from a raw isotope mapping.

        Raises:
            MalformedRecord: massNumber or relativeMass is absent
        """
        if not isinstance(raw, Mapping):
            raise MalformedRecord("isotope", f"expected an object, got {type(raw).__name__}", raw)

        fields = (normalizer or _default_normalizer).canonicalize(raw)
        return cls(
            mass_number=_required(fields, "mass_number", "massNumber", raw),
            relative_mass=_required(fields, "relative_mass", "relativeMass", raw),
            isotope_symbol=_optional_text(fields.get("isotope_symbol")),
            isotopic_composition=fields.get("isotopic_composition"),
        )


@dataclass(frozen=True)
class ParentRecord:
    """An element with its ordered, non-empty sequence of isotopes."""

    symbol: str
    number: Union[str, int]
    children: Tuple[ChildRecord, ...]
    notes: Optional[str] = None
    standard_weight: Optional[Union[str, float]] = None

    def __post_init__(self):
        if not self.children:
            raise MalformedRecord("children", f"element {self.symbol!r} has no isotopes", self)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any], normalizer: Optional[FieldNormalizer] = None) -> "ParentRecord":
        """
        Build a ParentRecord, and its ChildRecords, from a raw element mapping.

        Raises:
            MalformedRecord: symbol, number or the isotope list is absent,
                or any isotope is missing a required field
        """
        if not isinstance(raw, Mapping):
            raise MalformedRecord("element", f"expected an object, got {type(raw).__name__}", raw)

        normalizer = normalizer or _default_normalizer
        fields = normalizer.canonicalize(raw)

        raw_children = fields.get("children")
        if not isinstance(raw_children, (list, tuple)) or not raw_children:
            raise MalformedRecord("children", "element has no isotopes", raw)

        return cls(
            symbol=str(_required(fields, "symbol", "parentSymbol", raw)).strip(),
            number=_required(fields, "number", "parentNumber", raw),
            children=tuple(ChildRecord.from_dict(child, normalizer) for child in raw_children),
            notes=_optional_text(fields.get("notes")),
            standard_weight=fields.get("standard_weight"),
        )


@dataclass(frozen=True)
class FlatRow:
    """
    One isotope row of the normalized table.

    isotope_notation and naturally_occurring are derived from the other
    columns by the normalizer; they are stored so the row can be handed
    to a table or chart without further computation.
    """

    isotope_symbol: Optional[str]
    mass_number: int
    isotopic_composition: Optional[float]
    relative_mass: float
    parent_symbol: str
    parent_number: int
    notes: Optional[str]
    standard_weight: Optional[float]
    isotope_notation: str
    naturally_occurring: bool

    # attribute -> column, in table order
    COLUMNS = (
        ("isotope_symbol", "isotopeSymbol"),
        ("mass_number", "massNumber"),
        ("isotopic_composition", "isotopicComposition"),
        ("relative_mass", "relativeMass"),
        ("parent_symbol", "parentSymbol"),
        ("parent_number", "parentNumber"),
        ("notes", "notes"),
        ("standard_weight", "standardWeight"),
        ("isotope_notation", "isotopeNotation"),
        ("naturally_occurring", "naturallyOccurring"),
    )

    @classmethod
    def column_names(cls) -> Tuple[str, ...]:
        return tuple(column for _, column in cls.COLUMNS)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the row with its table column names.

        Returns:
            A JSON-serializable dictionary, keys in column order
        """
        return {column: getattr(self, attribute) for attribute, column in self.COLUMNS}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlatRow":
        """
        Rebuild a FlatRow from its to_dict() form.

        Args:
            data: Dictionary keyed by table column name

        Returns:
            A FlatRow instance
        """
        return cls(**{attribute: data.get(column) for attribute, column in cls.COLUMNS})
