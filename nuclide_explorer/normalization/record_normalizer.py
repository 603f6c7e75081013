from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

import pandas as pd

from .errors import MalformedRecord
from .field_normalizer import FieldNormalizer
from .records import ChildRecord, FlatRow, ParentRecord
from .value_parser import ValueParser


class RecordNormalizer:
    """
    Flattens elements and their isotopes into one row per isotope.

    Rows come out in input order: elements in sequence order, and
    isotopes in the order they are listed under their element.
    A malformed record aborts the whole batch.
    """

    def __init__(self, field_normalizer: Optional[FieldNormalizer] = None):
        self.field_normalizer = field_normalizer or FieldNormalizer()

    def normalize(self, parents: Sequence[Union[ParentRecord, Mapping[str, Any]]]) -> List[FlatRow]:
        rows: List[FlatRow] = []
        for parent in parents:
            if not isinstance(parent, ParentRecord):
                parent = ParentRecord.from_dict(parent, self.field_normalizer)
            rows.extend(self.normalize_parent(parent))
        return rows

    def normalize_raw(self, raw_elements: Iterable[Mapping[str, Any]]) -> List[FlatRow]:
        """Parse raw element mappings, then normalize them."""
        parents = [ParentRecord.from_dict(raw, self.field_normalizer) for raw in raw_elements]
        return self.normalize(parents)

    def normalize_parent(self, parent: ParentRecord) -> List[FlatRow]:
        parent_number = ValueParser.parse_mass_number(parent.number, "parentNumber", parent)
        standard_weight = self._standard_weight(parent)
        return [
            self._build_row(parent, parent_number, standard_weight, child)
            for child in parent.children
        ]

    @staticmethod
    def to_frame(rows: Sequence[FlatRow]) -> pd.DataFrame:
        """
        Build the table handed to charts and exports.

        Args:
            rows: Normalized rows

        Returns:
            DataFrame with one row per FlatRow and the FlatRow columns in order
        """
        return pd.DataFrame(
            [row.to_dict() for row in rows],
            columns=list(FlatRow.column_names()),
        )

    def _build_row(
        self,
        parent: ParentRecord,
        parent_number: int,
        standard_weight: Optional[float],
        child: ChildRecord,
    ) -> FlatRow:
        mass_number = self._mass_number(child)
        isotopic_composition = self._isotopic_composition(child)
        return FlatRow(
            isotope_symbol=child.isotope_symbol,
            mass_number=mass_number,
            isotopic_composition=isotopic_composition,
            relative_mass=self._relative_mass(child),
            parent_symbol=parent.symbol,
            parent_number=parent_number,
            notes=parent.notes,
            standard_weight=standard_weight,
            isotope_notation=self._isotope_notation(parent, mass_number),
            naturally_occurring=self._naturally_occurring(isotopic_composition),
        )

    # ======================================
    # Column builders
    # ======================================
    @staticmethod
    def _mass_number(child: ChildRecord) -> int:
        if child.mass_number is None:
            raise MalformedRecord("massNumber", "required field is missing", child)
        return ValueParser.parse_mass_number(child.mass_number, "massNumber", child)

    @staticmethod
    def _isotopic_composition(child: ChildRecord) -> Optional[float]:
        return ValueParser.parse_annotated(child.isotopic_composition, "isotopicComposition", child)

    @staticmethod
    def _relative_mass(child: ChildRecord) -> float:
        relative_mass = ValueParser.parse_annotated(child.relative_mass, "relativeMass", child)
        if relative_mass is None:
            raise MalformedRecord("relativeMass", "required field is missing", child)
        return relative_mass

    @staticmethod
    def _standard_weight(parent: ParentRecord) -> Optional[float]:
        return ValueParser.parse_standard_weight(parent.standard_weight, "standardWeight", parent)

    @staticmethod
    def _isotope_notation(parent: ParentRecord, mass_number: int) -> str:
        return f"{parent.symbol}-{mass_number}"

    @staticmethod
    def _naturally_occurring(isotopic_composition: Optional[float]) -> bool:
        return isotopic_composition is not None
