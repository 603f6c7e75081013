# ==============================================
# FieldNormalizer
# ==============================================
#
# PURPOSE:
#   Resolve the raw keys of an element / isotope record to the
#   canonical attribute names used by ParentRecord and ChildRecord.
#
# WHY THIS CLASS EXISTS:
#   The element dataset does not spell its keys the same way
#   everywhere:
#     - "Atomic Symbol", "atomicSymbol", "symbol"
#     - "Relative Atomic Mass", "relativeAtomicMass", "relativeMass"
#   Every spelling is first reduced to snake_case, then looked up
#   in an alias table. Keys with no alias are ignored by the records.
#
# CLASS: FieldNormalizer
# ----------------------
#   Methods:
#   --------
#   - normalize(name: str) -> str
#       Convert a single raw key to snake_case.
#
#   - canonical(name: str) -> str | None
#       snake_case key -> canonical attribute name, or None.
#
#   - canonicalize(raw: Mapping) -> dict
#       Re-key a whole raw record. The first spelling seen wins
#       when two raw keys resolve to the same attribute.
#
# RULES:
# ------
#   1. camelCase    → snake_case    (massNumber → mass_number)
#   2. PascalCase   → snake_case    (MassNumber → mass_number)
#   3. Spaces       → underscores   (Mass Number → mass_number)
#   4. ALLCAPS      → lowercase     (Z → z)
#   5. Remove special characters, collapse multiple underscores
#
# ==============================================

import re
from typing import Any, Dict, Mapping, Optional


FIELD_ALIASES: Dict[str, tuple] = {
    # parent (element) attributes
    "symbol": ("symbol", "atomic_symbol", "element_symbol"),
    "number": ("number", "atomic_number", "z"),
    "notes": ("notes", "note"),
    "standard_weight": ("standard_weight", "standard_atomic_weight", "atomic_weight"),
    "children": ("children", "isotopes"),
    # child (isotope) attributes
    "isotope_symbol": ("isotope_symbol",),
    "mass_number": ("mass_number", "a"),
    "isotopic_composition": ("isotopic_composition", "composition", "abundance"),
    "relative_mass": ("relative_mass", "relative_atomic_mass", "atomic_mass"),
}


class FieldNormalizer:
    """
    Converts raw record keys to canonical attribute names.
    Caches every raw name it has converted.
    """

    def __init__(self, aliases: Optional[Dict[str, tuple]] = None):
        self._mappings: Dict[str, str] = {}
        self._lookup: Dict[str, str] = {}
        for canonical, spellings in (aliases or FIELD_ALIASES).items():
            for spelling in spellings:
                self._lookup[spelling] = canonical

    def normalize(self, name: str) -> str:
        """
        Convert a raw key to snake_case.

        Args:
            name: Raw key (e.g., "massNumber", "Mass Number", "Z")

        Returns:
            snake_case key (e.g., "mass_number", "mass_number", "z")
        """
        if not name:
            return name

        if name in self._mappings:
            return self._mappings[name]

        normalized = self._camel_to_snake(name)
        self._mappings[name] = normalized
        return normalized

    def canonical(self, name: str) -> Optional[str]:
        """Return the canonical attribute for a raw key, or None if it has no alias."""
        return self._lookup.get(self.normalize(name))

    def canonicalize(self, raw: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Re-key a raw record by canonical attribute name.

        Args:
            raw: One element or isotope record as decoded from JSON

        Returns:
            Dictionary holding only the keys that resolve to an attribute
        """
        canonical_record: Dict[str, Any] = {}
        for key, value in raw.items():
            if not isinstance(key, str):
                continue
            attribute = self.canonical(key)
            if attribute is not None and attribute not in canonical_record:
                canonical_record[attribute] = value
        return canonical_record

    def get_mappings(self) -> Dict[str, str]:
        return self._mappings.copy()

    def _camel_to_snake(self, name: str) -> str:
        # Remove any non-alphanumeric characters except underscores
        name = re.sub(r'[^a-zA-Z0-9_]', '_', name)

        # "XMLParser" -> "XML_Parser"
        name = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', name)

        # "massNumber" -> "mass_Number"
        name = re.sub(r'([a-z\d])([A-Z])', r'\1_\2', name)

        name = name.lower()
        name = re.sub(r'_+', '_', name)
        return name.strip('_')
