import math
import re
from typing import Any, Optional

from .errors import MalformedRecord


class ValueParser:
    """
    Parses the annotated numeric strings found in element and isotope tables.

    Accepted shapes:
        "1.00794"              plain literal
        "1.00794(7)"           trailing uncertainty, discarded
        "3.0160293201(25)#"    trailing estimate marker, discarded
        "[1.00784]"            enclosing brackets, discarded
        "[1.00784,1.00811]"    closed range, standard weights only
    """

    NUMBER = r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?'

    ANNOTATED_PATTERN = re.compile(
        r'^(' + NUMBER + r')\s*(?:\(\s*\d+\s*\))?\s*#?$'
    )

    INTEGER_PATTERN = re.compile(r'^[+-]?\d+$')

    RANGE_SEPARATOR = ","

    @classmethod
    def parse_annotated(cls, value: Any, field: str, record: Any = None) -> Optional[float]:
        """
        Parse a single annotated number. Ranges are rejected.

        Args:
            value: Raw value (None, number, or annotated string)
            field: Column name, used in error messages
            record: Owning record, attached to any error raised

        Returns:
            The numeric literal, or None when the value is absent
        """
        text = cls._prepare(value, field, record)
        if text is None:
            return None
        if isinstance(text, float):
            return text

        if cls.RANGE_SEPARATOR in text:
            raise MalformedRecord(field, f"range {value!r} not allowed here", record)
        return cls._parse_literal(text, value, field, record)

    @classmethod
    def parse_standard_weight(cls, value: Any, field: str = "standardWeight", record: Any = None) -> Optional[float]:
        """
        Parse a standard atomic weight, which may be a closed range.

        A two-bound range parses to the mean of its bounds.
        """
        text = cls._prepare(value, field, record)
        if text is None:
            return None
        if isinstance(text, float):
            return text

        if cls.RANGE_SEPARATOR not in text:
            return cls._parse_literal(text, value, field, record)

        bounds = [part.strip() for part in text.split(cls.RANGE_SEPARATOR)]
        if len(bounds) != 2:
            raise MalformedRecord(
                field, f"expected two bounds in {value!r}, found {len(bounds)}", record
            )
        low, high = (cls._parse_literal(bound, value, field, record) for bound in bounds)
        return (low + high) / 2

    @classmethod
    def parse_mass_number(cls, value: Any, field: str = "massNumber", record: Any = None) -> int:
        if isinstance(value, bool):
            raise MalformedRecord(field, f"expected an integer, got {value!r}", record)

        if isinstance(value, int):
            return value

        if isinstance(value, float) and value.is_integer():
            return int(value)

        if isinstance(value, str) and cls.INTEGER_PATTERN.match(value.strip()):
            return int(value.strip())

        raise MalformedRecord(field, f"expected an integer, got {value!r}", record)

    @classmethod
    def _prepare(cls, value: Any, field: str, record: Any):
        """Return None for absent values, a float for numbers, else the unwrapped string."""
        if value is None:
            return None

        if isinstance(value, bool):
            raise MalformedRecord(field, f"expected a number, got {value!r}", record)

        if isinstance(value, (int, float)):
            if not math.isfinite(value):
                raise MalformedRecord(field, f"expected a finite number, got {value!r}", record)
            return float(value)

        if not isinstance(value, str):
            raise MalformedRecord(field, f"expected a number, got {type(value).__name__}", record)

        text = value.strip()
        if not text:
            return None

        if text.startswith("[") and text.endswith("]"):
            text = text[1:-1].strip()
            if not text:
                raise MalformedRecord(field, f"empty brackets in {value!r}", record)

        return text

    @classmethod
    def _parse_literal(cls, text: str, original: Any, field: str, record: Any) -> float:
        match = cls.ANNOTATED_PATTERN.match(text)
        if not match:
            raise MalformedRecord(field, f"unrecognized number format {original!r}", record)
        return float(match.group(1))
