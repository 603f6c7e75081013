from typing import Any, Optional


class MalformedRecord(ValueError):
    """
    A record is missing a required field, or a field holds a value
    that does not match any of the accepted annotation formats.

    Raised immediately; the batch being normalized is abandoned.
    """

    def __init__(self, field: str, message: str, record: Optional[Any] = None):
        self.field = field
        self.record = record
        super().__init__(f"{field}: {message}")
