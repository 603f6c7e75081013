# ==============================================
# ElementSource
# ==============================================
#
# PURPOSE:
#   Obtain the raw element -> isotope dataset as a list of
#   JSON objects, either over HTTP or from a local JSON file.
#
# PAYLOAD SHAPES ACCEPTED:
# ------------------------
#   [ {element}, {element}, ... ]
#   { "elements": [ ... ] }
#   { "data": [ ... ] }
#
# CLASS: ElementSource
# --------------------
#   - fetch() -> list[dict]       GET the configured URL, decode JSON
#   - load(path) -> list[dict]    Read a local JSON file
#
#   No retries: a failed request raises DataSourceError.
#
# ==============================================

import json
from pathlib import Path
from typing import Any, List, Optional, Union

import requests

from nuclide_explorer.config import SourceConfig


class DataSourceError(RuntimeError):
    """The element dataset could not be fetched or decoded."""


class ElementSource:
    """Fetches the nested element dataset."""

    WRAPPER_KEYS = ("elements", "data")

    def __init__(self, url: Optional[str] = None, timeout: float = 30.0):
        self.url = url
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: SourceConfig) -> "ElementSource":
        return cls(url=config.elements_url, timeout=config.request_timeout)

    def fetch(self) -> List[dict]:
        """
        Download the element dataset.

        Returns:
            List of raw element records

        Raises:
            DataSourceError: on any request, HTTP status or decode failure
        """
        if not self.url:
            raise DataSourceError("No element dataset URL configured")

        print(f"⬇ Fetching element dataset from {self.url}")
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as e:
            print(f"⚠ Failed to fetch element dataset: {e}")
            raise DataSourceError(f"Failed to fetch {self.url}: {e}") from e
        except ValueError as e:
            raise DataSourceError(f"Response from {self.url} is not valid JSON: {e}") from e

        elements = self._unwrap(payload, self.url)
        print(f"✓ Fetched {len(elements)} elements")
        return elements

    def load(self, path: Union[str, Path]) -> List[dict]:
        """
        Read the element dataset from a local JSON file.

        Args:
            path: JSON file in one of the accepted payload shapes

        Returns:
            List of raw element records
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DataSourceError(f"{path} is not valid JSON: {e}") from e

        elements = self._unwrap(payload, str(path))
        print(f"✓ Loaded {len(elements)} elements from {path}")
        return elements

    @classmethod
    def _unwrap(cls, payload: Any, origin: str) -> List[dict]:
        if isinstance(payload, dict):
            for key in cls.WRAPPER_KEYS:
                if isinstance(payload.get(key), list):
                    payload = payload[key]
                    break

        if not isinstance(payload, list):
            raise DataSourceError(
                f"Expected a list of elements from {origin}, got {type(payload).__name__}"
            )
        return payload
