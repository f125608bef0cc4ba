"""
Static Breach Provider.

Serves a fixed breach list from memory or a JSON file. Used for tests,
offline runs and the CLI's --file option.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union


class StaticBreachProvider:
    """In-memory provider implementing both provider protocols."""

    def __init__(self, breaches: Sequence[Dict[str, Any]]) -> None:
        """
        Initialize with raw breach records.

        Args:
            breaches: Records in wire format (dates as strings)
        """
        self._breaches = [dict(b) for b in breaches]
        self.fetch_count = 0
        self.endpoints: List[Optional[str]] = []

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "StaticBreachProvider":
        """Load records from a JSON file holding an array of breaches."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"{path}: expected a JSON array of breaches")
        return cls(data)

    def fetch_breaches(self, endpoint: Optional[str] = None) -> List[Dict[str, Any]]:
        """Return a fresh copy of the stored records."""
        self.fetch_count += 1
        self.endpoints.append(endpoint)
        return copy.deepcopy(self._breaches)

    async def afetch_breaches(
        self, endpoint: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        return self.fetch_breaches(endpoint)
