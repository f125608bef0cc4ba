"""
Value Objects for Domain Layer.

Immutable descriptions of how a query should be run (sort order, sort key)
with no identity of their own.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Union

from pydantic import BaseModel

from breach_query.domain.entities import FieldType, SortField


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# A breach as held by the collection, keyed by wire field name
BreachDict = Dict[str, Any]

# Predicate applied by BreachCollection.filter
Predicate = Callable[[BreachDict], bool]

# Accepted spellings for a sort direction
DirectionLike = Union[int, str, "SortDirection"]


class UnknownSortFieldError(ValueError):
    """Raised when sorting by a field with no declared type."""

    def __init__(self, key: str) -> None:
        self.key = key
        supported = ", ".join(f.value for f in SortField)
        super().__init__(f"Cannot sort by {key!r}. Supported: {supported}")


class SortDirection(int, Enum):
    """Sort order multiplier."""

    ASC = 1
    DESC = -1

    @classmethod
    def parse(cls, value: DirectionLike) -> "SortDirection":
        """
        Parse a direction from 1/-1, "asc"/"desc" or their string forms.

        Raises:
            ValueError: If value is not a recognised direction
        """
        if isinstance(value, SortDirection):
            return value

        normalized = str(value).strip().lower()
        if normalized in ("1", "asc"):
            return cls.ASC
        if normalized in ("-1", "desc"):
            return cls.DESC
        raise ValueError(
            f"Invalid sort direction {value!r}; use 1, -1, 'asc' or 'desc'"
        )


class SortSpec(BaseModel):
    """Resolved sort request: which field, which type, which order."""

    field: SortField
    direction: SortDirection = SortDirection.ASC

    model_config = {"frozen": True}

    @property
    def field_type(self) -> FieldType:
        return self.field.field_type

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    @classmethod
    def from_key(
        cls,
        key: Union[str, SortField] = SortField.ADDED_DATE,
        direction: DirectionLike = SortDirection.ASC,
    ) -> "SortSpec":
        """
        Build a SortSpec from a key and direction.

        A leading minus on the key ("-PwnCount") strips the sign and forces
        descending order regardless of direction.

        Raises:
            UnknownSortFieldError: If the key is not a SortField
            ValueError: If direction is not recognised
        """
        resolved_direction = SortDirection.parse(direction)

        if isinstance(key, SortField):
            return cls(field=key, direction=resolved_direction)

        name = key
        if name.startswith("-"):
            name = name[1:]
            resolved_direction = SortDirection.DESC

        try:
            field = SortField(name)
        except ValueError:
            raise UnknownSortFieldError(name) from None

        return cls(field=field, direction=resolved_direction)
