"""
Domain Layer - Breach Records and Query Value Objects.

Entities:
    - BreachRecord: Declared shape of a breach returned by the API
    - SortField / FieldType: Closed field-to-type table used for sorting

Value Objects:
    - SortDirection: Ascending / descending multiplier
    - SortSpec: Resolved sort key and direction
"""

from breach_query.domain.entities import (
    BOOLEAN_FLAGS,
    DATE_FIELDS,
    FIELD_TYPES,
    BreachRecord,
    FieldType,
    SortField,
)
from breach_query.domain.value_objects import (
    BreachDict,
    Predicate,
    SortDirection,
    SortSpec,
    UnknownSortFieldError,
)

__all__ = [
    "BOOLEAN_FLAGS",
    "DATE_FIELDS",
    "FIELD_TYPES",
    "BreachRecord",
    "FieldType",
    "SortField",
    "BreachDict",
    "Predicate",
    "SortDirection",
    "SortSpec",
    "UnknownSortFieldError",
]
