"""
Filters Package - Predicates and Ordering.

Predicates:
    - flag_equals: Is* boolean flag filters
    - name_in: Breach name membership
    - domain_matches: Exact domain, or any non-empty domain
    - has_data_class: Data class containment

Ordering:
    - sort_breaches: Stable, type-aware sort driven by SortSpec
    - SORT_KEYS: FieldType -> key strategy

Design Principles:
    - Predicates are plain callables, composable via BreachCollection.filter
    - No state; every call returns a new list or a new predicate
"""

from breach_query.filters.predicates import (
    as_list,
    domain_matches,
    flag_equals,
    has_data_class,
    keep_all,
    name_in,
)
from breach_query.filters.sorting import SORT_KEYS, sort_breaches

__all__ = [
    "as_list",
    "domain_matches",
    "flag_equals",
    "has_data_class",
    "keep_all",
    "name_in",
    "SORT_KEYS",
    "sort_breaches",
]
