"""
Breach Predicates.

Factories for the predicates behind the named collection filters. Every
named filter on BreachCollection is one (or several) of these passed to
BreachCollection.filter.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, List, Optional, Union

from breach_query.domain.entities import BOOLEAN_FLAGS
from breach_query.domain.value_objects import BreachDict, Predicate

StrOrIterable = Union[str, Iterable[str]]


def as_list(values: StrOrIterable) -> List[str]:
    """Treat a lone string as a one-item list."""
    if isinstance(values, str):
        return [values]
    return list(values)


def keep_all(breach: BreachDict) -> bool:
    return True


def flag_equals(flag: str, expected: bool = True) -> Predicate:
    """
    Match breaches whose boolean flag equals expected.

    Raises:
        ValueError: If flag is not one of the known Is* fields
    """
    if flag not in BOOLEAN_FLAGS:
        raise ValueError(f"Unknown flag {flag!r}; expected one of {BOOLEAN_FLAGS}")
    wanted = bool(expected)

    def predicate(breach: BreachDict) -> bool:
        return breach.get(flag) == wanted

    return predicate


def name_in(names: StrOrIterable) -> Predicate:
    """Match breaches whose Name is one of names."""
    allowed: FrozenSet[str] = frozenset(as_list(names))

    def predicate(breach: BreachDict) -> bool:
        return breach.get("Name") in allowed

    return predicate


def domain_matches(domain: Optional[str] = None) -> Predicate:
    """
    Match on Domain.

    A string (including "") requires an exact match. None keeps every
    breach that has a non-empty Domain.
    """
    if domain is None:
        return lambda breach: bool(breach.get("Domain"))
    return lambda breach: breach.get("Domain") == domain


def has_data_class(data_class: str) -> Predicate:
    """Match breaches whose DataClasses contains data_class."""

    def predicate(breach: BreachDict) -> bool:
        return data_class in (breach.get("DataClasses") or ())

    return predicate
