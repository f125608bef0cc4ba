"""
Type-Aware Breach Sorting.

Each FieldType has a key strategy that turns a field value into something
Python can order:
    - date: epoch seconds of the datetime
    - boolean / number: the numeric value itself (False < True)
    - string: case-insensitive locale collation key (locale.strxfrm),
      with the case-sensitive key as tie-breaker

Sorting is stable. Breaches without a value for the key keep their
relative order and are placed after all breaches that have one.
"""

from __future__ import annotations

import locale
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Sequence, Tuple

from breach_query.domain.entities import FieldType
from breach_query.domain.value_objects import BreachDict, SortSpec

logger = logging.getLogger(__name__)


def _date_key(value: Any) -> float:
    if not isinstance(value, datetime):
        raise TypeError(
            f"Expected datetime for date sort, got {type(value).__name__}; "
            "was the collection loaded with coerce_dates disabled?"
        )
    return value.timestamp()


def _numeric_key(value: Any) -> float:
    return float(value)


def _string_key(value: Any) -> Tuple[str, str]:
    # case-insensitive first; case only breaks ties ("adobe" < "Bell")
    text = str(value)
    return locale.strxfrm(text.casefold()), locale.strxfrm(text)


SORT_KEYS: Dict[FieldType, Callable[[Any], Any]] = {
    FieldType.DATE: _date_key,
    FieldType.BOOLEAN: _numeric_key,
    FieldType.NUMBER: _numeric_key,
    FieldType.STRING: _string_key,
}


def sort_breaches(breaches: Sequence[BreachDict], spec: SortSpec) -> List[BreachDict]:
    """
    Return breaches ordered by spec.

    Args:
        breaches: Records to sort (not modified)
        spec: Resolved field and direction

    Returns:
        New list, stable with respect to equal keys
    """
    name = spec.field.value
    key_fn = SORT_KEYS[spec.field_type]

    present = [b for b in breaches if b.get(name) is not None]
    missing = [b for b in breaches if b.get(name) is None]
    if missing:
        logger.debug(f"{len(missing)} breaches have no {name}; placed last")

    # sorted(reverse=True) keeps equal elements in their original order
    ordered = sorted(present, key=lambda b: key_fn(b[name]), reverse=spec.descending)
    return ordered + missing
