"""
Schema Validator - Validate Fetched Breach Records.

Checks every record against BreachRecord before it enters a collection:
    - All declared fields present
    - Primitive types match (str, int, bool, datetime)
    - Domain is a hostname or empty
    - DataClasses is a list of strings

Design Notes:
    - Fail fast: the first violation aborts the load
    - Returns type-cast copies in the input key order; the input is not
      modified
    - Extra fields pass through untouched
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from breach_query.domain.entities import BreachRecord

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when a breach record does not match the declared shape."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        record_index: Optional[int] = None,
        expected: Optional[str] = None,
        actual: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.record_index = record_index
        self.expected = expected
        self.actual = actual


def _format_loc(loc: Tuple[Union[int, str], ...]) -> str:
    """Render a pydantic location as e.g. "[3].DataClasses[0]"."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else part
    return path


def _in_input_order(raw: Dict[str, Any], dumped: Dict[str, Any]) -> Dict[str, Any]:
    """Lay out validated values in the key order the server sent them."""
    ordered = {key: dumped[key] for key in raw if key in dumped}
    ordered.update((key, value) for key, value in dumped.items() if key not in ordered)
    return ordered


class SchemaValidator:
    """Validates a list of raw breach dicts against BreachRecord."""

    _adapter: TypeAdapter = TypeAdapter(List[BreachRecord])

    def validate(self, data: Sequence[Any]) -> List[Dict[str, Any]]:
        """
        Validate and cast a breach list.

        Args:
            data: Decoded JSON array

        Returns:
            Validated records as plain dicts (dates as datetime)

        Raises:
            ValidationError: On the first nonconforming field
        """
        try:
            records = self._adapter.validate_python(data)
        except PydanticValidationError as e:
            raise self._first_error(e, data) from e

        logger.debug(f"Schema validation passed for {len(records)} breaches")
        return [
            _in_input_order(raw, record.model_dump())
            for raw, record in zip(data, records)
        ]

    def _first_error(
        self, error: PydanticValidationError, data: Sequence[Any]
    ) -> ValidationError:
        first = error.errors()[0]
        loc = tuple(first["loc"])
        record_index = loc[0] if loc and isinstance(loc[0], int) else None
        field = _format_loc(loc) or "<root>"

        name = None
        if record_index is not None:
            record = data[record_index]
            if isinstance(record, dict):
                name = record.get("Name")

        where = f"breach {name!r}" if name else "breach list"
        message = (
            f"Invalid {where} at {field}: {first['msg']} "
            f"(got {first.get('input')!r})"
        )
        logger.warning(
            f"Schema validation failed ({error.error_count()} issues); first: {message}"
        )
        return ValidationError(
            message,
            field=field,
            record_index=record_index,
            expected=first["msg"],
            actual=first.get("input"),
        )
