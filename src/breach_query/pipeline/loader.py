"""
Breach Loader - Fetch, Coerce, Validate.

Turns one provider fetch into records ready for a BreachCollection:
    1. Fetch raw records (exactly one provider call)
    2. Parse AddedDate / BreachDate / ModifiedDate into datetime
    3. Optionally validate against BreachRecord (fail fast)
"""

from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from breach_query.adapters.http_provider import (
    AsyncHttpBreachProvider,
    HttpBreachProvider,
)
from breach_query.config.models import BreachQueryConfig
from breach_query.domain.entities import DATE_FIELDS
from breach_query.interfaces.breach_provider import (
    AsyncBreachProvider,
    BreachProvider,
)
from breach_query.validation.schema_validator import SchemaValidator

logger = logging.getLogger(__name__)

_DATETIME = TypeAdapter(datetime)


def coerce_dates(records: Sequence[Any]) -> List[Any]:
    """
    Convert wire date strings to datetime on copies of the records.

    Values that do not parse are left as they are; the schema validator
    reports them when validation is enabled.
    """
    coerced: List[Any] = []
    for record in records:
        if not isinstance(record, dict):
            coerced.append(record)
            continue

        converted = dict(record)
        for field in DATE_FIELDS:
            value = converted.get(field)
            if not isinstance(value, str):
                continue
            try:
                converted[field] = _DATETIME.validate_python(value)
            except PydanticValidationError:
                logger.warning(
                    f"Could not parse {field}={value!r} on breach {record.get('Name')!r}"
                )
        coerced.append(converted)
    return coerced


class BreachLoader:
    """Loads breach records through a provider."""

    def __init__(
        self,
        config: Optional[BreachQueryConfig] = None,
        provider: Optional[BreachProvider] = None,
        async_provider: Optional[AsyncBreachProvider] = None,
        validator: Optional[SchemaValidator] = None,
    ) -> None:
        """
        Initialize loader with its collaborators.

        Args:
            config: Query configuration (defaults if omitted)
            provider: Sync provider; defaults to HttpBreachProvider
            async_provider: Async provider; defaults to AsyncHttpBreachProvider
            validator: Schema validator used when validation is enabled
        """
        self.config = config or BreachQueryConfig()
        self.provider = provider or HttpBreachProvider(self.config.http)
        self.async_provider = async_provider or AsyncHttpBreachProvider(self.config.http)
        self.validator = validator or SchemaValidator()

    def load(self, endpoint: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Fetch and prepare breaches.

        Raises:
            TransportError: If the fetch fails
            ValidationError: If validation is enabled and a record is invalid
        """
        start_time = time.perf_counter()
        raw = self.provider.fetch_breaches(endpoint)
        records = self.prepare(raw)
        logger.info(
            f"Loaded {len(records)} breaches in {time.perf_counter() - start_time:.3f}s"
        )
        return records

    async def aload(self, endpoint: Optional[str] = None) -> List[Dict[str, Any]]:
        """Awaitable counterpart of load."""
        start_time = time.perf_counter()
        raw = await self.async_provider.afetch_breaches(endpoint)
        records = self.prepare(raw)
        logger.info(
            f"Loaded {len(records)} breaches in {time.perf_counter() - start_time:.3f}s"
        )
        return records

    def prepare(self, raw: Sequence[Any]) -> List[Dict[str, Any]]:
        """Apply date coercion and schema validation per config."""
        records = list(raw)
        if self.config.loader.coerce_dates:
            records = coerce_dates(records)
        if self.config.loader.validate_schema:
            records = self.validator.validate(records)
        return records
