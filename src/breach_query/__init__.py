"""
Breach Query - Chainable Queries over a Breach Disclosure List.

Fetches the public breach list from Firefox Monitor (or Have I Been Pwned)
once, then filters, sorts and reshapes it in memory through a fluent chain.

Main Components:
    - domain: BreachRecord shape, sortable fields and their types
    - config: Configuration models and YAML loader
    - adapters: HTTP and static breach providers
    - validation: Schema validation of fetched records
    - filters: Predicates and type-aware sorting
    - pipeline: Loader and the BreachCollection chain

Example:
    >>> from breach_query import BreachCollection
    >>> names = (
    ...     BreachCollection().load()
    ...     .is_verified()
    ...     .sort("-PwnCount")
    ...     .pluck(["Name"])
    ...     .breaches(5)
    ... )
"""

import logging

from breach_query.adapters.http_provider import TransportError
from breach_query.config.loader import load_config
from breach_query.config.models import BreachQueryConfig
from breach_query.domain.entities import BreachRecord, FieldType, SortField
from breach_query.domain.value_objects import SortDirection, UnknownSortFieldError
from breach_query.pipeline.collection import BreachCollection
from breach_query.validation.schema_validator import ValidationError

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Breach Query.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("breach_query").setLevel(level)


__all__ = [
    "BreachCollection",
    "BreachQueryConfig",
    "BreachRecord",
    "FieldType",
    "SortDirection",
    "SortField",
    "TransportError",
    "UnknownSortFieldError",
    "ValidationError",
    "configure_logging",
    "load_config",
]
