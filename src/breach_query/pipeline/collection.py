"""
Breach Collection - Chainable In-Memory Query.

The BreachCollection holds the loaded breach list and exposes a fluent
chain of filter, sort and pluck calls. Every chain call replaces the
working set and returns the same collection; breaches() ends the chain
with a detached list.

Example:
    >>> collection = BreachCollection().load()
    >>> top = (
    ...     collection.by_domain("")
    ...     .is_sensitive(False)
    ...     .is_verified()
    ...     .by_data_class(["names", "job-titles"])
    ...     .sort("-PwnCount")
    ...     .pluck(["Name", "PwnCount"])
    ...     .breaches(10)
    ... )

Design Notes:
    - The loaded snapshot is deep-copied and never handed out, so reset()
      always restores exactly what was loaded
    - One fetch per load()/aload(); reset() never re-fetches
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from breach_query.adapters.static_provider import StaticBreachProvider
from breach_query.config.models import BreachQueryConfig
from breach_query.domain.entities import SortField
from breach_query.domain.value_objects import (
    BreachDict,
    DirectionLike,
    Predicate,
    SortDirection,
    SortSpec,
)
from breach_query.filters.predicates import (
    StrOrIterable,
    as_list,
    domain_matches,
    flag_equals,
    has_data_class,
    keep_all,
    name_in,
)
from breach_query.filters.sorting import sort_breaches
from breach_query.pipeline.loader import BreachLoader

logger = logging.getLogger(__name__)


class BreachCollection:
    """Mutable query cursor over a loaded breach list."""

    def __init__(
        self,
        config: Optional[BreachQueryConfig] = None,
        loader: Optional[BreachLoader] = None,
    ) -> None:
        """
        Initialize an empty collection.

        Args:
            config: Query configuration (defaults if omitted)
            loader: Loader to fetch with; built from config if omitted
        """
        self.config = config or BreachQueryConfig()
        self.loader = loader or BreachLoader(self.config)
        self._breaches: List[BreachDict] = []
        self._original: Tuple[BreachDict, ...] = ()
        self._loaded = False

    @classmethod
    def from_records(
        cls,
        records: Sequence[Dict[str, Any]],
        config: Optional[BreachQueryConfig] = None,
    ) -> "BreachCollection":
        """
        Build a loaded collection from raw records without any network call.

        Records go through the same date coercion and validation as a fetch.
        """
        config = config or BreachQueryConfig()
        loader = BreachLoader(config, provider=StaticBreachProvider(records))
        return cls(config, loader=loader).load()

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @property
    def loaded(self) -> bool:
        """True once a load has completed."""
        return self._loaded

    def load(self, endpoint: Optional[str] = None) -> "BreachCollection":
        """
        Fetch breaches and make them the working set.

        Args:
            endpoint: Path relative to the configured server

        Raises:
            TransportError: If the fetch fails
            ValidationError: If schema validation is enabled and fails
        """
        self._store(self.loader.load(endpoint))
        return self

    async def aload(self, endpoint: Optional[str] = None) -> "BreachCollection":
        """Awaitable counterpart of load."""
        self._store(await self.loader.aload(endpoint))
        return self

    def _store(self, records: List[BreachDict]) -> None:
        self._original = tuple(copy.deepcopy(records))
        self._breaches = list(records)
        self._loaded = True

    def reset(self) -> "BreachCollection":
        """Discard all filter, sort and pluck effects."""
        self._breaches = copy.deepcopy(list(self._original))
        logger.debug(f"Reset to {len(self._breaches)} breaches")
        return self

    # -------------------------------------------------------------------------
    # Terminal
    # -------------------------------------------------------------------------

    def breaches(self, limit: Optional[int] = None) -> List[BreachDict]:
        """
        End the chain and return the working set.

        Args:
            limit: Maximum number of breaches; None or 0 returns all

        Returns:
            A new list, detached from the collection
        """
        if limit:
            return self._breaches[: int(limit)]
        return list(self._breaches)

    def __len__(self) -> int:
        return len(self._breaches)

    def __repr__(self) -> str:
        return (
            f"BreachCollection(breaches={len(self._breaches)}, "
            f"original={len(self._original)})"
        )

    # -------------------------------------------------------------------------
    # Filters
    # -------------------------------------------------------------------------

    def filter(self, predicate: Predicate = keep_all) -> "BreachCollection":
        """Keep the breaches for which predicate returns True, in order."""
        before = len(self._breaches)
        self._breaches = [b for b in self._breaches if predicate(b)]
        logger.debug(
            f"filter {getattr(predicate, '__name__', 'predicate')}: "
            f"{before} -> {len(self._breaches)}"
        )
        return self

    def _flag(self, flag: str, expected: bool) -> "BreachCollection":
        return self.filter(flag_equals(flag, expected))

    def is_fabricated(self, expected: bool = True) -> "BreachCollection":
        """Filter on IsFabricated."""
        return self._flag("IsFabricated", expected)

    def is_retired(self, expected: bool = True) -> "BreachCollection":
        """Filter on IsRetired."""
        return self._flag("IsRetired", expected)

    def is_sensitive(self, expected: bool = True) -> "BreachCollection":
        """Filter on IsSensitive."""
        return self._flag("IsSensitive", expected)

    def is_spam_list(self, expected: bool = True) -> "BreachCollection":
        """Filter on IsSpamList."""
        return self._flag("IsSpamList", expected)

    def is_verified(self, expected: bool = True) -> "BreachCollection":
        """Filter on IsVerified."""
        return self._flag("IsVerified", expected)

    def by_name(self, names: StrOrIterable) -> "BreachCollection":
        """Keep breaches whose Name is in names."""
        return self.filter(name_in(names))

    def by_domain(self, domain: Optional[str] = None) -> "BreachCollection":
        """
        Filter by Domain.

        Args:
            domain: Exact domain to keep ("" keeps domain-less breaches).
                    None keeps every breach with a non-empty domain.
        """
        return self.filter(domain_matches(domain))

    def by_data_class(self, data_classes: StrOrIterable) -> "BreachCollection":
        """
        Keep breaches exposing every one of data_classes.

        Data class spelling differs between Monitor ("email-addresses") and
        HIBP ("Email addresses").
        """
        for data_class in as_list(data_classes):
            self.filter(has_data_class(data_class))
        return self

    # -------------------------------------------------------------------------
    # Reshaping
    # -------------------------------------------------------------------------

    def pluck(self, fields: StrOrIterable) -> "BreachCollection":
        """
        Reduce every breach to fields, in the given order.

        Missing fields are set to None. Cannot be undone except by reset().
        """
        names = as_list(fields)
        self._breaches = [{name: b.get(name) for name in names} for b in self._breaches]
        return self

    def sort(
        self,
        key: Union[str, SortField] = SortField.ADDED_DATE,
        direction: DirectionLike = SortDirection.ASC,
    ) -> "BreachCollection":
        """
        Sort by a field using its declared type.

        Args:
            key: Field name; a "-" prefix forces descending order
            direction: 1 / "asc" or -1 / "desc"

        Raises:
            UnknownSortFieldError: If key has no declared type
            ValueError: If direction is not recognised
        """
        spec = SortSpec.from_key(key, direction)
        self._breaches = sort_breaches(self._breaches, spec)
        logger.debug(f"sort {spec.field.value} {spec.direction.name}")
        return self
