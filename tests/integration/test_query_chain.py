"""
Integration Tests for the breach query chain.

Tests cover:
    - Load over (mocked) HTTP, validate, then chain filters, sort and pluck
    - Reset after a full chain
    - Filter invariants across arbitrary chains
"""

from __future__ import annotations

import asyncio
import itertools
from typing import Any, Callable, Dict, List, Tuple

import httpx
import pytest

from breach_query.adapters.http_provider import (
    AsyncHttpBreachProvider,
    HttpBreachProvider,
    TransportError,
)
from breach_query.config.models import BreachQueryConfig
from breach_query.pipeline.collection import BreachCollection
from breach_query.pipeline.loader import BreachLoader
from breach_query.validation.schema_validator import ValidationError


@pytest.fixture
def http_collection(
    raw_breaches: List[Dict[str, Any]],
    default_config: BreachQueryConfig,
) -> BreachCollection:
    """Collection whose loader talks to a MockTransport serving the fixture."""
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=raw_breaches))
    loader = BreachLoader(
        default_config,
        provider=HttpBreachProvider(default_config.http, transport=transport),
        async_provider=AsyncHttpBreachProvider(default_config.http, transport=transport),
    )
    return BreachCollection(default_config, loader=loader)


class TestQueryChain:
    """End-to-end chains over the five-breach fixture."""

    def test_documented_scenario(self, http_collection: BreachCollection) -> None:
        """
        SCENARIO: Load, then domain "", not sensitive, verified, names AND
                  job-titles, sort by PwnCount descending, pluck Name/PwnCount
        EXPECTED: Exactly MasterDeeds then Estonia
        """
        # Act
        result = (
            http_collection.load()
            .by_domain("")
            .is_sensitive(False)
            .is_verified()
            .by_data_class(["names", "job-titles"])
            .sort("-PwnCount")
            .pluck(["Name", "PwnCount"])
            .breaches()
        )

        # Assert
        assert result == [
            {"Name": "MasterDeeds", "PwnCount": 2257930},
            {"Name": "Estonia", "PwnCount": 655161},
        ]

    def test_name_filter_scenario(self, http_collection: BreachCollection) -> None:
        """
        SCENARIO: Name filter followed by the same chain, plucking only Name
        EXPECTED: WienerBuchereien dropped by the domain filter
        """
        result = (
            http_collection.load()
            .by_name(["MasterDeeds", "Estonia", "WienerBuchereien"])
            .by_domain("")
            .is_sensitive(False)
            .is_verified()
            .by_data_class(["names", "job-titles"])
            .sort("-PwnCount")
            .pluck(["Name"])
            .breaches()
        )

        assert result == [{"Name": "MasterDeeds"}, {"Name": "Estonia"}]

    def test_async_load_scenario(self, http_collection: BreachCollection) -> None:
        """
        SCENARIO: Same chain after an awaited load
        EXPECTED: Same result as the sync path
        """
        collection = asyncio.run(http_collection.aload())

        result = (
            collection.by_domain("")
            .is_sensitive(False)
            .is_verified()
            .by_data_class(["names", "job-titles"])
            .sort("PwnCount", "desc")
            .pluck(["Name"])
            .breaches(1)
        )

        assert result == [{"Name": "MasterDeeds"}]

    def test_reset_after_chain(self, http_collection: BreachCollection) -> None:
        """
        SCENARIO: Full chain then reset
        EXPECTED: Loaded data back, deep-equal to a fresh load
        """
        # Arrange
        http_collection.load()
        loaded = http_collection.breaches()

        # Act
        http_collection.is_verified().sort("-AddedDate").pluck(["Name"])
        restored = http_collection.reset().breaches()

        # Assert
        assert restored == loaded
        assert len(restored) == 5

    def test_transport_failure_propagates(self, default_config: BreachQueryConfig) -> None:
        """
        SCENARIO: Server error on load
        EXPECTED: TransportError, collection stays unloaded
        """
        transport = httpx.MockTransport(lambda request: httpx.Response(500))
        loader = BreachLoader(
            default_config,
            provider=HttpBreachProvider(default_config.http, transport=transport),
        )
        collection = BreachCollection(default_config, loader=loader)

        with pytest.raises(TransportError):
            collection.load()
        assert not collection.loaded

    def test_validation_failure_leaves_no_partial_result(
        self,
        raw_breaches: List[Dict[str, Any]],
        default_config: BreachQueryConfig,
    ) -> None:
        """
        SCENARIO: Last record malformed
        EXPECTED: ValidationError, working set stays empty
        """
        broken = [dict(b) for b in raw_breaches]
        broken[-1]["IsVerified"] = "perhaps"
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=broken))
        loader = BreachLoader(
            default_config,
            provider=HttpBreachProvider(default_config.http, transport=transport),
        )
        collection = BreachCollection(default_config, loader=loader)

        with pytest.raises(ValidationError) as exc_info:
            collection.load()
        assert exc_info.value.field == "[4].IsVerified"
        assert len(collection) == 0


FILTERS: List[Tuple[str, Callable, Callable]] = [
    ("verified", lambda c: c.is_verified(), lambda b: b["IsVerified"] is True),
    ("not_sensitive", lambda c: c.is_sensitive(False), lambda b: b["IsSensitive"] is False),
    ("empty_domain", lambda c: c.by_domain(""), lambda b: b["Domain"] == ""),
    ("any_domain", lambda c: c.by_domain(), lambda b: b["Domain"] != ""),
    ("names", lambda c: c.by_data_class("names"), lambda b: "names" in b["DataClasses"]),
    ("not_retired", lambda c: c.is_retired(False), lambda b: b["IsRetired"] is False),
]


@pytest.mark.parametrize(
    "chain",
    list(itertools.permutations(FILTERS, 3)),
    ids=lambda chain: "-".join(name for name, _, _ in chain),
)
def test_filter_chains_satisfy_every_predicate(
    collection: BreachCollection,
    chain: Tuple[Any, ...],
) -> None:
    """
    SCENARIO: Any ordered chain of three filters
    EXPECTED: Output no longer than input, every breach passes every filter
    """
    before = len(collection)

    for _, apply, _ in chain:
        apply(collection)
    result = collection.breaches()

    assert len(result) <= before
    for _, _, check in chain:
        assert all(check(b) for b in result)
