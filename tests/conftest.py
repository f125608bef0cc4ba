"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from breach_query.adapters.static_provider import StaticBreachProvider
from breach_query.config.models import BreachQueryConfig, LoaderConfig
from breach_query.pipeline.collection import BreachCollection
from breach_query.pipeline.loader import BreachLoader

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding JSON and YAML fixtures."""
    return FIXTURES_DIR


@pytest.fixture
def breaches_path() -> Path:
    """Path to the five-breach wire fixture."""
    return FIXTURES_DIR / "breaches.json"


@pytest.fixture
def raw_breaches(breaches_path: Path) -> List[Dict[str, Any]]:
    """Breaches in wire format (dates as strings)."""
    with open(breaches_path, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def default_config() -> BreachQueryConfig:
    """Default configuration (validation on)."""
    return BreachQueryConfig()


@pytest.fixture
def lenient_config() -> BreachQueryConfig:
    """Configuration with schema validation off."""
    return BreachQueryConfig(loader=LoaderConfig(validate_schema=False))


@pytest.fixture
def static_provider(raw_breaches: List[Dict[str, Any]]) -> StaticBreachProvider:
    """Provider serving the fixture breaches."""
    return StaticBreachProvider(copy.deepcopy(raw_breaches))


@pytest.fixture
def collection(
    default_config: BreachQueryConfig,
    static_provider: StaticBreachProvider,
) -> BreachCollection:
    """Collection loaded from the fixture breaches."""
    loader = BreachLoader(default_config, provider=static_provider)
    return BreachCollection(default_config, loader=loader).load()
