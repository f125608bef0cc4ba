"""
Breach Provider Protocol.

Defines the abstract interface for data access. Any source of raw breach
records (HTTP API, static fixture) implements one of these protocols to be
used by the loader.

The provider is responsible for:
    - Performing exactly one fetch per call
    - Returning the decoded JSON array unmodified

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Type coercion and validation happen in the loader, not here
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class BreachProvider(Protocol):
    """Synchronous source of raw breach records."""

    def fetch_breaches(self, endpoint: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Fetch the raw breach list.

        Args:
            endpoint: Path relative to the provider's server, or None for
                      the configured default

        Returns:
            Decoded JSON array of breach objects
        """
        ...


@runtime_checkable
class AsyncBreachProvider(Protocol):
    """Asynchronous source of raw breach records."""

    async def afetch_breaches(
        self, endpoint: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Awaitable counterpart of BreachProvider.fetch_breaches."""
        ...
