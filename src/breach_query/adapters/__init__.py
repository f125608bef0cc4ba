"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the provider protocols defined in the
interfaces package.

Providers:
    - HttpBreachProvider: httpx.Client GET against the breach API
    - AsyncHttpBreachProvider: httpx.AsyncClient counterpart
    - StaticBreachProvider: Fixed records from memory or a JSON file

Errors:
    - TransportError: Network, status or body decoding failure
"""

from breach_query.adapters.http_provider import (
    AsyncHttpBreachProvider,
    HttpBreachProvider,
    TransportError,
)
from breach_query.adapters.static_provider import StaticBreachProvider

__all__ = [
    "AsyncHttpBreachProvider",
    "HttpBreachProvider",
    "TransportError",
    "StaticBreachProvider",
]
