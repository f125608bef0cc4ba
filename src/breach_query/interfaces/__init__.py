"""
Interfaces Package - Abstract Protocols.

Protocols:
    - BreachProvider: Synchronous raw breach source
    - AsyncBreachProvider: Awaitable raw breach source
"""

from breach_query.interfaces.breach_provider import AsyncBreachProvider, BreachProvider

__all__ = ["AsyncBreachProvider", "BreachProvider"]
