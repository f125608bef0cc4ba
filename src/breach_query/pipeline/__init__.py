"""
Pipeline Package - Loading and Chaining.

Components:
    - BreachLoader: Provider fetch, date coercion, schema validation
    - BreachCollection: Fluent filter / sort / pluck chain over the result

The pipeline is responsible for:
    - Performing exactly one fetch per load
    - Keeping a pristine snapshot for reset()
    - Applying chain calls in the order they are made
"""

from breach_query.pipeline.collection import BreachCollection
from breach_query.pipeline.loader import BreachLoader, coerce_dates

__all__ = ["BreachCollection", "BreachLoader", "coerce_dates"]
