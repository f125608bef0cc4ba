"""
Validation Package - Breach Schema Validation.

    - SchemaValidator: Validate fetched records against BreachRecord
    - ValidationError: First nonconforming field, with path and values
"""

from breach_query.validation.schema_validator import SchemaValidator, ValidationError

__all__ = ["SchemaValidator", "ValidationError"]
