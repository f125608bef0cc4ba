"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_predicates.py: Predicate factories
    - test_sorting.py: SortSpec resolution and type-aware ordering
    - test_breach_collection.py: Chain filters, pluck, reset, terminal
    - test_schema_validator.py: Record shape validation
    - test_loader.py: Date coercion and load flow
    - test_http_provider.py: httpx providers against MockTransport
    - test_config_loader.py: Configuration loading/validation
    - test_cli.py: Command line driver
"""
