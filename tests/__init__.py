"""
Test Suite for Breach Query.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end query chains
    - fixtures/: Breach list and config fixtures

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest --cov=src/breach_query           # With coverage
"""
