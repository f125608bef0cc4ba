"""
Test Fixtures - Shared Test Data and Configurations.

    - breaches.json: Five breaches in wire format (mixed domains and flags)
    - sample_config.yaml: Sample configuration for testing
"""
