"""
Integration Tests - Full query chains from provider to result.
"""
