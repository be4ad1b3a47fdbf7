"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration for testing

Sample users come from directory_pager.adapters.memory_source.
"""
