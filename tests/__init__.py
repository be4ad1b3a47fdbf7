"""
Test Suite for Directory Pager.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end listing tests
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest -m integration                   # Integration tests only
    pytest --cov=src/directory_pager        # With coverage
"""
