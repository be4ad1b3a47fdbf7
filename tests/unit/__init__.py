"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with mocked dependencies.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_aggregator.py: Draining a directory source
    - test_record_filter.py: Filter semantics
    - test_record_sorter.py: Comparator and stable sort
    - test_paginator.py: Page slicing and totals
    - test_cognito_source.py: ListUsers adapter with a fake session
    - test_config_loader.py: Configuration loading/validation
"""
