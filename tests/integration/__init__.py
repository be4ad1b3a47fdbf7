"""
Integration Tests - End-to-End Listing Tests.

These tests verify that all components work together correctly.
They use the InMemoryDirectorySource, or a faked aioboto3 session, to
avoid external dependencies while testing the full workflow.

Test Files:
    - test_list_pipeline.py: Full listing workflow
"""
