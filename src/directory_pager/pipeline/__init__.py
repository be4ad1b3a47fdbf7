"""
Pipeline Package - Listing Orchestration.

Components:
    - UserListPipeline: Aggregate -> filter -> sort -> paginate
    - create_pipeline: Builds a pipeline for a configured Cognito user pool

Design Principles:
    - All dependencies injected via constructor
    - No state kept between calls
"""

from directory_pager.pipeline.factory import create_pipeline
from directory_pager.pipeline.list_pipeline import UserListPipeline

__all__ = ["UserListPipeline", "create_pipeline"]
