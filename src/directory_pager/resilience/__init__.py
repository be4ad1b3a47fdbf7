"""
Resilience Package - Retry for Directory Sources.

Transport resilience belongs to the directory source, not to the listing
pipeline: the pipeline propagates whatever the source finally raises.
"""

from directory_pager.resilience.error_handler import (
    ErrorHandler,
    RetryConfig,
    RetryExhausted,
)

__all__ = ["ErrorHandler", "RetryConfig", "RetryExhausted"]
