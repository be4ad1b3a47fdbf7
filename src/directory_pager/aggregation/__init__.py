"""
Aggregation Package - Full Directory Drain.

    - DirectoryAggregator: Walks continuation cursors until end of data
"""

from directory_pager.aggregation.aggregator import DirectoryAggregator

__all__ = ["DirectoryAggregator"]
