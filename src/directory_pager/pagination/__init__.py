"""
Pagination Package - Page Slicing and Metadata.

    - Paginator / paginate: 1-indexed pages with total item/page counts
"""

from directory_pager.pagination.paginator import Paginator, paginate

__all__ = ["Paginator", "paginate"]
