"""
Filter Types Package.

GraphQL types shared by every generated order-by input.
"""

from .sort_types import SortOrderEnum

__all__ = [
    "SortOrderEnum",
]
