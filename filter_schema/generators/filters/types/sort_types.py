"""
Sort direction enum exposed to GraphQL.
"""

from __future__ import annotations

import graphene

from ..descriptors import SORT_ORDER_TYPE_NAME, SortOrder


class SortOrderEnum(graphene.Enum):
    """Sort direction for a single order-by field."""

    class Meta:
        name = SORT_ORDER_TYPE_NAME

    ASCENDING = SortOrder.ASCENDING.value
    DESCENDING = SortOrder.DESCENDING.value


__all__ = ["SortOrderEnum"]
