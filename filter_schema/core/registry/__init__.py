"""
Filter schema registry package.
"""

from .registry import BUILTIN_SCALARS, FilterSchemaRegistry

__all__ = [
    "BUILTIN_SCALARS",
    "FilterSchemaRegistry",
]
