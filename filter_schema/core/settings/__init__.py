"""
Settings package for filter schema generation.
"""

from .filter_schema_settings import FilterSchemaSettings

__all__ = [
    "FilterSchemaSettings",
]
