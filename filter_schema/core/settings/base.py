"""
Internal utility functions for settings loading.
"""

from typing import Any

from django.conf import settings as django_settings

SETTINGS_NAME = "FILTER_SCHEMA"
KNOWN_SECTION_KEYS = {"filter_schema_settings"}


def _merge_settings_dicts(*dicts: dict[str, Any]) -> dict[str, Any]:
    """Merge multiple settings dictionaries with later ones taking precedence."""
    result = {}
    for d in dicts:
        if d: result.update(d)
    return result


def _get_global_settings(schema_name: str) -> dict[str, Any]:
    """Get settings from the FILTER_SCHEMA Django setting for a specific schema."""
    configured = getattr(django_settings, SETTINGS_NAME, None) or {}
    if not isinstance(configured, dict): return {}
    if schema_name in configured: return configured.get(schema_name) or {}
    if any(k in configured for k in KNOWN_SECTION_KEYS): return configured
    return {}


def _get_library_defaults() -> dict[str, Any]:
    """Get library default settings."""
    from ...defaults import LIBRARY_DEFAULTS
    return LIBRARY_DEFAULTS
