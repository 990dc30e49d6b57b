"""
Default configuration for the filter-schema library.

Each section mirrors one of the dataclasses defined in
``filter_schema.core.settings``. Projects override values through the
``FILTER_SCHEMA`` Django setting, either globally or per schema name.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "filter-schema"

DEFAULT_SCALAR_TYPES = [
    "String",
    "Int",
    "Float",
    "Boolean",
    "ID",
    "Date",
    "DateTime",
    "Time",
    "Decimal",
    "UUID",
]

LIBRARY_DEFAULTS: dict[str, Any] = {
    "filter_schema_settings": {
        "input_type_prefix": "inp_",
        "scalar_types": list(DEFAULT_SCALAR_TYPES),
        "excluded_apps": ["admin", "auth", "contenttypes", "sessions"],
        "excluded_models": [],
        "transient_models": [],
        "generate_descriptions": True,
    },
}
