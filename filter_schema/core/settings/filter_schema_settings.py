"""
FilterSchemaSettings implementation.
"""

from dataclasses import dataclass, field
from typing import List

from .base import _get_global_settings, _get_library_defaults, _merge_settings_dicts


@dataclass
class FilterSchemaSettings:
    """Settings for filter and order-by input type generation."""
    input_type_prefix: str = "inp_"
    scalar_types: List[str] = field(default_factory=list)
    excluded_apps: List[str] = field(default_factory=list)
    excluded_models: List[str] = field(default_factory=list)
    transient_models: List[str] = field(default_factory=list)
    generate_descriptions: bool = True

    @classmethod
    def from_schema(cls, schema_name: str = "default") -> "FilterSchemaSettings":
        defaults = _get_library_defaults().get("filter_schema_settings", {})
        global_settings = _get_global_settings(schema_name).get("filter_schema_settings", {})
        merged = _merge_settings_dicts(defaults, global_settings)
        valid_fields = set(cls.__dataclass_fields__.keys())
        return cls(**{
            k: list(v) if isinstance(v, (list, tuple)) else v
            for k, v in merged.items()
            if k in valid_fields
        })
