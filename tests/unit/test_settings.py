"""
Unit tests for filter schema settings loading.
"""

import pytest
from django.test import override_settings

from filter_schema.core.settings import FilterSchemaSettings
from filter_schema.defaults import DEFAULT_SCALAR_TYPES

pytestmark = pytest.mark.unit


def test_global_section_is_merged_over_defaults():
    settings = FilterSchemaSettings.from_schema("default")

    assert settings.input_type_prefix == "inp_"
    assert settings.scalar_types == DEFAULT_SCALAR_TYPES
    assert settings.transient_models == ["tests.Snapshot"]
    assert "contenttypes" in settings.excluded_apps


def test_schema_section_overrides_defaults():
    settings = FilterSchemaSettings.from_schema("reporting")

    assert settings.input_type_prefix == "rpt_"
    assert settings.scalar_types == ["String"]
    assert settings.generate_descriptions is False
    assert settings.transient_models == []


def test_unknown_keys_are_ignored_and_lists_are_copied():
    config = {"filter_schema_settings": {"unknown_flag": True, "excluded_models": ("a.B",)}}
    with override_settings(FILTER_SCHEMA=config):
        first = FilterSchemaSettings.from_schema("default")
        second = FilterSchemaSettings.from_schema("default")

    assert first.excluded_models == ["a.B"]
    first.scalar_types.append("Money")
    assert "Money" not in second.scalar_types
    assert not hasattr(first, "unknown_flag")


def test_missing_setting_falls_back_to_defaults():
    with override_settings(FILTER_SCHEMA=None):
        settings = FilterSchemaSettings.from_schema("default")

    assert settings.transient_models == []
    assert settings.generate_descriptions is True
