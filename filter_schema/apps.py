"""
Django app configuration for the filter-schema library.
"""

from django.apps import AppConfig as BaseAppConfig


class AppConfig(BaseAppConfig):
    """Django app configuration for filter-schema."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "filter_schema"
    verbose_name = "Filter Schema"
    label = "filter_schema"
