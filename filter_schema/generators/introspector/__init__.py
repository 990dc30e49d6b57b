"""
Model Introspection System Package.
"""

from .introspector import ModelIntrospector, get_entity_name, is_model_excluded
from .provider import DjangoMetadataProvider

__all__ = [
    "ModelIntrospector",
    "DjangoMetadataProvider",
    "get_entity_name",
    "is_model_excluded",
]
