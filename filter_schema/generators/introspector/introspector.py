"""
ModelIntrospector implementation.
"""

import logging
from typing import Any, Collection, List, Optional

from django.db import models
from django.utils.functional import cached_property
from graphene_django.converter import convert_django_field

from ...core.settings import FilterSchemaSettings
from ...utils.normalization import model_matches, normalize_list
from ..filters.descriptors import Cardinality, EntityDescriptor, PropertyDescriptor
from .constants import FALLBACK_SCALAR, FIELD_TYPE_MAP

logger = logging.getLogger(__name__)


def get_entity_name(model: type[models.Model]) -> str:
    """Globally unique entity name of a model, e.g. ``"shop.Order"``."""
    return model._meta.label


def is_model_excluded(model: type[models.Model], settings: FilterSchemaSettings) -> bool:
    """True when the model's app or the model itself is excluded by ``settings``."""
    if model._meta.app_label.lower() in normalize_list(settings.excluded_apps):
        return True
    return model_matches(model, settings.excluded_models)


class ModelIntrospector:
    """
    Analyzes a Django model to produce the entity metadata filter types are built from.

    Args:
        model: Django model class
        schema_name: Schema whose settings apply
        settings: Explicit settings, overriding the schema's
        available_models: Models whose types are generated alongside this one.
            When given, relations to any other model are left out; otherwise
            only relations to excluded models are.
    """

    def __init__(
        self,
        model: type[models.Model],
        schema_name: Optional[str] = None,
        settings: Optional[FilterSchemaSettings] = None,
        available_models: Optional[Collection[type[models.Model]]] = None,
    ):
        self.model = model
        self.schema_name = schema_name or "default"
        self.settings = settings or FilterSchemaSettings.from_schema(self.schema_name)
        self.available_models = (
            frozenset(available_models) if available_models is not None else None
        )
        self._meta = getattr(model, "_meta", None)

    @property
    def entity_name(self) -> str:
        return get_entity_name(self.model)

    @cached_property
    def properties(self) -> List[PropertyDescriptor]:
        """Property metadata in ``_meta.get_fields()`` order."""
        if not self._meta: return []
        result = []
        for field in self._meta.get_fields():
            prop = self._describe_field(field)
            if prop is not None:
                result.append(prop)
        return result

    @cached_property
    def entity(self) -> EntityDescriptor:
        return EntityDescriptor(self.entity_name, tuple(self.properties))

    def _describe_field(self, field: Any) -> Optional[PropertyDescriptor]:
        if field.is_relation:
            return self._describe_relation(field)

        name = getattr(field, "name", None)
        if not name or name.startswith("_"):
            return None
        if getattr(field, "choices", None):
            return PropertyDescriptor.enum(name, self.build_enum_name(name))
        return PropertyDescriptor.scalar(name, self.get_scalar_type_name(field))

    def _describe_relation(self, field: Any) -> Optional[PropertyDescriptor]:
        related_model = getattr(field, "related_model", None)
        if related_model is None:
            # generic foreign keys have no single target
            return None

        if field.auto_created and not field.concrete:
            name = field.get_accessor_name()
        else:
            name = field.name
        if not name or name.startswith("_"):
            return None

        if not self.supports_relation_target(related_model):
            logger.debug(
                f"Skipping relation {self.entity_name}.{name} to "
                f"{get_entity_name(related_model)}: no types are generated for it"
            )
            return None

        if field.many_to_many or field.one_to_many:
            cardinality = Cardinality.MANY
        else:
            cardinality = Cardinality.ONE

        return PropertyDescriptor.relation(
            name,
            get_entity_name(related_model),
            cardinality=cardinality,
            persistable=self.is_persistable(related_model),
        )

    def supports_relation_target(self, model: type[models.Model]) -> bool:
        """Relations are kept only when the target's types are generated too."""
        if self.available_models is not None:
            return model in self.available_models
        return not is_model_excluded(model, self.settings)

    def build_enum_name(self, field_name: str) -> str:
        meta = self.model._meta
        return f"{meta.app_label}_{meta.object_name}_{field_name}_Enum"

    def get_scalar_type_name(self, field: Any) -> str:
        """GraphQL scalar name of a non-relational field."""
        for klass in type(field).__mro__:
            scalar = FIELD_TYPE_MAP.get(klass)
            if scalar is not None:
                return scalar._meta.name

        try:
            converted = convert_django_field(field)
            scalar_type = converted.get_type()
            name = getattr(getattr(scalar_type, "_meta", None), "name", None)
            if name:
                return name
        except Exception as e:
            logger.warning(
                f"Could not convert {self.entity_name}.{field.name} "
                f"({type(field).__name__}), using {FALLBACK_SCALAR._meta.name}: {e}"
            )
        return FALLBACK_SCALAR._meta.name

    def is_persistable(self, model: type[models.Model]) -> bool:
        """Unmanaged models and configured transient models are not persistable."""
        meta = getattr(model, "_meta", None)
        if meta is None or not meta.managed:
            return False
        return not model_matches(model, self.settings.transient_models)
