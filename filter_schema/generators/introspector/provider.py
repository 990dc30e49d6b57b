"""
Django metadata provider.

Supplies EntityDescriptor values for installed Django models.
"""

import logging
from typing import Collection, Iterable, List, Optional

from django.apps import apps
from django.db import models

from ...core.settings import FilterSchemaSettings
from ..filters.descriptors import EntityDescriptor
from .introspector import ModelIntrospector, is_model_excluded

logger = logging.getLogger(__name__)


class DjangoMetadataProvider:
    """Entity metadata for Django models, honouring excluded apps and models."""

    def __init__(
        self,
        schema_name: str = "default",
        settings: Optional[FilterSchemaSettings] = None,
    ):
        self.schema_name = schema_name
        self.settings = settings or FilterSchemaSettings.from_schema(schema_name)

    def get_entity(
        self,
        model: type[models.Model],
        available_models: Optional[Collection[type[models.Model]]] = None,
    ) -> EntityDescriptor:
        return ModelIntrospector(
            model,
            schema_name=self.schema_name,
            settings=self.settings,
            available_models=available_models,
        ).entity

    def is_excluded(self, model: type[models.Model]) -> bool:
        return is_model_excluded(model, self.settings)

    def get_models(
        self, app_labels: Optional[Iterable[str]] = None
    ) -> List[type[models.Model]]:
        if app_labels:
            candidates = []
            for label in app_labels:
                candidates.extend(apps.get_app_config(label).get_models())
        else:
            candidates = list(apps.get_models())
        return [model for model in candidates if not self.is_excluded(model)]

    def get_entities(
        self,
        models_: Optional[Iterable[type[models.Model]]] = None,
        app_labels: Optional[Iterable[str]] = None,
    ) -> List[EntityDescriptor]:
        """
        Entity metadata for the given models, or for every installed model.

        Relations are only described when their target is part of the same
        set, so every type the result references is generated with it.

        Args:
            models_: Explicit models; exclusion settings are not applied to them
            app_labels: Restrict discovery to these apps when no models are given
        """
        if models_ is None:
            models_ = self.get_models(app_labels)
        models_ = list(models_)
        entities = [self.get_entity(model, available_models=models_) for model in models_]
        logger.debug(
            f"Collected {len(entities)} entities for schema {self.schema_name}"
        )
        return entities
