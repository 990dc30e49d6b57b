"""
Schema assembly for filter input types.

Runs once at schema build time: generates the scalar condition types, then
the condition and order-by types of every entity, and hands them to a
FilterSchemaRegistry which resolves the cross references.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence

from ...core.settings import FilterSchemaSettings
from .descriptors import EntityDescriptor, InputTypeDefinition, PropertyKind
from .generator import FilterTypesGenerator

if TYPE_CHECKING:
    from ...core.registry import FilterSchemaRegistry

logger = logging.getLogger(__name__)


class FilterSchemaBuilder:
    """
    Builds the filter condition and order-by types of a set of entities.

    Attributes:
        generator: FilterTypesGenerator used for every type
        settings: Filter schema settings
        schema_name: Schema name for multi-schema support
    """

    def __init__(
        self,
        generator: Optional[FilterTypesGenerator] = None,
        settings: Optional[FilterSchemaSettings] = None,
        schema_name: str = "default",
    ):
        self.schema_name = schema_name
        if settings is None:
            settings = generator.settings if generator else FilterSchemaSettings.from_schema(schema_name)
        self.settings = settings
        self.generator = generator or FilterTypesGenerator(
            settings=self.settings, schema_name=schema_name
        )

    def collect_scalar_type_names(self, entities: Iterable[EntityDescriptor]) -> List[str]:
        """Configured scalar names plus every scalar used by a filterable property."""
        names = set(self.settings.scalar_types or [])
        for entity in entities:
            for prop in entity.properties:
                if prop.kind is PropertyKind.SCALAR and self.generator.supports_cardinality(prop):
                    names.add(prop.type_name)
        return sorted(names)

    def generate_definitions(
        self, entities: Sequence[EntityDescriptor]
    ) -> List[InputTypeDefinition]:
        definitions: List[InputTypeDefinition] = [
            self.generator.generate_scalar_filter_condition_type(name)
            for name in self.collect_scalar_type_names(entities)
        ]
        for entity in entities:
            definitions.append(self.generator.generate_filter_condition_type(entity))
            definitions.append(self.generator.generate_order_by_type(entity))
        return definitions

    def build(
        self,
        entities: Sequence[EntityDescriptor],
        registry: Optional["FilterSchemaRegistry"] = None,
    ) -> "FilterSchemaRegistry":
        """
        Generate and register all filter types of ``entities``.

        Args:
            entities: Entity metadata to derive types from
            registry: Target registry; a fresh one is created when omitted

        Returns:
            The registry holding the generated definitions
        """
        if registry is None:
            from ...core.registry import FilterSchemaRegistry

            registry = FilterSchemaRegistry(self.schema_name)

        entities = list(entities)
        definitions = self.generate_definitions(entities)
        registry.register_all(definitions)

        logger.info(
            f"Registered {len(definitions)} filter input types for "
            f"{len(entities)} entities in schema {self.schema_name}"
        )
        return registry


__all__ = ["FilterSchemaBuilder"]
