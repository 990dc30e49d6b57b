"""
FilterSchemaRegistry implementation.
"""

import logging
import threading
from functools import partial
from typing import Any, Dict, Iterable, List, Optional, Set, Type

import graphene
from graphql import print_ast
from graphql.language import DocumentNode

from ...generators.exceptions import SchemaConflictError, UnresolvedTypeReferenceError
from ...generators.filters.descriptors import SORT_ORDER_TYPE_NAME, InputTypeDefinition
from ...generators.filters.types import SortOrderEnum

logger = logging.getLogger(__name__)

BUILTIN_SCALARS: Dict[str, Type[graphene.Scalar]] = {
    "String": graphene.String,
    "Int": graphene.Int,
    "Float": graphene.Float,
    "Boolean": graphene.Boolean,
    "ID": graphene.ID,
    "Date": graphene.Date,
    "DateTime": graphene.DateTime,
    "Time": graphene.Time,
    "Decimal": graphene.Decimal,
    "UUID": graphene.UUID,
    "JSONString": graphene.JSONString,
    "BigInt": graphene.BigInt,
    "Base64": graphene.Base64,
}


class FilterSchemaRegistry:
    """
    Collects generated input type definitions and turns them into graphene types.

    Definitions may reference each other before the referenced type is
    registered; references are only resolved in ``build_graphene_types``.
    """

    def __init__(self, schema_name: str = "default"):
        self.schema_name = schema_name
        self._definitions: dict[str, InputTypeDefinition] = {}
        self._scalars: dict[str, Any] = dict(BUILTIN_SCALARS)
        self._graphene_types: dict[str, Type[graphene.InputObjectType]] = {}
        self._lock = threading.Lock()

    def register(self, definition: InputTypeDefinition) -> InputTypeDefinition:
        """
        Register a definition under its name.

        Registering an identical definition again is a no-op.

        Raises:
            SchemaConflictError: if a different definition already uses the name
        """
        with self._lock:
            existing = self._definitions.get(definition.name)
            if existing is not None:
                if existing == definition:
                    return existing
                raise SchemaConflictError(
                    f"Input type '{definition.name}' is already registered "
                    f"in schema '{self.schema_name}' with a different definition",
                    type_name=definition.name,
                )
            self._definitions[definition.name] = definition
            self._graphene_types.clear()
        logger.debug(f"Registered input type {definition.name} in {self.schema_name}")
        return definition

    def register_all(self, definitions: Iterable[InputTypeDefinition]) -> None:
        for definition in definitions:
            self.register(definition)

    def register_scalar(self, name: str, scalar: Any) -> None:
        """Make a custom graphene scalar resolvable by name."""
        with self._lock:
            self._scalars[name] = scalar
            self._graphene_types.clear()

    def get(self, name: str) -> Optional[InputTypeDefinition]:
        return self._definitions.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    @property
    def names(self) -> List[str]:
        return list(self._definitions.keys())

    @property
    def definitions(self) -> List[InputTypeDefinition]:
        return list(self._definitions.values())

    def clear(self) -> None:
        with self._lock:
            self._definitions.clear()
            self._graphene_types.clear()

    def _is_known(self, type_name: str) -> bool:
        return (
            type_name in self._definitions
            or type_name in self._scalars
            or type_name == SORT_ORDER_TYPE_NAME
        )

    def missing_references(self) -> Set[str]:
        """Type names referenced by registered definitions that cannot be resolved."""
        missing = set()
        for definition in self._definitions.values():
            for type_name in definition.referenced_type_names:
                if not self._is_known(type_name):
                    missing.add(type_name)
        return missing

    def resolve_type(self, type_name: str) -> Any:
        if type_name in self._scalars:
            return self._scalars[type_name]
        if type_name == SORT_ORDER_TYPE_NAME:
            return SortOrderEnum
        if type_name in self._graphene_types:
            return self._graphene_types[type_name]
        raise UnresolvedTypeReferenceError(
            f"Cannot resolve input type '{type_name}' in schema '{self.schema_name}'",
            references=[type_name],
        )

    def build_graphene_types(self) -> Dict[str, Type[graphene.InputObjectType]]:
        """
        Create a graphene InputObjectType for every registered definition.

        Raises:
            UnresolvedTypeReferenceError: if any referenced type is unknown
        """
        missing = self.missing_references()
        if missing:
            raise UnresolvedTypeReferenceError(
                f"Unresolved input type references in schema '{self.schema_name}': "
                f"{', '.join(sorted(missing))}",
                references=missing,
            )

        with self._lock:
            for name, definition in self._definitions.items():
                if name not in self._graphene_types:
                    self._graphene_types[name] = self._create_graphene_type(definition)
            built = dict(self._graphene_types)

        logger.info(f"Built {len(built)} filter input types for schema {self.schema_name}")
        return built

    def _create_graphene_type(
        self, definition: InputTypeDefinition
    ) -> Type[graphene.InputObjectType]:
        attrs: dict[str, Any] = {
            "Meta": type(
                "Meta",
                (),
                {"name": definition.name, "description": definition.description},
            )
        }
        for field in definition.fields:
            field_type: Any = partial(self.resolve_type, field.type_name)
            if field.is_list:
                field_type = graphene.List(field_type)
            attrs[field.name] = graphene.InputField(
                field_type, name=field.name, description=field.description
            )
        return type(definition.name, (graphene.InputObjectType,), attrs)

    def to_sdl(self) -> str:
        """Print every registered definition as GraphQL SDL."""
        document = DocumentNode(
            definitions=tuple(d.to_ast() for d in self._definitions.values())
        )
        return print_ast(document)

