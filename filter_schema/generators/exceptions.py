"""
Custom exceptions for filter schema generation.

This module defines specific exception types for better error handling
and debugging when deriving filter and order-by input types.
"""

from typing import Any, Iterable, Optional


class FilterSchemaError(Exception):
    """Base exception for filter schema errors."""

    def __init__(self, message: str, entity_name: Optional[str] = None):
        self.entity_name = entity_name
        super().__init__(message)


class InvalidArgumentError(FilterSchemaError):
    """Raised when a generator receives an empty or malformed argument."""

    def __init__(
        self,
        message: str,
        argument_name: Optional[str] = None,
        entity_name: Optional[str] = None,
    ):
        self.argument_name = argument_name
        super().__init__(message, entity_name)


class UnsupportedPropertyKindError(FilterSchemaError):
    """Raised when property metadata carries a kind outside SCALAR, ENUM and RELATION."""

    def __init__(
        self,
        message: str,
        entity_name: Optional[str] = None,
        property_name: Optional[str] = None,
        kind: Optional[Any] = None,
    ):
        self.property_name = property_name
        self.kind = kind
        super().__init__(message, entity_name)


class SchemaConflictError(FilterSchemaError):
    """Raised when two different input types are registered under one name."""

    def __init__(self, message: str, type_name: Optional[str] = None):
        self.type_name = type_name
        super().__init__(message)


class UnresolvedTypeReferenceError(FilterSchemaError):
    """Raised when registered input types reference types nobody registered."""

    def __init__(self, message: str, references: Optional[Iterable[str]] = None):
        self.references = sorted(references or [])
        super().__init__(message)
