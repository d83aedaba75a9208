"""Schema introspection module for model-describer.

This module provides the storage type vocabulary and SQLAlchemy
backed column lookups used to describe a model's table.
"""

from .base import SchemaIntrospector
from .reflection import MetadataSchemaIntrospector, EngineSchemaIntrospector
from .type_mappers import ScalarType, TypeMapper, scalar_type_of, storage_type_name

__all__ = [
    # Base classes
    "SchemaIntrospector",
    # Introspectors
    "MetadataSchemaIntrospector",
    "EngineSchemaIntrospector",
    # Type mapping
    "ScalarType",
    "TypeMapper",
    "scalar_type_of",
    "storage_type_name",
]
