"""Read-only model introspection."""

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet

from .database.base import SchemaIntrospector
from .database.type_mappers import ScalarType, TypeMapper
from .models import EntityMetadata

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrimaryKeyInfo:
    """Primary key of a model."""
    name: str
    storage_type: str
    incrementing: bool


@dataclass(frozen=True)
class BasicInfo:
    """Table name, primary key and pagination default of a model."""
    table_name: str
    primary_key: PrimaryKeyInfo
    default_page_size: int


@dataclass(frozen=True)
class PropertyInfo:
    """Per-column metadata of a model, keyed by column name."""
    scalar_types: Dict[str, ScalarType] = field(default_factory=dict)
    storage_types: Dict[str, str] = field(default_factory=dict)
    fillable: FrozenSet[str] = frozenset()
    guarded: FrozenSet[str] = frozenset()
    visible: FrozenSet[str] = frozenset()
    hidden: FrozenSet[str] = frozenset()
    casts: Dict[str, str] = field(default_factory=dict)


class ModelIntrospector:
    """Collects BasicInfo and PropertyInfo snapshots for models."""

    def __init__(self, schema: SchemaIntrospector, type_mapper: TypeMapper):
        self.schema = schema
        self.type_mapper = type_mapper

    def basic_info(self, model: EntityMetadata) -> BasicInfo:
        """Returns model basic info such as table name, primary key and pagination default."""
        return BasicInfo(
            table_name=model.get_table(),
            primary_key=PrimaryKeyInfo(
                name=model.get_key_name(),
                storage_type=model.get_key_type(),
                incrementing=model.get_incrementing(),
            ),
            default_page_size=model.get_per_page(),
        )

    def column_names(self, model: EntityMetadata):
        """Returns the table's column names in table order."""
        return self.schema.get_column_names(model.get_table())

    def property_info(self, model: EntityMetadata) -> PropertyInfo:
        """Returns column types and the model's mass assignment, visibility and cast settings."""
        table = model.get_table()
        storage_types = self.schema.get_column_types(table)
        logger.debug("Table %s has columns %s", table, list(storage_types))

        return PropertyInfo(
            scalar_types={
                column: self.type_mapper.to_scalar_type(storage_type)
                for column, storage_type in storage_types.items()
            },
            storage_types=storage_types,
            fillable=frozenset(model.get_fillable()),
            guarded=frozenset(model.get_guarded()),
            visible=frozenset(model.get_visible()),
            hidden=frozenset(model.get_hidden()),
            casts=dict(model.get_casts()),
        )
