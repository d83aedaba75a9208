"""Storage type to scalar type mapping."""

from enum import Enum

from sqlalchemy import types as sqltypes


class ScalarType(str, Enum):
    """Scalar type labels reported for a column."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    INTEGER = "integer"  # boolean stored as 0/1
    BOOLEAN = "boolean"
    MIXED = "mixed"

    def __str__(self) -> str:
        return self.value


STRING_STORAGE_TYPES = frozenset({
    "string", "text", "date", "time", "guid", "datetimetz", "datetime", "decimal",
})
INT_STORAGE_TYPES = frozenset({"integer", "bigint", "smallint"})

# Engines without a native boolean column type
INTEGER_BOOLEAN_ENGINES = frozenset({"sqlite", "mysql"})


def scalar_type_of(storage_type: str, default_engine: str) -> ScalarType:
    """Convert a storage type name to a scalar type.

    Based on the column type conversion of barryvdh/laravel-ide-helper.
    ``boolean`` depends on the configured default engine, not on the
    engine that actually holds the column.
    """
    if storage_type in STRING_STORAGE_TYPES:
        return ScalarType.STRING
    if storage_type in INT_STORAGE_TYPES:
        return ScalarType.INT
    if storage_type == "boolean":
        if default_engine in INTEGER_BOOLEAN_ENGINES:
            return ScalarType.INTEGER
        return ScalarType.BOOLEAN
    if storage_type == "float":
        return ScalarType.FLOAT
    return ScalarType.MIXED


class TypeMapper:
    """Maps storage types to scalar types for one default engine."""

    def __init__(self, default_engine: str):
        self.default_engine = default_engine

    def to_scalar_type(self, storage_type: str) -> ScalarType:
        """Convert a storage type name to a scalar type."""
        return scalar_type_of(storage_type, self.default_engine)


def storage_type_name(sa_type: sqltypes.TypeEngine) -> str:
    """Convert a SQLAlchemy column type to a storage type name.

    Subclasses are checked before their bases (Text is a String,
    BigInteger is an Integer, Float is a Numeric, Enum is a String).
    Decorated types are described by the type they wrap.
    """
    if isinstance(sa_type, sqltypes.TypeDecorator):
        return storage_type_name(sa_type.impl_instance)

    # String types
    if isinstance(sa_type, sqltypes.Text):
        return "text"
    elif isinstance(sa_type, sqltypes.Uuid):
        return "guid"
    elif isinstance(sa_type, (sqltypes.String, sqltypes.Enum)):
        return "string"

    # Integer types
    elif isinstance(sa_type, sqltypes.BigInteger):
        return "bigint"
    elif isinstance(sa_type, sqltypes.SmallInteger):
        return "smallint"
    elif isinstance(sa_type, sqltypes.Integer):
        return "integer"

    # Numeric types
    elif isinstance(sa_type, sqltypes.Float):
        return "float"
    elif isinstance(sa_type, sqltypes.Numeric):
        return "decimal"

    # Boolean
    elif isinstance(sa_type, sqltypes.Boolean):
        return "boolean"

    # Date/Time types
    elif isinstance(sa_type, sqltypes.DateTime):
        return "datetimetz" if sa_type.timezone else "datetime"
    elif isinstance(sa_type, sqltypes.Date):
        return "date"
    elif isinstance(sa_type, sqltypes.Time):
        return "time"

    # Other types
    elif isinstance(sa_type, sqltypes.JSON):
        return "json"
    elif isinstance(sa_type, sqltypes.LargeBinary):
        return "blob"

    return getattr(sa_type, "__visit_name__", type(sa_type).__name__).lower()
