"""Model metadata interface and its SQLAlchemy implementation."""

from typing import Dict, List

from sqlalchemy import Integer, inspect

from .database.type_mappers import storage_type_name

DEFAULT_PER_PAGE = 15

ENTITY_METADATA_ACCESSORS = (
    "get_table", "get_key_name", "get_key_type", "get_incrementing", "get_per_page",
    "get_fillable", "get_guarded", "get_visible", "get_hidden", "get_casts",
)


class EntityMetadata:
    """Interface every describable model implements.

    The describer only talks to models through these accessors, so any
    class can be described as long as it subclasses this one. It is a
    plain class rather than an ABC so it can be mixed into declarative
    classes that carry their own metaclass.
    """

    def get_table(self) -> str:
        """Name of the table backing the model."""
        raise NotImplementedError

    def get_key_name(self) -> str:
        """Name of the primary key column."""
        raise NotImplementedError

    def get_key_type(self) -> str:
        """Storage type of the primary key."""
        raise NotImplementedError

    def get_incrementing(self) -> bool:
        """Whether the primary key is auto-incrementing."""
        raise NotImplementedError

    def get_per_page(self) -> int:
        """Default number of models per page."""
        raise NotImplementedError

    def get_fillable(self) -> List[str]:
        """Mass assignable columns."""
        raise NotImplementedError

    def get_guarded(self) -> List[str]:
        """Columns protected from mass assignment."""
        raise NotImplementedError

    def get_visible(self) -> List[str]:
        """Columns included when the model is serialized."""
        raise NotImplementedError

    def get_hidden(self) -> List[str]:
        """Columns left out when the model is serialized."""
        raise NotImplementedError

    def get_casts(self) -> Dict[str, str]:
        """Attribute casts keyed by column name."""
        raise NotImplementedError


class DescribableModel(EntityMetadata):
    """EntityMetadata for SQLAlchemy declarative models.

    Mix into a mapped class and declare the describer attributes on it::

        class User(Base, DescribableModel):
            __tablename__ = "users"
            __fillable__ = ("name", "email")
            __hidden__ = ("password",)
            __casts__ = {"is_active": "boolean"}

    Unset attributes fall back to Eloquent's defaults: everything
    guarded, 15 models per page, nothing visible or hidden.
    """

    __key_type__ = None
    __incrementing__ = None
    __per_page__ = DEFAULT_PER_PAGE
    __fillable__ = ()
    __guarded__ = ("*",)
    __visible__ = ()
    __hidden__ = ()
    __casts__ = {}

    @classmethod
    def _primary_key_columns(cls):
        return inspect(cls).primary_key

    def get_table(self) -> str:
        return self.__table__.name

    def get_key_name(self) -> str:
        return self._primary_key_columns()[0].name

    def get_key_type(self) -> str:
        if self.__key_type__ is not None:
            return self.__key_type__
        return storage_type_name(self._primary_key_columns()[0].type)

    def get_incrementing(self) -> bool:
        if self.__incrementing__ is not None:
            return self.__incrementing__
        columns = self._primary_key_columns()
        if len(columns) != 1:
            return False
        key = columns[0]
        return isinstance(key.type, Integer) and key.autoincrement is not False

    def get_per_page(self) -> int:
        return self.__per_page__

    def get_fillable(self) -> List[str]:
        return list(self.__fillable__)

    def get_guarded(self) -> List[str]:
        return list(self.__guarded__)

    def get_visible(self) -> List[str]:
        return list(self.__visible__)

    def get_hidden(self) -> List[str]:
        return list(self.__hidden__)

    def get_casts(self) -> Dict[str, str]:
        """Declared casts, preceded by the key cast when the key increments."""
        if self.get_incrementing():
            return {self.get_key_name(): self.get_key_type(), **self.__casts__}
        return dict(self.__casts__)
