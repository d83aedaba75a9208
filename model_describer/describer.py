"""The model describe flow: resolve, introspect, report."""

import logging
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape
from sqlalchemy import MetaData, inspect

from .config import Settings
from .database.base import SchemaIntrospector
from .database.reflection import EngineSchemaIntrospector, MetadataSchemaIntrospector
from .database.type_mappers import TypeMapper
from .errors import ClassNotFoundError
from .introspector import ModelIntrospector
from .registry import ModelRegistry, parse_class_name, registry as default_registry
from .reporter import Reporter

logger = logging.getLogger(__name__)

SchemaFactory = Callable[[object], SchemaIntrospector]


def default_schema_factory(settings: Settings) -> SchemaFactory:
    """Schema source for a model: the configured database, else the mapped table's metadata.

    Models without a SQLAlchemy mapper and no configured database have
    no columns to report.
    """
    def factory(model) -> SchemaIntrospector:
        if settings.database_url:
            return EngineSchemaIntrospector(database_url=settings.database_url)
        mapper = inspect(type(model), raiseerr=False)
        if mapper is None:
            logger.debug("%s is not mapped, no columns to report", type(model).__name__)
            return MetadataSchemaIntrospector(MetaData())
        return MetadataSchemaIntrospector(mapper.local_table.metadata)
    return factory


class ModelDescriber:
    """Get model details (basic info, properties).

    Args:
        settings: Default namespace, default engine and output label
        registry: Where class names are looked up
        console: Rich console to write to
        schema_factory: Builds the schema introspector for a model
    """

    def __init__(
        self,
        settings: Settings,
        registry: Optional[ModelRegistry] = None,
        console: Optional[Console] = None,
        schema_factory: Optional[SchemaFactory] = None,
    ):
        self.settings = settings
        self.registry = registry or default_registry
        self.console = console or Console()
        self.schema_factory = schema_factory or default_schema_factory(settings)
        self.type_mapper = TypeMapper(settings.database_default)
        self.reporter = Reporter(self.console, scalar_type_label=settings.scalar_type_label)

    def resolve(self, class_argument: str) -> str:
        """Returns the fully qualified name for a class argument."""
        return parse_class_name(class_argument, self.settings.default_namespace)

    def run(self, class_argument: str) -> int:
        """Describe a model and return the process exit status."""
        class_name = self.resolve(class_argument)
        try:
            model_class = self.registry.load(class_name)
        except ClassNotFoundError as e:
            logger.debug("Lookup of %s failed: %s", class_name, e.details)
            self.console.print(f"[red]{escape(e.message)}[/red]")
            return 1
        model = model_class()

        self.console.print(f"[green]Model: {escape(class_name)}[/green]")

        with self.schema_factory(model) as schema:
            introspector = ModelIntrospector(schema, self.type_mapper)
            self.reporter.print_basic(introspector.basic_info(model))

            properties = introspector.property_info(model)
            columns = introspector.column_names(model)
            self.reporter.print_table(columns, properties)

        return 0
