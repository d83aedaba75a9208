"""Model commands - describe a model's table mapping."""

import logging
from typing import Optional

import typer
from typing_extensions import Annotated
from rich.console import Console
from rich.logging import RichHandler

from ..config import settings
from ..describer import ModelDescriber

app = typer.Typer(help="Inspect ORM models")
console = Console()


@app.callback()
def main():
    """Inspect ORM models."""
    pass


def _configure_logging(verbose: bool):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@app.command("describe")
def describe(
    class_name: Annotated[str, typer.Argument(metavar="CLASS", help="Described model class")],
    namespace: Annotated[Optional[str], typer.Option("--namespace", "-n", help="Namespace for class names that are not fully qualified")] = None,
    database_url: Annotated[Optional[str], typer.Option("--database-url", help="Reflect columns from this database instead of model metadata")] = None,
    engine: Annotated[Optional[str], typer.Option("--engine", help="Default storage engine (sqlite, mysql, postgresql, ...)")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
):
    """Get model details (basic info, properties)."""
    _configure_logging(verbose)

    overrides = {}
    if namespace is not None:
        overrides["default_namespace"] = namespace
    if database_url is not None:
        overrides["database_url"] = database_url
    if engine is not None:
        overrides["database_default"] = engine
    run_settings = settings.model_copy(update=overrides)

    describer = ModelDescriber(run_settings, console=console)
    exit_code = describer.run(class_name)
    if exit_code:
        raise typer.Exit(exit_code)
