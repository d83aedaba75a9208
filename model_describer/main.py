"""model-describer - Main entry point."""

import typer
from rich.console import Console
from .commands import model
from .config import settings

app = typer.Typer(
    name="model-describer",
    help="Describe the table mapping of ORM models",
    add_completion=False,
)

# Add subcommands
app.add_typer(model.app, name="model")

console = Console()


@app.command()
def config():
    """Show current configuration."""
    console.print("[bold]Current Configuration[/bold]")
    console.print(f"  Default namespace: {settings.default_namespace or 'Not set'}")
    console.print(f"  Default engine: {settings.database_default}")
    console.print(f"  Database URL: {settings.database_url or 'Not set (model metadata)'}")
    console.print(f"  Scalar type label: {settings.scalar_type_label}")


@app.callback()
def main():
    """
    model-describer - Describe the table mapping of ORM models.

    Examples:

        model-describer model describe User

        model-describer model describe .myapp.models.User

        model-describer config
    """
    pass


if __name__ == "__main__":
    app()
