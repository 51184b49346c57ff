"""Command line interface for running and inspecting crudhub."""

import typer

from .db_commands import db_app
from .entity_commands import products_app, projects_app
from .serve_commands import serve

app = typer.Typer(
    help="crudhub - storefront and project tracker API",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("serve")(serve)
app.add_typer(db_app, name="db")
app.add_typer(products_app, name="products")
app.add_typer(projects_app, name="projects")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
