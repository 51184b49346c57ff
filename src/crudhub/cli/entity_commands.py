"""Inspect and seed products and projects directly against the database."""

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.table import Table

from src.crudhub.core.errors import CrudHubError
from src.crudhub.core.services import (
    DbManageService,
    DbSessionService,
    ProductService,
    ProjectService,
)
from src.crudhub.entities.service.product import ProductCreate

console = Console()

products_app = typer.Typer(help="Manage catalog products")
projects_app = typer.Typer(help="Inspect projects")


@contextmanager
def _db_service() -> Iterator[DbSessionService]:
    db_service = DbSessionService()
    try:
        DbManageService(db_service).create_all()
        yield db_service
    finally:
        db_service.dispose()


@products_app.command("list")
def list_products(
    limit: int | None = typer.Option(None, "--limit", "-l", help="Maximum number of products to show"),
) -> None:
    """List products in creation order."""
    with _db_service() as db_service, db_service.session_scope() as session:
        products = ProductService(session).list_products(limit=limit)

    if not products:
        console.print("[yellow]No products found[/yellow]")
        return

    table = Table(title="Products")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Price", style="magenta", justify="right")
    table.add_column("Description")
    for product in products:
        table.add_row(product.id, product.name, f"{product.price:.2f}", product.description)

    console.print(table)
    console.print(f"\n[green]Found {len(products)} products[/green]")


@products_app.command("add")
def add_product(
    name: str = typer.Argument(..., help="Product name"),
    price: float = typer.Argument(..., help="Unit price"),
    description: str = typer.Option("", "--description", "-d", help="Description"),
) -> None:
    """Add a product to the catalog."""
    try:
        with _db_service() as db_service, db_service.session_scope() as session:
            product = ProductService(session).create_product(
                ProductCreate(name=name, price=price, description=description)
            )
    except CrudHubError as e:
        console.print(f"[red]❌ {e.message}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Created product {product.id}[/green]")


@projects_app.command("list")
def list_projects() -> None:
    """List projects with their task counts."""
    with _db_service() as db_service, db_service.session_scope() as session:
        projects = ProjectService(session).list_projects()

    if not projects:
        console.print("[yellow]No projects found[/yellow]")
        return

    table = Table(title="Projects")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Tasks", justify="right")
    table.add_column("Next deadline", style="magenta")
    for project in projects:
        next_deadline = min((task.deadline for task in project.tasks), default=None)
        table.add_row(
            project.id,
            project.name,
            str(len(project.tasks)),
            next_deadline.isoformat() if next_deadline else "-",
        )
    console.print(table)
