import typer
from rich.console import Console

from src.crudhub.core.services import DbManageService, DbSessionService

console = Console()

db_app = typer.Typer(help="Database maintenance")


@db_app.command("init")
def init() -> None:
    """Create all tables that do not exist yet."""
    db_service = DbSessionService()
    try:
        DbManageService(db_service).create_all()
    finally:
        db_service.dispose()
    console.print("[green]✅ Database tables created[/green]")
