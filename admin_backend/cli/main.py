"""Admin backend CLI.

Usage:
    admin-backend serve          Run the API server
    admin-backend init-db        Create database tables
    admin-backend seed           Load the default apps and sample chats
    admin-backend create-user    Create a user that can log in
    admin-backend version        Show the installed version
"""

import logging

import typer
from rich.console import Console
from rich.table import Table

from admin_backend.config import load_settings
from admin_backend.db.models import UserRole

_log = logging.getLogger(__name__)

app = typer.Typer(
    name="admin-backend",
    help="Admin dashboard backend",
    no_args_is_help=True,
)

console = Console()


@app.command()
def version():
    """Show the installed version."""
    from admin_backend.api.main import get_version

    console.print(f"[bold]admin-backend[/bold] v{get_version()}")


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the API server with uvicorn."""
    import uvicorn

    settings = load_settings()
    bind_host = host or settings.host
    bind_port = port or settings.port
    console.print(f"Serving on [cyan]http://{bind_host}:{bind_port}[/cyan]")
    uvicorn.run(
        "admin_backend.api.main:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level,
    )


@app.command("init-db")
def init_db_cmd():
    """Create all database tables."""
    from admin_backend.db.connection import init_db

    init_db()
    console.print("[green]Database initialized[/green]")


@app.command()
def seed():
    """Insert the default app catalogue and sample chats."""
    from admin_backend.db.connection import get_db_context, init_db
    from admin_backend.services.seed import seed_all

    init_db()
    with get_db_context() as db:
        result = seed_all(db)

    table = Table(title="Seed")
    table.add_column("Entity", style="cyan")
    table.add_column("Inserted", justify="right")
    table.add_row("apps", str(result.apps))
    table.add_row("chats", str(result.chats))
    console.print(table)


@app.command("create-user")
def create_user(
    email: str = typer.Argument(..., help="Login email"),
    password: str = typer.Option(
        ..., "--password", prompt=True, hide_input=True, help="Login password"
    ),
    role: UserRole = typer.Option(UserRole.admin, "--role", "-r", help="User role"),
    first_name: str = typer.Option("Admin", "--first-name", help="First name"),
    last_name: str = typer.Option("User", "--last-name", help="Last name"),
):
    """Create an active user that can log in."""
    from admin_backend.db.connection import get_db_context, init_db
    from admin_backend.errors import ConflictError
    from admin_backend.services.user_service import UserService

    init_db()
    with get_db_context() as db:
        svc = UserService(db)
        try:
            user = svc.create_account(
                email=email,
                password=password,
                first_name=first_name,
                last_name=last_name,
                role=role,
            )
        except ConflictError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
    console.print(f"[green]Created user {user.username}[/green] ({user.id})")


if __name__ == "__main__":
    app()
